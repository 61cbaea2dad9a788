#!/usr/bin/env python3
"""Lenormand board: local dev API server (stdlib only).

Serves a JSON API wrapping the backend reading engine, for a board UI that
renders cells and highlights and for a narrative requester that needs the
geometry context of the selected house.

Run from repo root:
  python frontend/server.py [--spread relogio] [--seed 7]

Then query:
  http://127.0.0.1:8000/api/state
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import socket
import sys
import threading
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, HTTPServer
from socketserver import ThreadingMixIn
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import parse_qs, urlsplit


REPO_ROOT = Path(__file__).resolve().parents[1]
BACKEND_ROOT = REPO_ROOT / "backend"

# Ensure backend package import works
sys.path.insert(0, str(BACKEND_ROOT))

from lenormand_board.api import ReadingEngine
from lenormand_board.core import (
    CARD_NAMES, CLOCK, CONCEPTUAL_AXES, SpreadType, board_size, house_for,
)


LOGGER = logging.getLogger("lenormand.server")


class PayloadTooLargeError(ValueError):
    pass


class RequestReadTimeoutError(ValueError):
    pass


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"LUMINA_RNG_SEED must be an integer, got {raw!r}") from e


def _json_read(
    rfile,
    *,
    content_length: Optional[int],
    max_bytes: int = 1_000_000,
    socket_obj: Optional[socket.socket] = None,
    read_timeout_s: Optional[float] = None,
) -> Dict[str, Any]:
    if content_length is None:
        raise ValueError("Missing Content-Length")

    max_allowed = int(os.environ.get("LUMINA_HTTP_MAX", str(max_bytes)))
    if content_length < 0:
        raise ValueError("Invalid Content-Length")
    if content_length > max_allowed:
        raise PayloadTooLargeError("Payload too large")

    prev_timeout = None
    if socket_obj is not None and read_timeout_s is not None:
        prev_timeout = socket_obj.gettimeout()
        socket_obj.settimeout(read_timeout_s)

    try:
        raw = rfile.read(content_length) if content_length > 0 else b""
    except (TimeoutError, socket.timeout) as e:
        raise RequestReadTimeoutError("Request body read timed out") from e
    finally:
        if socket_obj is not None and read_timeout_s is not None:
            socket_obj.settimeout(prev_timeout)

    if not raw:
        return {}
    try:
        body = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValueError(f"Invalid JSON: {e}") from e
    if not isinstance(body, dict):
        raise ValueError("JSON body must be an object")
    return body


def _json_write(handler: BaseHTTPRequestHandler, status: int, payload: Dict[str, Any]) -> None:
    data = json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
    handler.send_response(status)
    handler.send_header("Content-Type", "application/json; charset=utf-8")
    handler.send_header("Cache-Control", "no-store")
    handler.send_header("Content-Length", str(len(data)))
    # Same-origin by default; allow localhost tools to talk to it.
    handler.send_header("Access-Control-Allow-Origin", "*")
    handler.end_headers()
    handler.wfile.write(data)


def _bad(handler: BaseHTTPRequestHandler, msg: str, status: int = 400) -> None:
    _json_write(handler, status, {"ok": False, "error": msg})


def _opt_int(body: Dict[str, Any], key: str) -> Optional[int]:
    v = body.get(key)
    if v is None:
        return None
    if isinstance(v, bool) or not isinstance(v, (int, str)):
        raise ValueError(f"{key} must be an integer")
    try:
        return int(v)
    except ValueError as e:
        raise ValueError(f"{key} must be an integer") from e


def _defs() -> Dict[str, Any]:
    cards = [{"id": i + 1, "name": name} for i, name in enumerate(CARD_NAMES)]
    spreads = [{"id": s.value, "size": board_size(s)} for s in SpreadType]
    clock_houses = [house_for(SpreadType.CLOCK, i) for i in range(CLOCK.total)]
    axes = [{"pair": sorted(pair), "name": name} for pair, name in CONCEPTUAL_AXES.items()]
    return {"cards": cards, "spreads": spreads, "clock_houses": clock_houses, "axes": axes}


class _State:
    engine: ReadingEngine
    # fallback seed for /api/reset, set once by main()
    seed: Optional[int]

    def __init__(self) -> None:
        self.seed = None
        self.engine = ReadingEngine()

STATE = _State()
STATE_LOCK = threading.RLock()


class ThreadingHTTPServer(ThreadingMixIn, HTTPServer):
    daemon_threads = True


class Handler(BaseHTTPRequestHandler):
    def log_message(self, format: str, *args: Any) -> None:
        LOGGER.debug("http_request", extra={"client": self.address_string(), "line": format % args})

    def do_OPTIONS(self) -> None:
        self.send_response(HTTPStatus.NO_CONTENT)
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "GET,POST,OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        self.end_headers()

    def do_GET(self) -> None:
        if self.path.startswith("/api/"):
            self._handle_api_get()
            return
        _bad(self, "No such endpoint", 404)

    def do_POST(self) -> None:
        if self.path.startswith("/api/"):
            self._handle_api_post()
            return
        _bad(self, "No such endpoint", 404)

    def _handle_api_get(self) -> None:
        url = urlsplit(self.path)
        query = {k: v[-1] for k, v in parse_qs(url.query).items()}
        try:
            if url.path == "/api/defs":
                _json_write(self, 200, {"ok": True, "defs": _defs()})
                return
            if url.path == "/api/state":
                with STATE_LOCK:
                    state = STATE.engine.state()
                _json_write(self, 200, {"ok": True, "state": state})
                return
            if url.path == "/api/highlights":
                with STATE_LOCK:
                    selected = STATE.engine.selected
                    highlights = STATE.engine.highlights()
                _json_write(self, 200, {"ok": True, "selected": selected, "highlights": highlights})
                return
            if url.path == "/api/relations":
                with STATE_LOCK:
                    try:
                        rel = STATE.engine.relations()
                    except ValueError as e:
                        _bad(self, str(e), 400)
                        return
                _json_write(self, 200, {"ok": True, "relations": rel})
                return
            if url.path == "/api/context":
                kwargs = {k: query[k] for k in ("theme", "level") if k in query}
                with STATE_LOCK:
                    try:
                        ctx = STATE.engine.context(**kwargs)
                    except ValueError as e:
                        _bad(self, str(e), 400)
                        return
                _json_write(self, 200, {"ok": True, "context": ctx})
                return
        except Exception:
            LOGGER.exception("api_get_unhandled", extra={"path": self.path})
            _bad(self, "Internal server error", 500)
            return

        _bad(self, "No such endpoint", 404)

    def _handle_api_post(self) -> None:
        try:
            length_header = self.headers.get("Content-Length")
            length = int(length_header) if length_header is not None else None
        except (TypeError, ValueError):
            _bad(self, "Invalid Content-Length", 400)
            return

        try:
            body = _json_read(
                self.rfile,
                content_length=length,
                socket_obj=self.connection,
                read_timeout_s=float(os.environ.get("LUMINA_HTTP_READ_TIMEOUT", "5.0")),
            )
        except PayloadTooLargeError as e:
            _bad(self, str(e), 413)
            return
        except RequestReadTimeoutError as e:
            _bad(self, str(e), 408)
            return
        except ValueError as e:
            msg = str(e)
            if msg == "Missing Content-Length":
                _bad(self, msg, 411)
            else:
                _bad(self, msg, 400)
            return
        except Exception:
            LOGGER.exception("json_read_unhandled", extra={"path": self.path})
            _bad(self, "Invalid request body", 400)
            return

        path = urlsplit(self.path).path
        try:
            with STATE_LOCK:
                if path == "/api/reset":
                    spread = body.get("spread", SpreadType.GRAND_TABLEAU.value)
                    seed = _opt_int(body, "rng_seed")
                    STATE.engine = ReadingEngine(spread, rng_seed=seed if seed is not None else STATE.seed)
                    state = STATE.engine.state()
                elif path == "/api/draw":
                    state = STATE.engine.draw(_opt_int(body, "rng_seed"))
                elif path == "/api/clear":
                    state = STATE.engine.clear_board()
                elif path == "/api/select":
                    state = STATE.engine.select(_opt_int(body, "index"))
                elif path == "/api/place":
                    card_id = _opt_int(body, "card_id")
                    if card_id is None:
                        raise ValueError("Missing card_id")
                    state = STATE.engine.place(card_id, _opt_int(body, "index"))
                elif path == "/api/load":
                    notation = body.get("notation")
                    if not isinstance(notation, str):
                        raise ValueError("Missing notation string")
                    state = STATE.engine.load(notation)
                else:
                    _bad(self, "No such endpoint", 404)
                    return
        except ValueError as e:
            _bad(self, str(e), 400)
            return
        except Exception:
            LOGGER.exception("api_post_unhandled", extra={"path": self.path})
            _bad(self, "Internal server error", 500)
            return

        _json_write(self, 200, {"ok": True, "state": state})


def configure(spread: str, seed: Optional[int]) -> None:
    with STATE_LOCK:
        STATE.seed = seed
        STATE.engine = ReadingEngine(spread, rng_seed=seed)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser()
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--spread", choices=[s.value for s in SpreadType], default=SpreadType.GRAND_TABLEAU.value)
    ap.add_argument("--seed", type=int, default=None, help="RNG seed for draws (default: $LUMINA_RNG_SEED)")
    ap.add_argument("--log-level", default=os.environ.get("LUMINA_LOG_LEVEL", "INFO"))
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    seed = args.seed
    if seed is None:
        try:
            seed = _parse_seed(os.environ.get("LUMINA_RNG_SEED"))
        except ValueError as e:
            ap.error(str(e))

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    configure(args.spread, seed)
    httpd = ThreadingHTTPServer((args.host, args.port), Handler)
    LOGGER.info("server_listening", extra={"host": args.host, "port": args.port, "spread": args.spread, "seed": seed})
    print(f"Lenormand board API at http://{args.host}:{args.port}/ ({args.spread})")
    print("API: /api/defs /api/state /api/highlights /api/relations /api/context /api/reset /api/draw /api/clear /api/select /api/place /api/load")
    httpd.serve_forever()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
