# frontend/scripts/concurrency_stress.py
from __future__ import annotations

import argparse
import concurrent.futures
import json
import random
import subprocess
import sys
import threading
import time
import urllib.error
import urllib.request
from pathlib import Path
from typing import Any


REPO_ROOT = Path(__file__).resolve().parents[2]
SERVER_PATH = REPO_ROOT / "frontend" / "server.py"

sys.path.insert(0, str(REPO_ROOT / "backend"))

from lenormand_board.core import SpreadType, highlight_for


def _request_json(url: str, payload: dict[str, Any] | None = None, timeout: float = 2.0) -> tuple[int, dict[str, Any]]:
    body = None if payload is None else json.dumps(payload, separators=(",", ":")).encode("utf-8")
    req = urllib.request.Request(url, data=body, method="GET" if body is None else "POST")
    req.add_header("Content-Type", "application/json")
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            status = resp.status
            raw = resp.read()
    except urllib.error.HTTPError as e:
        status = int(e.code)
        raw = e.read()
    data = json.loads(raw.decode("utf-8")) if raw else {}
    return status, data


def _wait_ready(base_url: str, deadline_s: float = 10.0) -> None:
    end = time.monotonic() + deadline_s
    while time.monotonic() < end:
        try:
            status, data = _request_json(f"{base_url}/api/state")
            if status == 200 and data.get("ok") is True:
                return
        except (OSError, ValueError):
            pass
        time.sleep(0.05)
    raise RuntimeError("server did not become ready")


def _select_worker(base_url: str, rounds: int, seed: int, errors: list[str], lock: threading.Lock) -> None:
    rnd = random.Random(seed)
    for _ in range(rounds):
        try:
            index = rnd.choice([None, rnd.randrange(36)])
            status, data = _request_json(f"{base_url}/api/select", {"index": index})
            if status != 200:
                with lock:
                    errors.append(f"select failure status={status} body={data}")
        except Exception as e:
            with lock:
                errors.append(f"select exception: {e}")


def _state_probe_worker(base_url: str, rounds: int, errors: list[str], lock: threading.Lock) -> None:
    # each snapshot is taken under the server lock, so its highlights must
    # agree with its own selection
    for _ in range(rounds):
        try:
            status, data = _request_json(f"{base_url}/api/state")
            if status != 200 or data.get("ok") is not True:
                with lock:
                    errors.append(f"state failure status={status} body={data}")
                continue
            state = data["state"]
            spread = SpreadType.parse(state["spread"])
            selected = state["selected"]
            for cell in state["cells"]:
                expected = highlight_for(spread, selected, cell["index"])
                got = cell["highlight"]
                if got != (expected.value if expected is not None else None):
                    with lock:
                        errors.append(f"torn snapshot selected={selected} cell={cell}")
                    break
        except Exception as e:
            with lock:
                errors.append(f"state exception: {e}")


def run_stress(base_url: str, select_workers: int, probe_workers: int, rounds: int, seed: int) -> None:
    errors: list[str] = []
    lock = threading.Lock()
    with concurrent.futures.ThreadPoolExecutor(max_workers=select_workers + probe_workers) as ex:
        futures = []
        for i in range(select_workers):
            futures.append(ex.submit(_select_worker, base_url, rounds, seed + i, errors, lock))
        for _ in range(probe_workers):
            futures.append(ex.submit(_state_probe_worker, base_url, rounds, errors, lock))
        for f in futures:
            f.result()
    if errors:
        raise AssertionError(errors[0])


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8765)
    ap.add_argument("--seed", type=int, default=1337)
    ap.add_argument("--rounds", type=int, default=80)
    ap.add_argument("--select-workers", type=int, default=4)
    ap.add_argument("--probe-workers", type=int, default=4)
    args = ap.parse_args()

    cmd = [sys.executable, str(SERVER_PATH), "--host", args.host, "--port", str(args.port), "--seed", str(args.seed), "--log-level", "WARNING"]
    proc = subprocess.Popen(cmd, cwd=str(REPO_ROOT), stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)
    base_url = f"http://{args.host}:{args.port}"
    try:
        _wait_ready(base_url)
        status, reset = _request_json(f"{base_url}/api/reset", {"spread": "mesa-real", "rng_seed": args.seed})
        if status != 200 or reset.get("ok") is not True:
            raise RuntimeError(f"failed to set deterministic board: status={status} body={reset}")
        run_stress(base_url, args.select_workers, args.probe_workers, args.rounds, args.seed)
        print("ok")
        return 0
    finally:
        proc.terminate()
        try:
            proc.wait(timeout=3)
        except subprocess.TimeoutExpired:
            proc.kill()
            proc.wait(timeout=3)


if __name__ == "__main__":
    raise SystemExit(main())
