from __future__ import annotations

import argparse
import json
import sys
from typing import Optional

from .api import ReadingEngine
from .core import SpreadType, ascii_board
from .notation import parse_board, board_to_notation


def _engine(args: argparse.Namespace) -> ReadingEngine:
    if args.board:
        board = parse_board(args.board)
        return ReadingEngine(board.spread, board=board)
    return ReadingEngine(args.spread, rng_seed=args.seed)


def _dump(obj) -> None:
    print(json.dumps(obj, ensure_ascii=False, indent=2))


def cmd_show(args: argparse.Namespace) -> int:
    eng = _engine(args)
    if args.select is not None:
        eng.select(args.select)
    print(ascii_board(eng.board, eng.selected))
    print()
    print(board_to_notation(eng.board))
    return 0


def cmd_geometry(args: argparse.Namespace) -> int:
    eng = _engine(args)
    eng.select(args.index)
    _dump(eng.relations())
    return 0


def cmd_highlights(args: argparse.Namespace) -> int:
    eng = _engine(args)
    eng.select(args.index)
    for i, h in enumerate(eng.highlights()):
        if h is not None:
            print(f"{i}: {h}")
    return 0


def cmd_context(args: argparse.Namespace) -> int:
    eng = _engine(args)
    eng.select(args.index)
    _dump(eng.context(theme=args.theme, level=args.level))
    return 0


def _board_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--spread", type=str, default=SpreadType.GRAND_TABLEAU.value,
                   choices=[s.value for s in SpreadType])
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--board", type=str, default=None, help="board notation, overrides --spread/--seed")


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="lenormand-board")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ss = sub.add_parser("show", help="Show ASCII board and notation")
    _board_args(ss)
    ss.add_argument("--select", type=int, default=None)
    ss.set_defaults(fn=cmd_show)

    sg = sub.add_parser("geometry", help="Relations of one cell as JSON")
    _board_args(sg)
    sg.add_argument("--index", type=int, required=True)
    sg.set_defaults(fn=cmd_geometry)

    sh = sub.add_parser("highlights", help="Highlight category per cell")
    _board_args(sh)
    sh.add_argument("--index", type=int, required=True)
    sh.set_defaults(fn=cmd_highlights)

    sc = sub.add_parser("context", help="Narrative context for one cell as JSON")
    _board_args(sc)
    sc.add_argument("--index", type=int, required=True)
    sc.add_argument("--theme", type=str, default="General")
    sc.add_argument("--level", type=str, default="Beginner")
    sc.set_defaults(fn=cmd_context)

    args = ap.parse_args(argv)
    try:
        return int(args.fn(args))
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
