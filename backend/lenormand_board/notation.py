from __future__ import annotations

from typing import List, Optional

from .core import Board, SpreadType, board_size

EMPTY_CELL = "-"


def parse_board(text: str) -> Board:
    """Parse `<spread>:<c0>,<c1>,...` into a Board.

    `-` marks an empty cell. Whitespace around cells is ignored.
    """
    head, sep, body = text.strip().partition(":")
    if not sep:
        raise ValueError("Board notation must look like '<spread>:<cells>'")
    spread = SpreadType.parse(head)

    parts = [p.strip() for p in body.split(",")] if body.strip() else []
    size = board_size(spread)
    if len(parts) != size:
        raise ValueError(f"{spread.value} notation needs {size} cells, got {len(parts)}")

    cells: List[Optional[int]] = []
    for p in parts:
        if p == EMPTY_CELL:
            cells.append(None)
            continue
        if not (p.isascii() and p.isdigit()):
            raise ValueError(f"Bad cell in board notation: {p!r}")
        cells.append(int(p))
    return Board(spread, cells)


def board_to_notation(board: Board) -> str:
    cells = ",".join(EMPTY_CELL if c is None else str(c) for c in board.cells)
    return f"{board.spread.value}:{cells}"
