from __future__ import annotations

import random
from typing import Optional

from .board import Board
from .cards import DECK_SIZE
from .types import CLOCK, GRID, SpreadType, board_size

def shuffled_deck(rng: random.Random) -> list:
    ids = list(range(1, DECK_SIZE + 1))
    # Fisher-Yates, back to front
    for i in range(len(ids) - 1, 0, -1):
        j = rng.randrange(i + 1)
        ids[i], ids[j] = ids[j], ids[i]
    return ids

def draw_board(spread: SpreadType, rng_seed: Optional[int] = None) -> Board:
    rng = random.Random(rng_seed)
    return Board(spread, shuffled_deck(rng)[:board_size(spread)])

def _cell(board: Board, i: int, selected: Optional[int]) -> str:
    c = board.card_at(i)
    text = f"{c:2d}" if c is not None else " ."
    return f"[{text}]" if i == selected else f" {text} "

def ascii_board(board: Board, selected: Optional[int] = None) -> str:
    rows = []
    if board.spread is SpreadType.GRAND_TABLEAU:
        for r in range(GRID.rows):
            rows.append("".join(_cell(board, GRID.cell(r, c), selected) for c in range(GRID.cols)))
        verdict = "".join(_cell(board, i, selected) for i in range(GRID.size, GRID.total))
        rows.append("")
        rows.append(" " * 8 + verdict)
        return "\n".join(rows)

    for i in range(CLOCK.sectors):
        rows.append(f"{i + 1:2d}h {_cell(board, i, selected)}")
    rows.append(f"ctr {_cell(board, CLOCK.center, selected)}")
    return "\n".join(rows)
