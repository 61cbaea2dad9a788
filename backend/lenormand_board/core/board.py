from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

from .cards import is_card_id
from .types import SpreadType, board_size

class Board:
    """Cells of one spread, each holding a card id (1..36) or None."""

    def __init__(self, spread: SpreadType, cells: Optional[Sequence[Optional[int]]] = None) -> None:
        self.spread = spread
        size = board_size(spread)
        if cells is None:
            self._cells: List[Optional[int]] = [None] * size
            return
        cells = list(cells)
        if len(cells) != size:
            raise ValueError(f"{spread.value} board needs {size} cells, got {len(cells)}")
        seen = set()
        for c in cells:
            if c is None:
                continue
            if not is_card_id(c):
                raise ValueError(f"Bad card id: {c!r}")
            if c in seen:
                raise ValueError(f"Card {c} appears twice")
            seen.add(c)
        self._cells = cells

    @property
    def size(self) -> int:
        return len(self._cells)

    @property
    def cells(self) -> Tuple[Optional[int], ...]:
        return tuple(self._cells)

    def card_at(self, i: int) -> Optional[int]:
        if not 0 <= i < len(self._cells):
            return None
        return self._cells[i]

    def index_of(self, card_id: int) -> Optional[int]:
        try:
            return self._cells.index(card_id)
        except ValueError:
            return None

    def place(self, i: int, card_id: int) -> None:
        if not 0 <= i < len(self._cells):
            raise ValueError(f"Cell {i} is not on the board")
        if not is_card_id(card_id):
            raise ValueError(f"Bad card id: {card_id!r}")
        existing = self.index_of(card_id)
        if existing is not None:
            self._cells[existing] = None
        self._cells[i] = card_id

    def remove(self, i: int) -> None:
        if 0 <= i < len(self._cells):
            self._cells[i] = None

    def clear(self) -> None:
        self._cells = [None] * len(self._cells)

    def occupied(self) -> Iterator[Tuple[int, int]]:
        for i, c in enumerate(self._cells):
            if c is not None:
                yield i, c

    def is_empty(self) -> bool:
        return all(c is None for c in self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.spread is other.spread and self._cells == other._cells
