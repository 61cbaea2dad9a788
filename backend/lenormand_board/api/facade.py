from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from ..core import Board, SpreadType, draw_board, highlight_map, selectable_size
from ..notation import parse_board

from .serde import snapshot, relations_to_dict, narrative_context, DEFAULT_THEME, DEFAULT_LEVEL

RANDOM = "random"
MANUAL = "manual"


class ReadingEngine:
    """A small, stable facade for UI/server integration.

    Owns one board and the current selection. All geometry is delegated to
    the pure functions in core.geometry.
    """

    def __init__(
        self,
        spread: Union[str, SpreadType] = SpreadType.GRAND_TABLEAU,
        rng_seed: Optional[int] = None,
        board: Optional[Board] = None,
    ) -> None:
        self.spread = SpreadType.parse(spread)
        self.selected: Optional[int] = None
        if board is not None:
            if board.spread is not self.spread:
                raise ValueError("Board spread does not match engine spread")
            self.board = board
            self.mode = MANUAL
        else:
            self.board = draw_board(self.spread, rng_seed)
            self.mode = RANDOM

    def draw(self, rng_seed: Optional[int] = None) -> Dict[str, Any]:
        self.board = draw_board(self.spread, rng_seed)
        self.mode = RANDOM
        self.selected = None
        return self.state()

    def clear_board(self) -> Dict[str, Any]:
        self.board = Board(self.spread)
        self.mode = MANUAL
        self.selected = None
        return self.state()

    def switch_spread(self, spread: Union[str, SpreadType], rng_seed: Optional[int] = None) -> Dict[str, Any]:
        self.spread = SpreadType.parse(spread)
        return self.draw(rng_seed)

    def load(self, notation: str) -> Dict[str, Any]:
        board = parse_board(notation)
        self.spread = board.spread
        self.board = board
        self.mode = MANUAL
        self.selected = None
        return self.state()

    def select(self, index: Optional[int]) -> Dict[str, Any]:
        if index is not None and not 0 <= index < self.board.size:
            raise ValueError(f"Cell {index} is not on the board")
        self.selected = index
        return self.state()

    def place(self, card_id: int, index: Optional[int] = None) -> Dict[str, Any]:
        if index is None:
            index = self.selected
        if index is None:
            raise ValueError("No house selected")
        self.board.place(index, card_id)
        self.mode = MANUAL
        self.selected = (index + 1) % selectable_size(self.spread)
        return self.state()

    def highlights(self) -> List[Optional[str]]:
        return [h.value if h is not None else None for h in highlight_map(self.spread, self.selected)]

    def relations(self) -> Dict[str, Any]:
        if self.selected is None:
            raise ValueError("No house selected")
        return relations_to_dict(self.board, self.selected)

    def context(self, theme: str = DEFAULT_THEME, level: str = DEFAULT_LEVEL) -> Dict[str, Any]:
        return narrative_context(self.board, self.selected, theme=theme, level=level)

    def state(self) -> Dict[str, Any]:
        return snapshot(self)
