from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

class SpreadType(Enum):
    GRAND_TABLEAU = "mesa-real"
    CLOCK = "relogio"

    @classmethod
    def parse(cls, value: Union[str, "SpreadType"]) -> "SpreadType":
        if isinstance(value, SpreadType):
            return value
        v = str(value).strip().lower()
        for s in cls:
            if v in (s.value, s.name.lower()):
                return s
        raise ValueError(f"Unknown spread: {value!r}")

class Highlight(Enum):
    FRAME = "frame"
    MIRROR = "mirror"
    KNIGHT = "knight"
    DIAG_UP = "diag-up"
    DIAG_DOWN = "diag-down"
    AXIS = "axis"


@dataclass(frozen=True)
class GridTopology:
    """Row-major rows x cols matrix followed by `extra` cells outside it."""
    rows: int = 4
    cols: int = 8
    extra: int = 4

    @property
    def size(self) -> int:
        return self.rows * self.cols

    @property
    def total(self) -> int:
        return self.size + self.extra

    def row_of(self, i: int) -> int:
        return i // self.cols

    def col_of(self, i: int) -> int:
        return i % self.cols

    def cell(self, row: int, col: int) -> int:
        return row * self.cols + col

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def contains(self, i: int) -> bool:
        return 0 <= i < self.size


@dataclass(frozen=True)
class ClockTopology:
    """`sectors` positions on a ring plus one center cell after them."""
    sectors: int = 12

    @property
    def center(self) -> int:
        return self.sectors

    @property
    def total(self) -> int:
        return self.sectors + 1

    def contains(self, i: int) -> bool:
        return 0 <= i < self.sectors


GRID = GridTopology()
CLOCK = ClockTopology()

Topology = Union[GridTopology, ClockTopology]

def topology_for(spread: SpreadType) -> Topology:
    return GRID if spread is SpreadType.GRAND_TABLEAU else CLOCK

def board_size(spread: SpreadType) -> int:
    return topology_for(spread).total

def selectable_size(spread: SpreadType) -> int:
    # manual entry cycles through the ring only, never onto the clock center
    return GRID.total if spread is SpreadType.GRAND_TABLEAU else CLOCK.sectors
