"""Board geometry: fixed positional relations between cells.

Every function here is pure and total. An index outside the topology's
domain yields an empty list (set-valued relations) or ``None`` (scalar
relations); nothing raises.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, List, Optional

from .types import CLOCK, GRID, ClockTopology, GridTopology, Highlight, SpreadType, Topology, topology_for

# deltas as (drow, dcol)
KNIGHT_DELTAS = ((2,1),(2,-1),(-2,1),(-2,-1),(1,2),(1,-2),(-1,2),(-1,-2))
DIAG_UP = ((-1,-1),(-1,1))
DIAG_DOWN = ((1,-1),(1,1))

CONCEPTUAL_AXES: Dict[FrozenSet[int], str] = {
    frozenset((1, 7)): "Social axis",
    frozenset((2, 8)): "Expansion/Vision axis",
    frozenset((3, 9)): "Emotional axis",
    frozenset((5, 11)): "Spiritual/Unconscious axis",
}


def _step(i: int, deltas, grid: GridTopology) -> List[int]:
    if not grid.contains(i):
        return []
    r0, c0 = grid.row_of(i), grid.col_of(i)
    out: List[int] = []
    for dr, dc in deltas:
        r, c = r0 + dr, c0 + dc
        if grid.in_bounds(r, c):
            out.append(grid.cell(r, c))
    return out


def frame(grid: GridTopology = GRID) -> List[int]:
    last = grid.rows - 1
    return [grid.cell(0, 0), grid.cell(0, grid.cols - 1), grid.cell(last, 0), grid.cell(last, grid.cols - 1)]


def is_frame(i: int, grid: GridTopology = GRID) -> bool:
    return grid.contains(i) and i in frame(grid)


def horizontal_mirror(i: int, grid: GridTopology = GRID) -> Optional[int]:
    if not grid.contains(i):
        return None
    j = grid.cell(grid.row_of(i), grid.cols - 1 - grid.col_of(i))
    return None if j == i else j


def mirrors(i: int, grid: GridTopology = GRID) -> List[int]:
    """Horizontal, vertical and point reflections of `i`, in that order."""
    if not grid.contains(i):
        return []
    r, c = grid.row_of(i), grid.col_of(i)
    rr, cc = grid.rows - 1 - r, grid.cols - 1 - c
    out: List[int] = []
    for j in (grid.cell(r, cc), grid.cell(rr, c), grid.cell(rr, cc)):
        if grid.contains(j) and j != i and j not in out:
            out.append(j)
    return out


def knight_moves(i: int, grid: GridTopology = GRID) -> List[int]:
    return _step(i, KNIGHT_DELTAS, grid)


def diagonals_upper(i: int, grid: GridTopology = GRID) -> List[int]:
    """Up-left and up-right neighbours: what is being built above."""
    return _step(i, DIAG_UP, grid)


def diagonals_lower(i: int, grid: GridTopology = GRID) -> List[int]:
    """Down-left and down-right neighbours: what sustains or drains from below."""
    return _step(i, DIAG_DOWN, grid)


def opposite(i: int, clock: ClockTopology = CLOCK) -> Optional[int]:
    """Position 180 degrees across the ring, or None for the center / off-board."""
    if not clock.contains(i):
        return None
    return (i + clock.sectors // 2) % clock.sectors


def conceptual_axis(i: int, clock: ClockTopology = CLOCK) -> Optional[str]:
    j = opposite(i, clock)
    if j is None:
        return None
    return CONCEPTUAL_AXES.get(frozenset((i, j)))


def grid_relations(i: int, grid: GridTopology = GRID) -> Dict[str, object]:
    return {
        "frame": frame(grid),
        "mirrors": mirrors(i, grid),
        "horizontal_mirror": horizontal_mirror(i, grid),
        "knight": knight_moves(i, grid),
        "diagonal_upper": diagonals_upper(i, grid),
        "diagonal_lower": diagonals_lower(i, grid),
    }


def clock_relations(i: int, clock: ClockTopology = CLOCK) -> Dict[str, object]:
    return {
        "opposite": opposite(i, clock),
        "axis": conceptual_axis(i, clock),
        "center": clock.center,
    }


def highlight_for(
    spread: SpreadType,
    selected: Optional[int],
    index: int,
    topology: Optional[Topology] = None,
) -> Optional[Highlight]:
    """Highlight category of `index` while `selected` is the active cell.

    Grand Tableau checks run in fixed precedence (frame, mirror, knight,
    diag-up, diag-down); the first match wins. `topology` defaults to the
    spread's standard layout.
    """
    if selected is None:
        return None
    topo = topology if topology is not None else topology_for(spread)
    if spread is SpreadType.GRAND_TABLEAU:
        if is_frame(index, topo):
            return Highlight.FRAME
        if index in mirrors(selected, topo):
            return Highlight.MIRROR
        if index in knight_moves(selected, topo):
            return Highlight.KNIGHT
        if index in diagonals_upper(selected, topo):
            return Highlight.DIAG_UP
        if index in diagonals_lower(selected, topo):
            return Highlight.DIAG_DOWN
        return None
    opp = opposite(selected, topo)
    if opp is not None and index == opp:
        return Highlight.AXIS
    return None


def highlight_map(
    spread: SpreadType,
    selected: Optional[int],
    topology: Optional[Topology] = None,
) -> List[Optional[Highlight]]:
    topo = topology if topology is not None else topology_for(spread)
    return [highlight_for(spread, selected, i, topo) for i in range(topo.total)]
