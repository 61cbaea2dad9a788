from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..core import (
    Board, SpreadType, GRID, CLOCK,
    card_name, house_for, grid_relations, clock_relations, highlight_for,
)
from ..notation import board_to_notation

DEFAULT_THEME = "General"
DEFAULT_LEVEL = "Beginner"


def cell_to_dict(board: Board, i: int) -> Dict[str, Any]:
    card_id = board.card_at(i)
    return {
        "index": i,
        "house": house_for(board.spread, i),
        "card_id": card_id,
        "card": card_name(card_id),
    }


def _refs(board: Board, indices: List[int]) -> List[Dict[str, Any]]:
    return [cell_to_dict(board, i) for i in indices]


def relations_to_dict(board: Board, index: int) -> Dict[str, Any]:
    """Geometry bundle for `index`, each related cell resolved against `board`."""
    if board.spread is SpreadType.GRAND_TABLEAU:
        rel = grid_relations(index)
        hm = rel["horizontal_mirror"]
        return {
            "index": index,
            "frame": _refs(board, rel["frame"]),
            "mirrors": _refs(board, rel["mirrors"]),
            "horizontal_mirror": cell_to_dict(board, hm) if hm is not None else None,
            "knight": _refs(board, rel["knight"]),
            "diagonal_upper": _refs(board, rel["diagonal_upper"]),
            "diagonal_lower": _refs(board, rel["diagonal_lower"]),
        }

    rel = clock_relations(index)
    opp = rel["opposite"]
    return {
        "index": index,
        "opposite": cell_to_dict(board, opp) if opp is not None else None,
        "axis": rel["axis"],
        "center": cell_to_dict(board, rel["center"]),
    }


def snapshot(engine) -> Dict[str, Any]:
    """JSON-friendly snapshot of the current reading."""
    board: Board = engine.board
    selected: Optional[int] = engine.selected

    cells: List[Dict[str, Any]] = []
    for i in range(board.size):
        d = cell_to_dict(board, i)
        hl = highlight_for(board.spread, selected, i)
        d["highlight"] = hl.value if hl is not None else None
        d["selected"] = i == selected
        cells.append(d)

    return {
        "spread": board.spread.value,
        "size": board.size,
        "mode": engine.mode,
        "selected": selected,
        "notation": board_to_notation(board),
        "cells": cells,
    }


def narrative_context(
    board: Board,
    selected: Optional[int],
    theme: str = DEFAULT_THEME,
    level: str = DEFAULT_LEVEL,
) -> Dict[str, Any]:
    """Structured context a narrative requester embeds in its prompt.

    Only card names are resolved here; prompt wording and the remote call
    belong to the caller.
    """
    if selected is None:
        raise ValueError("No house selected")
    house = house_for(board.spread, selected)
    if house is None:
        raise ValueError(f"Cell {selected} is not on the board")
    card_id = board.card_at(selected)
    if card_id is None:
        raise ValueError("Select an occupied house for analysis")

    def names(indices: List[int]) -> List[str]:
        return [card_name(board.card_at(i)) for i in indices]

    if board.spread is SpreadType.GRAND_TABLEAU:
        rel = grid_relations(selected)
        hm = rel["horizontal_mirror"]
        geometries: Dict[str, Any] = {
            "frame": names(rel["frame"]),
            # verdict cells have no mirror; they reflect onto themselves
            "mirror_horizontal": card_name(board.card_at(hm if hm is not None else selected)),
            "mirrors": names(rel["mirrors"]),
            "knight": names(rel["knight"]),
            "verdict": names(list(range(GRID.size, GRID.total))),
            "diagonal_upper_ascending": names(rel["diagonal_upper"]),
            "diagonal_lower_descending": names(rel["diagonal_lower"]),
        }
    else:
        rel = clock_relations(selected)
        opp = rel["opposite"]
        geometries = {
            "opposite": card_name(board.card_at(opp)) if opp is not None else None,
            "axis": rel["axis"],
            "center_regulator": card_name(board.card_at(CLOCK.center)),
        }

    return {
        "spread_type": board.spread.value,
        "level": level,
        "theme": theme,
        "selected": {
            "index": selected,
            "card_id": card_id,
            "card": card_name(card_id),
            "house": house["name"],
            "house_id": house["id"],
        },
        "geometries": geometries,
    }
