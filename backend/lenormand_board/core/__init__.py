from .types import (
    SpreadType, Highlight, GridTopology, ClockTopology, GRID, CLOCK,
    topology_for, board_size, selectable_size,
)
from .geometry import (
    frame, is_frame, mirrors, horizontal_mirror, knight_moves,
    diagonals_upper, diagonals_lower, opposite, conceptual_axis,
    grid_relations, clock_relations, highlight_for, highlight_map,
    KNIGHT_DELTAS, CONCEPTUAL_AXES,
)
from .cards import CARD_NAMES, DECK_SIZE, card_name, house_for
from .board import Board
from .draw import draw_board, ascii_board

__all__ = [
    "SpreadType","Highlight","GridTopology","ClockTopology","GRID","CLOCK",
    "topology_for","board_size","selectable_size",
    "frame","is_frame","mirrors","horizontal_mirror","knight_moves",
    "diagonals_upper","diagonals_lower","opposite","conceptual_axis",
    "grid_relations","clock_relations","highlight_for","highlight_map",
    "KNIGHT_DELTAS","CONCEPTUAL_AXES",
    "CARD_NAMES","DECK_SIZE","card_name","house_for",
    "Board",
    "draw_board","ascii_board",
]
