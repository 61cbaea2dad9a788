"""Lenormand board (backend).

- core: spreads, board state, deck and the pure geometry engine
- api: stable JSON-oriented facade for UIs
- notation/cli: board text notation and command-line helpers
"""

from . import core, api
from .notation import parse_board, board_to_notation

__all__ = [
    "core","api",
    "parse_board","board_to_notation",
]
