from __future__ import annotations

import logging
from typing import Dict, Optional

from .types import CLOCK, SpreadType, board_size

LOGGER = logging.getLogger("lenormand.core.cards")

CARD_NAMES = (
    "Rider", "Clover", "Ship", "House", "Tree", "Clouds",
    "Snake", "Coffin", "Bouquet", "Scythe", "Whip", "Birds",
    "Child", "Fox", "Bear", "Stars", "Stork", "Dog",
    "Tower", "Garden", "Mountain", "Crossroads", "Mice", "Heart",
    "Ring", "Book", "Letter", "Man", "Woman", "Lilies",
    "Sun", "Moon", "Key", "Fish", "Anchor", "Cross",
)
DECK_SIZE = len(CARD_NAMES)

EMPTY = "Empty"
UNKNOWN = "Unknown"

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
CLOCK_HOUSE_BASE = 101


def is_card_id(card_id: object) -> bool:
    return isinstance(card_id, int) and not isinstance(card_id, bool) and 1 <= card_id <= DECK_SIZE


def card_name(card_id: Optional[int]) -> str:
    if card_id is None:
        return EMPTY
    if not is_card_id(card_id):
        LOGGER.warning("unknown_card_id", extra={"card_id": card_id})
        return UNKNOWN
    return CARD_NAMES[card_id - 1]


def house_for(spread: SpreadType, index: int) -> Optional[Dict[str, object]]:
    if not 0 <= index < board_size(spread):
        return None
    if spread is SpreadType.GRAND_TABLEAU:
        return {"id": index + 1, "name": CARD_NAMES[index]}
    name = "Center" if index == CLOCK.center else MONTHS[index]
    return {"id": CLOCK_HOUSE_BASE + index, "name": name}
