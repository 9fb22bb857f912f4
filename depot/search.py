"""Text search over a board view."""

import re
from dataclasses import dataclass
from typing import List, Optional

from .board import Board
from .bus import Bus
from .category import Category

_BAY_QUERY = re.compile(r"^bay\s*(\d+)$")


@dataclass(frozen=True)
class SearchHit:
    """A matching bus, the category it was found in, and its owning facility."""

    bus: Bus
    category: Category
    facility_id: Optional[str] = None


def matches(bus: Bus, query: str) -> bool:
    """
    Case-insensitive match against a bus.

    Matches a substring of the label, the bare bay number ("3"), or
    "bay 3".
    """
    q = query.strip().lower()
    if not q:
        return False
    if q in bus.label.lower():
        return True
    bay = bus.bay_number
    if bay is None:
        return False
    if q == str(bay):
        return True
    m = _BAY_QUERY.match(q)
    return m is not None and int(m.group(1)) == bay


def search(board: Board, query: str) -> List[SearchHit]:
    """All matching buses, in category order then list order."""
    return [
        SearchHit(bus, category, board.facility_of(bus.id))
        for category, buses in board.items()
        for bus in buses
        if matches(bus, query)
    ]
