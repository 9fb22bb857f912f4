"""Bay registry: bays held and free within a facility."""

from typing import List, Optional, Set

from .board import BoardStore
from .category import BAY_CATEGORIES


def taken_bays(
    store: BoardStore, facility_id: str, exclude_bus_id: Optional[str] = None
) -> Set[int]:
    """Bay numbers held by buses in bay-requiring categories of a facility."""
    taken = set()
    with store.lock:
        board = store.get_board(facility_id)
        for category in BAY_CATEGORIES:
            for bus in board[category]:
                if exclude_bus_id is not None and bus.id == exclude_bus_id:
                    continue
                if bus.bay_number is not None:
                    taken.add(bus.bay_number)
    return taken


def available_bays(
    store: BoardStore, facility_id: str, exclude_bus_id: Optional[str] = None
) -> List[int]:
    """Allowed bays not currently taken, in the facility's configured order."""
    with store.lock:
        taken = taken_bays(store, facility_id, exclude_bus_id)
    return [b for b in store.facility(facility_id).bays if b not in taken]
