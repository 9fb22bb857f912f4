"""Transition engine - the only writer of bus placement and bays."""

import logging
import math
from numbers import Real
from typing import Any, Optional, Union

from .bay import Assigned, NO_BAY
from .bays import taken_bays
from .board import BoardStore, CategoryKey, as_category
from .move_result import MoveReason, MoveResult

_logger = logging.getLogger(__name__)


def normalize_bay(candidate: Any) -> Optional[int]:
    """
    Coerce a requested bay to an int, or None if it cannot be a bay.

    Finite reals are truncated toward zero; booleans, strings and
    non-finite values are rejected.
    """
    if isinstance(candidate, bool) or not isinstance(candidate, Real):
        return None
    if isinstance(candidate, float) and not math.isfinite(candidate):
        return None
    return int(candidate)


class TransitionEngine:
    """Validates and performs moves of buses between categories."""

    def __init__(self, store: BoardStore):
        self.store = store

    def move_vehicle(
        self,
        facility_id: str,
        from_category: CategoryKey,
        to_category: CategoryKey,
        bus_id: str,
        requested_bay: Optional[Union[int, float]] = None,
        target_index: Optional[int] = None,
    ) -> MoveResult:
        """
        Move a bus from one category to another within a facility.

        Bay-requiring destinations need a valid, free bay: the requested
        one, or else the bay the bus already holds. Other destinations
        clear the bay. On a refused move the bus stays exactly where it
        was and the board is unchanged.

        A bus missing from the source list is treated as already moved
        and reported as success.
        """
        source = as_category(from_category)
        dest = as_category(to_category)
        if source == dest:
            return MoveResult.success()

        with self.store.lock:
            board = self.store.get_board(facility_id)
            index = board.index_of(source, bus_id)
            if index is None:
                _logger.debug(
                    "move %s: not in %s/%s, nothing to do",
                    bus_id, facility_id, source.value,
                )
                return MoveResult.success()

            bus = board[source][index]

            # Validate before touching either list so the bus is never absent
            if dest.requires_bay:
                candidate = requested_bay if requested_bay is not None else bus.bay_number
                reason = self._check_bay(facility_id, bus_id, candidate)
                if reason is not None:
                    _logger.info(
                        "move %s %s -> %s at %s refused: %s",
                        bus_id, source.value, dest.value, facility_id, reason.value,
                    )
                    return MoveResult.failure(reason)
                new_bay = Assigned(normalize_bay(candidate))
            else:
                new_bay = NO_BAY

            board.pop(source, index)
            bus.bay = new_bay
            dest_list = board[dest]
            if target_index is None:
                position = len(dest_list)
            else:
                position = max(0, min(target_index, len(dest_list)))
            board.insert(dest, position, bus)

        _logger.debug(
            "moved %s %s -> %s at %s (index %d)",
            bus_id, source.value, dest.value, facility_id, position,
        )
        return MoveResult.success()

    def _check_bay(
        self, facility_id: str, bus_id: str, candidate: Any
    ) -> Optional[MoveReason]:
        """Return why candidate cannot be used as this bus's bay, or None."""
        if candidate is None:
            return MoveReason.BAY_REQUIRED
        number = normalize_bay(candidate)
        if number is None or number <= 0:
            return MoveReason.BAY_INVALID
        if not self.store.facility(facility_id).allows_bay(number):
            return MoveReason.BAY_INVALID
        if number in taken_bays(self.store, facility_id, exclude_bus_id=bus_id):
            return MoveReason.BAY_TAKEN
        return None

    def reorder_vehicle(
        self, facility_id: str, category: CategoryKey, from_index: int, to_index: int
    ) -> None:
        """Move a bus to a new position within the same list (no bay logic)."""
        with self.store.lock:
            board = self.store.get_board(facility_id)
            buses = board[category]
            if not buses:
                return
            from_index = max(0, min(from_index, len(buses) - 1))
            to_index = max(0, min(to_index, len(buses) - 1))
            if from_index == to_index:
                return
            bus = board.pop(category, from_index)
            board.insert(category, to_index, bus)

    def move_located(
        self,
        bus_id: str,
        to_category: CategoryKey,
        requested_bay: Optional[Union[int, float]] = None,
        target_index: Optional[int] = None,
    ) -> MoveResult:
        """
        Move a bus found through a merged view or search result.

        The owning facility and source category are resolved from the
        store, so callers never mutate through a merged board.
        """
        with self.store.lock:
            location = self.store.locate(bus_id)
            if location is None:
                _logger.debug("move %s: not on any board, nothing to do", bus_id)
                return MoveResult.success()
            return self.move_vehicle(
                location.facility_id,
                location.category,
                to_category,
                bus_id,
                requested_bay=requested_bay,
                target_index=target_index,
            )
