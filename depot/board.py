"""Board and BoardStore - per-facility ordered category lists."""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .bus import Bus
from .category import Category
from .exceptions import ReadOnlyBoardError
from .facility import Facility

_logger = logging.getLogger(__name__)

CategoryKey = Union[Category, str]


def as_category(key: CategoryKey) -> Category:
    """Accept a Category or its string value ("in_service")."""
    if isinstance(key, Category):
        return key
    return Category(key)


class Board:
    """
    Ordered bus lists, one per category.

    A facility board hands out its live lists. A merged board is a
    read-only snapshot built from several facility boards: it hands out
    tuples, its mutators raise ReadOnlyBoardError, and it remembers
    which facility each bus came from.
    """

    def __init__(
        self,
        lists: Optional[Dict[Category, List[Bus]]] = None,
        read_only: bool = False,
        facility_id: Optional[str] = None,
        origins: Optional[Dict[str, str]] = None,
    ):
        lists = lists or {}
        self._lists = {cat: list(lists.get(cat, [])) for cat in Category}
        self.read_only = read_only
        self.facility_id = facility_id
        self._origins = dict(origins or {})

    def __getitem__(self, key: CategoryKey) -> Sequence[Bus]:
        buses = self._lists[as_category(key)]
        if self.read_only:
            return tuple(buses)
        return buses

    def __iter__(self) -> Iterator[Category]:
        return iter(Category)

    def items(self) -> Iterator[Tuple[Category, Sequence[Bus]]]:
        """(category, buses) pairs in category declaration order."""
        for cat in Category:
            yield cat, self[cat]

    def buses(self) -> Iterator[Bus]:
        for _, buses in self.items():
            yield from buses

    def facility_of(self, bus_id: str) -> Optional[str]:
        """Facility a bus on this board belongs to."""
        return self._origins.get(bus_id, self.facility_id)

    def index_of(self, key: CategoryKey, bus_id: str) -> Optional[int]:
        for i, bus in enumerate(self[key]):
            if bus.id == bus_id:
                return i
        return None

    def category_of(self, bus_id: str) -> Optional[Category]:
        """Category currently holding the bus, if any."""
        for cat, buses in self.items():
            if any(b.id == bus_id for b in buses):
                return cat
        return None

    def pop(self, key: CategoryKey, index: int) -> Bus:
        self._check_writable()
        return self._lists[as_category(key)].pop(index)

    def insert(self, key: CategoryKey, index: int, bus: Bus) -> None:
        self._check_writable()
        self._lists[as_category(key)].insert(index, bus)

    def snapshot(self) -> Dict[str, List[dict]]:
        """Field-for-field copy of every list, in order."""
        return {
            cat.value: [bus.fields() for bus in buses] for cat, buses in self.items()
        }

    def _check_writable(self) -> None:
        if self.read_only:
            raise ReadOnlyBoardError(
                "merged boards are read-only; resolve the owning facility first"
            )


@dataclass(frozen=True)
class Location:
    """Where a bus currently sits."""

    facility_id: str
    category: Category
    index: int


class BoardStore:
    """
    Owns every facility board and the buses on them.

    One store is created by the composition root (see loader.load_fleet)
    and passed to the engine and query helpers. All writes go through
    the TransitionEngine or update_bus and run under ``lock``; the
    derived reads (merged board, locate, bay registry) take it too, so a
    reader on another thread never sees a move half done.
    """

    def __init__(
        self,
        facilities: Iterable[Facility],
        boards: Optional[Dict[str, Board]] = None,
    ):
        self._facilities: Dict[str, Facility] = {f.id: f for f in facilities}
        boards = boards or {}
        self._boards: Dict[str, Board] = {
            fid: boards.get(fid) or Board() for fid in self._facilities
        }
        for fid, board in self._boards.items():
            board.facility_id = fid
        self.lock = threading.RLock()

    @property
    def facilities(self) -> List[Facility]:
        """Facilities in configured order."""
        return list(self._facilities.values())

    @property
    def facility_ids(self) -> List[str]:
        return list(self._facilities)

    def facility(self, facility_id: str) -> Facility:
        return self._facilities[facility_id]

    def get_board(self, facility_id: str) -> Board:
        """Live board for one facility (not a copy)."""
        return self._boards[facility_id]

    def get_merged_board(self, facility_ids: Optional[Iterable[str]] = None) -> Board:
        """
        Read-only board concatenating each category across facilities.

        Facilities contribute in the order given (all facilities, in
        configured order, when omitted). Rebuilt on every call.
        """
        if facility_ids is None:
            facility_ids = self.facility_ids
        with self.lock:
            boards = [self._boards[fid] for fid in facility_ids]
            lists = {
                cat: [bus for board in boards for bus in board[cat]] for cat in Category
            }
            origins = {bus.id: board.facility_id for board in boards for bus in board.buses()}
        return Board(lists, read_only=True, origins=origins)

    def update_bus(
        self,
        facility_id: str,
        category: CategoryKey,
        bus_id: str,
        patch: Dict[str, Any],
    ) -> None:
        """
        Merge editable fields from patch into a bus in place.

        No-op if the bus is not in that list. Bay and category changes
        belong to the TransitionEngine, so those keys are ignored.
        """
        with self.lock:
            board = self._boards[facility_id]
            index = board.index_of(category, bus_id)
            if index is None:
                _logger.debug("update_bus: %s not in %s/%s", bus_id, facility_id, category)
                return
            bus = board[category][index]
            for key, value in patch.items():
                if key not in Bus.EDITABLE_FIELDS:
                    _logger.warning("update_bus: ignoring non-editable field %r", key)
                    continue
                setattr(bus, key, value)

    def locate(self, bus_id: str) -> Optional[Location]:
        """Find the owning facility, category and index of a bus."""
        with self.lock:
            for fid, board in self._boards.items():
                for cat, buses in board.items():
                    for i, bus in enumerate(buses):
                        if bus.id == bus_id:
                            return Location(fid, cat, i)
        return None

    def snapshot(self) -> Dict[str, Dict[str, List[dict]]]:
        with self.lock:
            return {fid: board.snapshot() for fid, board in self._boards.items()}
