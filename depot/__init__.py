"""
Bus yard board tracking.

This package keeps per-facility boards of buses and moves buses between
operational categories while enforcing bay rules:
- Category: Board columns, and which of them require a bay
- Bay: NO_BAY or Assigned(number)
- Bus: One vehicle card
- Facility: A garage and its allowed bay numbers
- Board / BoardStore: Ordered category lists per facility
- TransitionEngine: The only writer of placement and bays
- taken_bays / available_bays: Bay registry
- search: Text and bay search over a board view
"""

from .category import Category, BAY_CATEGORIES
from .bay import Bay, Assigned, Unassigned, NO_BAY, bay_from_number
from .bus import Bus
from .facility import Facility
from .exceptions import DepotError, SeedError, ReadOnlyBoardError
from .move_result import MoveReason, MoveResult
from .board import Board, BoardStore, Location
from .bays import taken_bays, available_bays
from .engine import TransitionEngine
from .search import SearchHit, search
from .stats import vehicles_assigned, status_breakdown
from .loader import load_fleet, build_store, load_schema

__all__ = [
    "Category",
    "BAY_CATEGORIES",
    "Bay",
    "Assigned",
    "Unassigned",
    "NO_BAY",
    "bay_from_number",
    "Bus",
    "Facility",
    "DepotError",
    "SeedError",
    "ReadOnlyBoardError",
    "MoveReason",
    "MoveResult",
    "Board",
    "BoardStore",
    "Location",
    "taken_bays",
    "available_bays",
    "TransitionEngine",
    "SearchHit",
    "search",
    "vehicles_assigned",
    "status_breakdown",
    "load_fleet",
    "build_store",
    "load_schema",
]
