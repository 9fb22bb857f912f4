"""Shared fixtures: a two-facility store matching the documented scenarios."""

import pytest

from depot import Assigned, Board, BoardStore, Bus, Category, Facility, TransitionEngine


@pytest.fixture
def store():
    """
    F1 allows bays 1-3: V1 in storage, V2 in maintenance on bay 2.
    F2 allows bays 1-2: V3 in in_service, V4 in long_term on bay 1.
    """
    f1 = Board(
        {
            Category.STORAGE: [Bus("V1", "Bus 101", "Stored")],
            Category.MAINTENANCE: [Bus("V2", "Bus 102", "Under Repair", Assigned(2))],
            Category.IN_SERVICE: [
                Bus("V5", "Bus 105", "On route"),
                Bus("V6", "Bus 106", "On route"),
            ],
        }
    )
    f2 = Board(
        {
            Category.IN_SERVICE: [Bus("V3", "Bus 203", "Standby")],
            Category.LONG_TERM: [Bus("V4", "Bus 204", "Body repair", Assigned(1))],
        }
    )
    return BoardStore(
        [Facility("F1", bays=[1, 2, 3]), Facility("F2", bays=[1, 2])],
        {"F1": f1, "F2": f2},
    )


@pytest.fixture
def engine(store):
    return TransitionEngine(store)
