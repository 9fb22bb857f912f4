#!/usr/bin/env python3
"""Tests for the bay registry."""

from depot import Assigned, BoardStore, Bus, Board, Category, Facility, available_bays, taken_bays


class TestTakenBays:
    """Tests for taken_bays."""

    def test_collects_bay_categories(self, store):
        assert taken_bays(store, "F1") == {2}
        assert taken_bays(store, "F2") == {1}

    def test_excludes_given_bus(self, store):
        assert taken_bays(store, "F1", exclude_bus_id="V2") == set()

    def test_empty_when_no_bays_held(self):
        store = BoardStore([Facility("F", bays=[1, 2])])
        assert taken_bays(store, "F") == set()

    def test_ignores_bays_outside_bay_categories(self):
        # not reachable through the engine, but only bay categories are scanned
        board = Board({Category.STORAGE: [Bus("V1", "Bus 1", "--", Assigned(1))]})
        store = BoardStore([Facility("F", bays=[1, 2])], {"F": board})
        assert taken_bays(store, "F") == set()


class TestAvailableBays:
    """Tests for available_bays."""

    def test_allowed_minus_taken(self, store):
        assert available_bays(store, "F1") == [1, 3]
        assert available_bays(store, "F2") == [2]

    def test_exclude_frees_own_bay(self, store):
        assert available_bays(store, "F1", exclude_bus_id="V2") == [1, 2, 3]

    def test_keeps_configured_order_with_gaps(self):
        board = Board({Category.MAINTENANCE: [Bus("V1", "Bus 1", "--", Assigned(7))]})
        store = BoardStore([Facility("F", bays=[2, 4, 7, 9])], {"F": board})
        assert available_bays(store, "F") == [2, 4, 9]

    def test_facility_without_bays(self):
        store = BoardStore([Facility("F")])
        assert available_bays(store, "F") == []
