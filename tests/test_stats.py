#!/usr/bin/env python3
"""Tests for board summaries."""

from depot import Board, Bus, Category, status_breakdown, vehicles_assigned


class TestVehiclesAssigned:
    def test_counts_all_categories(self, store):
        assert vehicles_assigned(store.get_board("F1")) == 4
        assert vehicles_assigned(store.get_merged_board()) == 6

    def test_empty_board(self):
        assert vehicles_assigned(Board()) == 0


class TestStatusBreakdown:
    def test_percentages_skip_empty_categories(self, store):
        assert status_breakdown(store.get_board("F1")) == [
            (Category.MAINTENANCE, 25),
            (Category.STORAGE, 25),
            (Category.IN_SERVICE, 50),
        ]

    def test_rounds_to_nearest(self):
        board = Board(
            {
                Category.STORAGE: [Bus("V1", "Bus 1", "--")],
                Category.IN_SERVICE: [Bus("V2", "Bus 2", "--"), Bus("V3", "Bus 3", "--")],
            }
        )
        assert status_breakdown(board) == [(Category.STORAGE, 33), (Category.IN_SERVICE, 67)]

    def test_empty_board(self):
        assert status_breakdown(Board()) == []
