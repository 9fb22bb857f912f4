#!/usr/bin/env python3
"""Tests for Category enum."""

from depot import Category, BAY_CATEGORIES


class TestCategory:
    """Tests for category configuration."""

    def test_only_maintenance_and_long_term_require_bay(self):
        required = [c for c in Category if c.requires_bay]
        assert required == [Category.MAINTENANCE, Category.LONG_TERM]
        assert tuple(required) == BAY_CATEGORIES

    def test_declaration_order(self):
        assert [c.value for c in Category] == [
            "maintenance",
            "storage",
            "in_service",
            "long_term",
            "out_of_service",
            "third_party",
        ]

    def test_lookup_by_value(self):
        assert Category("in_service") is Category.IN_SERVICE

    def test_labels(self):
        assert Category.IN_SERVICE.label == "In-Service"
        assert Category.LONG_TERM.label == "Long-term Maintenance"
