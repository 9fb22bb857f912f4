"""Category enum for board columns."""

from enum import Enum


class Category(Enum):
    """Operational categories a bus can sit in. Declaration order = display order."""

    MAINTENANCE = "maintenance"
    STORAGE = "storage"
    IN_SERVICE = "in_service"
    LONG_TERM = "long_term"
    OUT_OF_SERVICE = "out_of_service"
    THIRD_PARTY = "third_party"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def requires_bay(self) -> bool:
        """True when a bus in this category must hold a bay."""
        return self in BAY_CATEGORIES


_LABELS = {
    Category.MAINTENANCE: "Maintenance",
    Category.STORAGE: "Storage",
    Category.IN_SERVICE: "In-Service",
    Category.LONG_TERM: "Long-term Maintenance",
    Category.OUT_OF_SERVICE: "Out of service",
    Category.THIRD_PARTY: "Third party",
}

BAY_CATEGORIES = (Category.MAINTENANCE, Category.LONG_TERM)
