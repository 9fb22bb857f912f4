"""Bus class - one vehicle card on the board."""

from typing import Optional

from .bay import Bay, Assigned, NO_BAY


class Bus:
    """A bus with its display fields and current bay assignment."""

    # Fields an edit form may patch; bay and category move through the engine
    EDITABLE_FIELDS = ("label", "status", "last_service", "notes")

    def __init__(
        self,
        id: str,
        label: str,
        status: str,
        bay: Bay = NO_BAY,
        last_service: Optional[str] = None,
        notes: Optional[str] = None,
    ):
        self.id = id
        self.label = label
        self.status = status
        self.bay = bay
        self.last_service = last_service
        self.notes = notes

    @property
    def bay_number(self) -> Optional[int]:
        """Assigned bay number, or None when no bay is held."""
        if isinstance(self.bay, Assigned):
            return self.bay.number
        return None

    def fields(self) -> dict:
        """Field-for-field view, used to compare board snapshots."""
        return {
            "id": self.id,
            "label": self.label,
            "status": self.status,
            "bay": self.bay_number,
            "last_service": self.last_service,
            "notes": self.notes,
        }

    def __repr__(self) -> str:
        return f"Bus({self.id!r}, bay={self.bay!r})"
