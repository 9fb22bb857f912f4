"""Bay assignment: either no bay or an assigned bay number."""

from dataclasses import dataclass
from typing import Optional, Union


class Unassigned:
    """No bay held."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_BAY"

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class Assigned:
    """A bay number held inside a bay-requiring category."""

    number: int

    def __str__(self) -> str:
        return f"Bay {self.number}"


Bay = Union[Unassigned, Assigned]

NO_BAY = Unassigned()


def bay_from_number(number: Optional[int]) -> Bay:
    """Wrap an optional seed/display value as a Bay."""
    if number is None:
        return NO_BAY
    return Assigned(number)
