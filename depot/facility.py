"""Facility class for garages and their bay layouts."""

from typing import List, Optional


class Facility:
    """A physical facility owning a fixed, ordered list of bay numbers."""

    def __init__(self, id: str, name: Optional[str] = None, bays: Optional[List[int]] = None):
        self.id = id
        self.name = name or id
        self.bays = list(bays or [])

    def allows_bay(self, number: int) -> bool:
        return number in self.bays
