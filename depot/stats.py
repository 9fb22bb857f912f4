"""Summary counts for a board."""

from typing import List, Tuple

from .board import Board
from .category import Category


def vehicles_assigned(board: Board) -> int:
    """Total buses on the board across all categories."""
    return sum(len(buses) for _, buses in board.items())


def status_breakdown(board: Board) -> List[Tuple[Category, int]]:
    """Rounded percentage of buses per non-empty category."""
    total = vehicles_assigned(board)
    if not total:
        return []
    return [
        (category, int(len(buses) * 100 / total + 0.5))
        for category, buses in board.items()
        if buses
    ]
