"""Exceptions for the depot package."""


class DepotError(Exception):
    """Base exception for depot errors."""


class SeedError(DepotError, ValueError):
    """Seed data is malformed or breaks a board invariant."""


class ReadOnlyBoardError(DepotError):
    """A mutation was attempted on a merged (read-only) board."""
