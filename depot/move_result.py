"""MoveResult dataclass for transition outcomes."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MoveReason(Enum):
    """Why a move was refused. Closed set; every reason is recoverable."""

    BAY_REQUIRED = "bay_required"
    BAY_INVALID = "bay_invalid"
    BAY_TAKEN = "bay_taken"


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a move: ok, or refused with a reason and no state change."""

    ok: bool
    reason: Optional[MoveReason] = None

    @classmethod
    def success(cls) -> "MoveResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: MoveReason) -> "MoveResult":
        return cls(ok=False, reason=reason)

    def __bool__(self) -> bool:
        return self.ok
