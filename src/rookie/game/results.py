"""Result values returned by the engine API.

Every recoverable outcome is a value, never an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TypeAlias

from rookie.core.move import MoveRecord


class RejectReason(IntEnum):
    """Why a move request was refused."""

    OUT_OF_BOUNDS = auto()
    INVALID_GEOMETRY = auto()
    SELF_CHECK = auto()
    WRONG_TURN = auto()
    NO_PIECE = auto()
    PROMOTION_REQUIRED = auto()
    NO_PENDING_PROMOTION = auto()


@dataclass(frozen=True, slots=True)
class Applied:
    """The move was committed to history."""

    record: MoveRecord


@dataclass(frozen=True, slots=True)
class PromotionPending:
    """A pawn reached its last rank; the move waits for a piece choice."""

    record: MoveRecord


@dataclass(frozen=True, slots=True)
class Rejected:
    reason: RejectReason

    def __str__(self) -> str:
        return f"rejected: {self.reason.name.lower()}"


@dataclass(frozen=True, slots=True)
class Reverted:
    """The last move (or a pending promotion move) was taken back."""

    record: MoveRecord


@dataclass(frozen=True, slots=True)
class EmptyHistory:
    """Nothing to undo."""


MoveResult: TypeAlias = Applied | PromotionPending | Rejected
PromotionResult: TypeAlias = Applied | Rejected
UndoResult: TypeAlias = Reverted | EmptyHistory
