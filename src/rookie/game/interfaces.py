"""Abstract interfaces for the game layer.

A presentation layer depends on :class:`IGameController`, not on the
concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rookie.core.board import BoardSnapshot
    from rookie.core.enums import PieceType
    from rookie.core.status import GameStatus
    from rookie.core.types import Square
    from rookie.game.results import MoveResult, PromotionResult, UndoResult


# ── Executor FSM states ──────────────────────────────────────────────────────


class ExecutorPhase(IntEnum):
    """Finite-state-machine states of the move executor."""

    IDLE = auto()
    AWAITING_PROMOTION = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the engine API consumed by a presentation layer."""

    @abstractmethod
    def new_game(self, fen: str | None = None) -> None:
        """Set up a new game from the standard start or a FEN."""

    @abstractmethod
    def select_piece(self, square: Square) -> list[Square]:
        """Legal destinations for the side-to-move piece on *square*."""

    @abstractmethod
    def attempt_move(self, from_sq: Square, to_sq: Square) -> MoveResult:
        """Try to play a move."""

    @abstractmethod
    def choose_promotion(self, piece_type: PieceType) -> PromotionResult:
        """Resolve a pending promotion."""

    @abstractmethod
    def undo(self) -> UndoResult:
        """Take back the last move, or cancel a pending promotion."""

    @abstractmethod
    def query_status(self) -> GameStatus:
        """Status of the side to move."""

    @abstractmethod
    def query_board(self) -> BoardSnapshot:
        """Read-only snapshot of the grid."""
