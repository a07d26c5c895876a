"""GameController — the engine API a presentation layer talks to.

Wraps one GameState and its MoveExecutor. Subscribers attach to
:class:`GameEvents` instead of polling after every call.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from rookie.core.board import BoardSnapshot
from rookie.core.enums import Color, PieceType
from rookie.core.move import MoveRecord
from rookie.core.piece import Piece
from rookie.core.rules import Rules
from rookie.core.status import GameStatus
from rookie.core.types import Square, is_on_board
from rookie.game.executor import MoveExecutor
from rookie.game.interfaces import ExecutorPhase, IGameController
from rookie.game.results import (
    Applied,
    MoveResult,
    PromotionPending,
    PromotionResult,
    Reverted,
    UndoResult,
)
from rookie.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameStatus], None]
PromotionCallback = Callable[[MoveRecord], None]
UndoCallback = Callable[[MoveRecord], None]
GameOverCallback = Callable[[GameStatus], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_promotion_pending: list[PromotionCallback] = field(default_factory=list)
    on_undo: list[UndoCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Runs one game: selection, moves, promotion choices, undo, queries.

    Not thread-safe: one controller per game, calls made from one thread.
    """

    __slots__ = ("_state", "_executor", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._executor = MoveExecutor(self._state)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def side_to_move(self) -> Color:
        return self._state.position.turn

    @property
    def phase(self) -> ExecutorPhase:
        return self._executor.phase

    @property
    def pending_promotion(self) -> MoveRecord | None:
        return self._executor.pending_promotion

    @property
    def move_history(self) -> tuple[MoveRecord, ...]:
        return self._state.history.records

    @property
    def captured_pieces(self) -> tuple[Piece, ...]:
        """Pieces taken so far, oldest first."""
        return self._state.history.captured

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        state = GameState()
        state.setup(fen)
        self._state = state
        self._executor.reset(state)
        _LOGGER.info("New game from %s", state.start_fen)

    def select_piece(self, square: Square) -> list[Square]:
        if self._executor.phase != ExecutorPhase.IDLE or not is_on_board(square):
            return []
        position = self._state.position
        piece = position.board[square]
        if piece is None or piece.color != position.turn:
            return []
        return Rules.legal_destinations(position, square)

    def attempt_move(self, from_sq: Square, to_sq: Square) -> MoveResult:
        result = self._executor.try_apply_move(from_sq, to_sq)
        if isinstance(result, Applied):
            self._emit_move(result.record)
        elif isinstance(result, PromotionPending):
            for cb in self.events.on_promotion_pending:
                cb(result.record)
        return result

    def choose_promotion(self, piece_type: PieceType) -> PromotionResult:
        result = self._executor.choose_promotion(piece_type)
        if isinstance(result, Applied):
            self._emit_move(result.record)
        return result

    def undo(self) -> UndoResult:
        result = self._executor.undo()
        if isinstance(result, Reverted):
            for cb in self.events.on_undo:
                cb(result.record)
        return result

    def query_status(self) -> GameStatus:
        return self._state.status()

    def query_board(self) -> BoardSnapshot:
        return self._state.position.board.snapshot()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        status = self._state.status()
        for cb in self.events.on_move:
            cb(record, status)
        if status.is_checkmate:
            _LOGGER.info("Checkmate: %s", status)
            for cb in self.events.on_game_over:
                cb(status)
