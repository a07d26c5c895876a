"""MoveExecutor — validates, applies and reverts moves on a GameState.

Owns the promotion state machine::

    IDLE --pawn reaches last rank--> AWAITING_PROMOTION
    AWAITING_PROMOTION --choose_promotion / undo--> IDLE
"""

from __future__ import annotations

import logging
from dataclasses import replace

from rookie.core.attacks import is_in_check
from rookie.core.enums import PieceType
from rookie.core.geometry import promotion_rank
from rookie.core.move import MoveRecord
from rookie.core.types import Square, is_on_board
from rookie.core.validator import build_move_record, is_legal_move
from rookie.game.interfaces import ExecutorPhase
from rookie.game.results import (
    Applied,
    EmptyHistory,
    MoveResult,
    PromotionPending,
    PromotionResult,
    Rejected,
    RejectReason,
    Reverted,
    UndoResult,
)
from rookie.game.state import GameState

_LOGGER = logging.getLogger(__name__)

PROMOTION_CHOICES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
)


class MoveExecutor:
    """Applies moves to one :class:`GameState`.

    Calls must be serialised by the caller; nothing here locks.
    """

    __slots__ = ("_state", "_pending")

    def __init__(self, state: GameState) -> None:
        self._state = state
        self._pending: MoveRecord | None = None

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> ExecutorPhase:
        if self._pending is None:
            return ExecutorPhase.IDLE
        return ExecutorPhase.AWAITING_PROMOTION

    @property
    def pending_promotion(self) -> MoveRecord | None:
        return self._pending

    def reset(self, state: GameState) -> None:
        self._state = state
        self._pending = None

    # ── Move application ─────────────────────────────────────────────────

    def try_apply_move(self, from_sq: Square, to_sq: Square) -> MoveResult:
        if self._pending is not None:
            return self._reject(RejectReason.PROMOTION_REQUIRED, from_sq, to_sq)
        if not (is_on_board(from_sq) and is_on_board(to_sq)):
            return self._reject(RejectReason.OUT_OF_BOUNDS, from_sq, to_sq)

        position = self._state.position
        board = position.board
        piece = board[from_sq]
        if piece is None:
            return self._reject(RejectReason.NO_PIECE, from_sq, to_sq)
        if piece.color != position.turn:
            return self._reject(RejectReason.WRONG_TURN, from_sq, to_sq)

        check = is_legal_move(piece, from_sq, to_sq, board, position.last_move)
        if not check:
            return self._reject(RejectReason.INVALID_GEOMETRY, from_sq, to_sq)

        # Tentative application, then the self-check filter.
        record = build_move_record(piece, from_sq, to_sq, board, check)
        board.apply(record)
        if is_in_check(piece.color, board):
            board.revert(record)
            return self._reject(RejectReason.SELF_CHECK, from_sq, to_sq)

        if piece.piece_type == PieceType.PAWN and to_sq.rank == promotion_rank(
            piece.color
        ):
            self._pending = record
            _LOGGER.debug("Promotion pending for %s", record)
            return PromotionPending(record)

        return Applied(self._commit(record))

    def choose_promotion(self, piece_type: PieceType) -> PromotionResult:
        if self._pending is None:
            _LOGGER.debug("Promotion choice %s with nothing pending", piece_type.name)
            return Rejected(RejectReason.NO_PENDING_PROMOTION)
        if piece_type not in PROMOTION_CHOICES:
            raise ValueError(f"Cannot promote to {piece_type.name}")

        record = replace(self._pending, promotion=piece_type)
        board = self._state.position.board
        pawn = board[record.to_sq]
        assert pawn is not None
        board[record.to_sq] = pawn.promoted(piece_type)
        self._pending = None
        return Applied(self._commit(record))

    # ── Undo ─────────────────────────────────────────────────────────────

    def undo(self) -> UndoResult:
        position = self._state.position

        if self._pending is not None:
            record = self._pending
            self._pending = None
            position.board.revert(record)
            _LOGGER.debug("Cancelled pending promotion %s", record)
            return Reverted(record)

        history = self._state.history
        if not history:
            return EmptyHistory()

        record = history.pop()
        position.board.revert(record)
        position.turn = position.turn.opposite
        position.last_move = history.last
        self._state.invalidate_status()
        _LOGGER.debug("Undid %s", record)
        return Reverted(record)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _commit(self, record: MoveRecord) -> MoveRecord:
        position = self._state.position
        self._state.history.push(record)
        position.last_move = record
        position.turn = position.turn.opposite
        status = self._state.refresh_status()
        _LOGGER.debug("Applied %s (%s)", record, status)
        return record

    def _reject(self, reason: RejectReason, from_sq: Square, to_sq: Square) -> Rejected:
        _LOGGER.debug("Rejected %s -> %s: %s", from_sq, to_sq, reason.name)
        return Rejected(reason)
