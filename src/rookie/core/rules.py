"""High-level chess rules: self-check filtering, legal destinations, checkmate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookie.core.attacks import is_in_check
from rookie.core.status import GameStatus
from rookie.core.types import ALL_SQUARES, Square, is_on_board
from rookie.core.validator import build_move_record, is_legal_move

if TYPE_CHECKING:
    from rookie.core.enums import Color
    from rookie.core.move import MoveRecord
    from rookie.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Stalemate and draw conditions are deliberately not classified: a side
    with no legal move while not in check is simply reported as in progress.
    """

    @staticmethod
    def is_in_check(color: Color, position: Position) -> bool:
        return is_in_check(color, position.board)

    @staticmethod
    def exposes_king(position: Position, record: MoveRecord) -> bool:
        """Would playing *record* leave the mover's own king in check?

        Applies the move to the board, asks the check detector, and reverts.
        Neither the turn nor the last move is touched.
        """
        board = position.board
        board.apply(record)
        try:
            return is_in_check(record.moved_piece.color, board)
        finally:
            board.revert(record)

    @staticmethod
    def legal_destinations(position: Position, from_sq: Square) -> list[Square]:
        """Squares the piece on *from_sq* may legally move to."""
        if not is_on_board(from_sq):
            return []
        board = position.board
        piece = board[from_sq]
        if piece is None:
            return []

        destinations: list[Square] = []
        for to_sq in ALL_SQUARES:
            check = is_legal_move(piece, from_sq, to_sq, board, position.last_move)
            if not check:
                continue
            record = build_move_record(piece, from_sq, to_sq, board, check)
            if not Rules.exposes_king(position, record):
                destinations.append(to_sq)
        return destinations

    @staticmethod
    def has_legal_move(color: Color, position: Position) -> bool:
        # Snapshot the squares first: trial moves shuffle pieces around.
        for from_sq in position.board.pieces(color):
            if Rules.legal_destinations(position, from_sq):
                return True
        return False

    @staticmethod
    def is_checkmate(color: Color, position: Position) -> bool:
        if not Rules.is_in_check(color, position):
            return False
        return not Rules.has_legal_move(color, position)

    @staticmethod
    def game_status(position: Position) -> GameStatus:
        """Determine the status for the side to move."""
        color = position.turn
        if not Rules.is_in_check(color, position):
            return GameStatus.in_progress()
        if Rules.has_legal_move(color, position):
            return GameStatus.check(color)
        return GameStatus.checkmate(color.opposite)
