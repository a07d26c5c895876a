"""Move validation: piece geometry plus castling and en-passant preconditions.

The validator answers "does this move have a legal shape?". Whether the move
leaves the mover's own king in check is a separate filter, because answering
it means applying the move to the board and taking it back again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rookie.core.attacks import is_in_check
from rookie.core.enums import PieceType
from rookie.core.geometry import can_reach, pawn_direction
from rookie.core.move import CastlingInfo, EnPassantInfo, MoveRecord
from rookie.core.types import Square, is_on_board

if TYPE_CHECKING:
    from rookie.core.board import Board
    from rookie.core.piece import Piece


@dataclass(frozen=True, slots=True)
class MoveCheck:
    """Outcome of :func:`is_legal_move`. Truthy when the move is legal."""

    legal: bool
    is_castling: bool = False
    is_en_passant: bool = False

    def __bool__(self) -> bool:
        return self.legal


_ILLEGAL = MoveCheck(False)
_PLAIN = MoveCheck(True)


def is_legal_move(
    piece: Piece,
    from_sq: Square,
    to_sq: Square,
    board: Board,
    last_move: MoveRecord | None,
) -> MoveCheck:
    """Check the shape of moving *piece* from *from_sq* to *to_sq*."""
    if not (is_on_board(from_sq) and is_on_board(to_sq)):
        return _ILLEGAL
    target = board[to_sq]
    if target is not None and target.color == piece.color:
        return _ILLEGAL

    if can_reach(piece, from_sq, to_sq, board):
        return _PLAIN

    if piece.piece_type == PieceType.PAWN:
        if _is_en_passant(piece, from_sq, to_sq, board, last_move):
            return MoveCheck(True, is_en_passant=True)
    elif piece.piece_type == PieceType.KING:
        if _is_castling(piece, from_sq, to_sq, board):
            return MoveCheck(True, is_castling=True)
    return _ILLEGAL


def build_move_record(
    piece: Piece,
    from_sq: Square,
    to_sq: Square,
    board: Board,
    check: MoveCheck,
) -> MoveRecord:
    """Describe a validated move, including its castling/en-passant side effects."""
    castling: CastlingInfo | None = None
    en_passant: EnPassantInfo | None = None
    captured = board[to_sq]

    if check.is_castling:
        step = 1 if to_sq.file > from_sq.file else -1
        rook_file = 7 if step > 0 else 0
        castling = CastlingInfo(
            rook_from=Square(from_sq.rank, rook_file),
            rook_to=Square(from_sq.rank, from_sq.file + step),
        )
    elif check.is_en_passant:
        victim_sq = Square(from_sq.rank, to_sq.file)
        captured = board[victim_sq]
        en_passant = EnPassantInfo(captured_square=victim_sq)

    return MoveRecord(
        from_sq=from_sq,
        to_sq=to_sq,
        moved_piece=piece,
        captured_piece=captured,
        castling=castling,
        en_passant=en_passant,
    )


# -- Special moves (private) -------------------------------------------------


def _is_en_passant(
    piece: Piece,
    from_sq: Square,
    to_sq: Square,
    board: Board,
    last_move: MoveRecord | None,
) -> bool:
    if last_move is None or board[to_sq] is not None:
        return False
    if to_sq.rank - from_sq.rank != pawn_direction(piece.color):
        return False
    if abs(to_sq.file - from_sq.file) != 1:
        return False
    if not last_move.is_double_pawn_push:
        return False
    if last_move.moved_piece.color == piece.color:
        return False
    if last_move.to_sq != Square(from_sq.rank, to_sq.file):
        return False

    victim = board[last_move.to_sq]
    return (
        victim is not None
        and victim.piece_type == PieceType.PAWN
        and piece.is_enemy_of(victim)
    )


def _is_castling(piece: Piece, from_sq: Square, to_sq: Square, board: Board) -> bool:
    if piece.has_moved or from_sq.rank != to_sq.rank:
        return False
    if abs(to_sq.file - from_sq.file) != 2:
        return False

    step = 1 if to_sq.file > from_sq.file else -1
    rook_sq = Square(from_sq.rank, 7 if step > 0 else 0)
    rook = board[rook_sq]
    if (
        rook is None
        or rook.piece_type != PieceType.ROOK
        or rook.color != piece.color
        or rook.has_moved
    ):
        return False

    for file in range(from_sq.file + step, rook_sq.file, step):
        if board[Square(from_sq.rank, file)] is not None:
            return False

    if is_in_check(piece.color, board):
        return False

    # Walk the king over each square it crosses, destination included.
    for file in range(from_sq.file + step, to_sq.file + step, step):
        if _king_attacked_on(piece, from_sq, Square(from_sq.rank, file), board):
            return False
    return True


def _king_attacked_on(piece: Piece, king_sq: Square, sq: Square, board: Board) -> bool:
    """Temporarily move the king to *sq* and ask the check detector."""
    occupant = board[sq]
    board[king_sq] = None
    board[sq] = piece
    try:
        return is_in_check(piece.color, board)
    finally:
        board[sq] = occupant
        board[king_sq] = piece
