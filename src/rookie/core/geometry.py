"""Plain movement geometry: the attack query shared by validation and check.

Nothing here knows about castling or en passant, so check detection built on
:func:`can_reach` can never recurse back into castling evaluation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookie.core.enums import Color, PieceType
from rookie.core.types import Square, is_on_board

if TYPE_CHECKING:
    from rookie.core.board import Board
    from rookie.core.piece import Piece


def pawn_direction(color: Color) -> int:
    """Rank delta of a forward pawn step (White moves toward rank 0)."""
    return -1 if color == Color.WHITE else 1


def promotion_rank(color: Color) -> int:
    """The farthest rank for *color*'s pawns."""
    return 0 if color == Color.WHITE else 7


def path_is_clear(from_sq: Square, to_sq: Square, board: Board) -> bool:
    """Whether every square strictly between two aligned squares is empty.

    Callers guarantee the squares share a rank, a file or a diagonal.
    """
    d_rank = to_sq.rank - from_sq.rank
    d_file = to_sq.file - from_sq.file
    step_rank = (d_rank > 0) - (d_rank < 0)
    step_file = (d_file > 0) - (d_file < 0)
    rank = from_sq.rank + step_rank
    file = from_sq.file + step_file
    while (rank, file) != (to_sq.rank, to_sq.file):
        if board[Square(rank, file)] is not None:
            return False
        rank += step_rank
        file += step_file
    return True


def can_reach(piece: Piece, from_sq: Square, to_sq: Square, board: Board) -> bool:
    """Attack query: can *piece* on *from_sq* move to *to_sq* by plain geometry?

    Ignores castling, en passant and the mover's own king safety. A
    destination occupied by a friendly piece is never reachable.
    """
    if not (is_on_board(from_sq) and is_on_board(to_sq)) or from_sq == to_sq:
        return False
    target = board[to_sq]
    if target is not None and target.color == piece.color:
        return False

    d_rank = to_sq.rank - from_sq.rank
    d_file = to_sq.file - from_sq.file
    abs_rank = abs(d_rank)
    abs_file = abs(d_file)
    ptype = piece.piece_type

    if ptype == PieceType.PAWN:
        return _pawn_can_reach(piece, from_sq, to_sq, board)
    if ptype == PieceType.KNIGHT:
        return (abs_rank, abs_file) in ((2, 1), (1, 2))
    if ptype == PieceType.KING:
        return abs_rank <= 1 and abs_file <= 1
    if ptype == PieceType.ROOK:
        return _rook_can_reach(from_sq, to_sq, board)
    if ptype == PieceType.BISHOP:
        return _bishop_can_reach(from_sq, to_sq, board)
    if ptype == PieceType.QUEEN:
        if d_rank == 0 or d_file == 0:
            return _rook_can_reach(from_sq, to_sq, board)
        if abs_rank == abs_file:
            return _bishop_can_reach(from_sq, to_sq, board)
        return False
    return False


def attacks_square(piece: Piece, from_sq: Square, to_sq: Square, board: Board) -> bool:
    """Would *piece* capture something standing on *to_sq*?

    Same as :func:`can_reach` except for pawns, which attack diagonally
    whether or not the square is occupied and never attack straight ahead.
    """
    if piece.piece_type != PieceType.PAWN:
        return can_reach(piece, from_sq, to_sq, board)
    if not (is_on_board(from_sq) and is_on_board(to_sq)):
        return False
    return (
        to_sq.rank - from_sq.rank == pawn_direction(piece.color)
        and abs(to_sq.file - from_sq.file) == 1
    )


# -- Piece-specific geometry (private) --------------------------------------


def _pawn_can_reach(piece: Piece, from_sq: Square, to_sq: Square, board: Board) -> bool:
    direction = pawn_direction(piece.color)
    d_rank = to_sq.rank - from_sq.rank
    d_file = to_sq.file - from_sq.file
    target = board[to_sq]

    if d_file == 0 and target is None:
        if d_rank == direction:
            return True
        if d_rank == 2 * direction and not piece.has_moved:
            return board[Square(from_sq.rank + direction, from_sq.file)] is None
        return False

    return abs(d_file) == 1 and d_rank == direction and piece.is_enemy_of(target)


def _rook_can_reach(from_sq: Square, to_sq: Square, board: Board) -> bool:
    if from_sq.rank != to_sq.rank and from_sq.file != to_sq.file:
        return False
    return path_is_clear(from_sq, to_sq, board)


def _bishop_can_reach(from_sq: Square, to_sq: Square, board: Board) -> bool:
    if abs(to_sq.rank - from_sq.rank) != abs(to_sq.file - from_sq.file):
        return False
    return path_is_clear(from_sq, to_sq, board)
