"""Check detection built on the plain-geometry attack query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookie.core.geometry import attacks_square, can_reach

if TYPE_CHECKING:
    from rookie.core.board import Board
    from rookie.core.enums import Color
    from rookie.core.types import Square


def is_square_attacked(sq: Square, by_color: Color, board: Board) -> bool:
    """Is *sq* attacked by any piece of *by_color*? Works for empty squares."""
    for from_sq in board.pieces(by_color):
        piece = board[from_sq]
        assert piece is not None
        if attacks_square(piece, from_sq, sq, board):
            return True
    return False


def is_in_check(color: Color, board: Board) -> bool:
    """Is *color*'s king attacked by the opponent?

    Asks :func:`~rookie.core.geometry.can_reach` for every enemy piece
    against the king square. Raises
    :class:`~rookie.core.board.KingMissingError` if the king is gone.
    """
    king_sq = board.king_square(color)
    opponent = color.opposite
    for from_sq in board.pieces(opponent):
        piece = board[from_sq]
        assert piece is not None
        if can_reach(piece, from_sq, king_sq, board):
            return True
    return False
