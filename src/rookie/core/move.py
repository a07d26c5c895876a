"""MoveRecord — the complete, reversible description of one move."""

from __future__ import annotations

from dataclasses import dataclass

from rookie.core.enums import PieceType
from rookie.core.piece import Piece
from rookie.core.types import Square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class CastlingInfo:
    """Rook relocation performed alongside a castling king move."""

    rook_from: Square
    rook_to: Square


@dataclass(frozen=True, slots=True)
class EnPassantInfo:
    """Square of the pawn removed by an en-passant capture."""

    captured_square: Square


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """Immutable record of one move, sufficient to undo it exactly.

    ``moved_piece`` is the pre-move snapshot (original type and ``has_moved``
    flag). ``promotion`` stays ``None`` until a promotion choice resolves.
    """

    from_sq: Square
    to_sq: Square
    moved_piece: Piece
    captured_piece: Piece | None = None
    castling: CastlingInfo | None = None
    en_passant: EnPassantInfo | None = None
    promotion: PieceType | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured_piece is not None

    @property
    def is_double_pawn_push(self) -> bool:
        return (
            self.moved_piece.piece_type == PieceType.PAWN
            and abs(self.to_sq.rank - self.from_sq.rank) == 2
        )

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base
