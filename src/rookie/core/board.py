"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookie.core.enums import Color, PieceType
from rookie.core.piece import Piece
from rookie.core.types import ALL_SQUARES, Square, is_on_board

if TYPE_CHECKING:
    from rookie.core.move import MoveRecord

BoardSnapshot = tuple[tuple[Piece | None, ...], ...]

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class KingMissingError(ValueError):
    """A king is absent from the board; never happens in a legal game."""


class Board:
    """Mutable 8x8 grid. The grid is the only record of piece placement."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not is_on_board(sq):
            raise IndexError(f"Square off the board: {tuple(sq)!r}")
        return self._grid[sq.rank][sq.file]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if not is_on_board(sq):
            raise IndexError(f"Square off the board: {tuple(sq)!r}")
        self._grid[sq.rank][sq.file] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, top row first."""
        grid = self._grid
        return [
            sq
            for sq in ALL_SQUARES
            if (piece := grid[sq.rank][sq.file]) is not None and piece.color == color
        ]

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        grid = self._grid
        for sq in ALL_SQUARES:
            piece = grid[sq.rank][sq.file]
            if (
                piece is not None
                and piece.color == color
                and piece.piece_type == PieceType.KING
            ):
                return sq
        raise KingMissingError(f"No {color.name} king on board")

    def snapshot(self) -> BoardSnapshot:
        """Read-only copy of the grid, top row first."""
        return tuple(tuple(row) for row in self._grid)

    # -- Move primitives ----------------------------------------------------

    def apply(self, record: MoveRecord) -> None:
        """Perform the board mutation described by *record*.

        Only squares change; turn, history and last move are left alone so
        the same primitive serves both committed moves and trial moves.
        """
        placed = record.moved_piece.moved()
        if record.promotion is not None:
            placed = placed.promoted(record.promotion)
        self[record.from_sq] = None
        self[record.to_sq] = placed

        if record.castling is not None:
            rook = self[record.castling.rook_from]
            if rook is None:
                raise ValueError(f"No rook to castle with on {record.castling.rook_from}")
            self[record.castling.rook_from] = None
            self[record.castling.rook_to] = rook.moved()

        if record.en_passant is not None:
            self[record.en_passant.captured_square] = None

    def revert(self, record: MoveRecord) -> None:
        """Exactly undo :meth:`apply` for the same *record*."""
        self[record.from_sq] = record.moved_piece

        if record.en_passant is not None:
            self[record.to_sq] = None
            self[record.en_passant.captured_square] = record.captured_piece
        else:
            self[record.to_sq] = record.captured_piece

        if record.castling is not None:
            # Castling requires an unmoved rook, so its prior state is known.
            self[record.castling.rook_from] = Piece(
                record.moved_piece.color, PieceType.ROOK
            )
            self[record.castling.rook_to] = None

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * 8 for _ in range(8)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b._grid[0][f] = Piece(Color.BLACK, pt)
            b._grid[1][f] = Piece(Color.BLACK, PieceType.PAWN)
            b._grid[6][f] = Piece(Color.WHITE, PieceType.PAWN)
            b._grid[7][f] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank, row in enumerate(self._grid):
            cells = [str(p) if p else "." for p in row]
            rows.append(f"{8 - rank} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
