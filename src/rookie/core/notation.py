"""FEN parsing and serialization for position setup.

FEN has no per-piece movement history, so ``has_moved`` flags are inferred:
pawns off their home rank have moved, kings and rooks are unmoved only when
the castling field still grants the matching right, and every other piece is
left unmoved (the flag does not matter for them).
"""

from __future__ import annotations

from rookie.core.board import Board
from rookie.core.enums import Color, PieceType
from rookie.core.geometry import pawn_direction
from rookie.core.move import MoveRecord
from rookie.core.piece import Piece
from rookie.core.position import Position
from rookie.core.types import Square, parse_square, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# Castling letter → (colour, rook file). Kings castle from the e-file.
_CASTLING_RIGHTS: dict[str, tuple[Color, int]] = {
    "K": (Color.WHITE, 7),
    "Q": (Color.WHITE, 0),
    "k": (Color.BLACK, 7),
    "q": (Color.BLACK, 0),
}
_KING_FILE = 4


def _back_rank(color: Color) -> int:
    return 7 if color == Color.WHITE else 0


def _pawn_home_rank(color: Color) -> int:
    return 6 if color == Color.WHITE else 1


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement (first FEN rank is rank 0 of the grid)
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank, rank_text in enumerate(ranks):
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[Square(rank, file)] = Piece.from_char(ch)
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling → unmoved kings and rooks
    unmoved: set[Square] = set()
    if castling_part != "-":
        seen: set[str] = set()
        for ch in castling_part:
            right = _CASTLING_RIGHTS.get(ch)
            if right is None or ch in seen:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            color, rook_file = right
            rank = _back_rank(color)
            king_sq = Square(rank, _KING_FILE)
            rook_sq = Square(rank, rook_file)
            if board[king_sq] != Piece(color, PieceType.KING) or board[rook_sq] != Piece(
                color, PieceType.ROOK
            ):
                raise ValueError(
                    f"FEN castling right {ch!r} without king and rook in place: {fen!r}"
                )
            unmoved.update((king_sq, rook_sq))

    _infer_has_moved(board, unmoved)

    # 4. En passant → the opposing double step that just happened
    last_move: MoveRecord | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        expected_rank = 2 if side == Color.WHITE else 5
        if ep.rank != expected_rank:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )
        last_move = _double_step_through(ep, side.opposite, board)

    # 5–6. Clocks (optional, validated but not tracked)
    if len(parts) > 4 and int(parts[4]) < 0:
        raise ValueError(f"Invalid FEN halfmove clock: {parts[4]!r}")
    if len(parts) > 5 and int(parts[5]) < 1:
        raise ValueError(f"Invalid FEN fullmove number: {parts[5]!r}")

    return Position(board, side, last_move)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to four-field FEN (no clocks)."""
    board = pos.board

    # 1. Board
    rows: list[str] = []
    for rank in range(8):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[Square(rank, file)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if pos.turn == Color.WHITE else "b"

    # 3. Castling
    castling_str = ""
    for ch, (color, rook_file) in _CASTLING_RIGHTS.items():
        rank = _back_rank(color)
        king = board[Square(rank, _KING_FILE)]
        rook = board[Square(rank, rook_file)]
        if (
            king == Piece(color, PieceType.KING)
            and rook == Piece(color, PieceType.ROOK)
        ):
            castling_str += ch
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = "-"
    last = pos.last_move
    if last is not None and last.is_double_pawn_push:
        ep_str = square_name(
            Square((last.from_sq.rank + last.to_sq.rank) // 2, last.to_sq.file)
        )

    return f"{board_str} {side_str} {castling_str} {ep_str}"


# -- Helpers (private) -------------------------------------------------------


def _infer_has_moved(board: Board, unmoved: set[Square]) -> None:
    for color in Color:
        for sq in board.pieces(color):
            piece = board[sq]
            assert piece is not None
            if piece.piece_type == PieceType.PAWN:
                moved = sq.rank != _pawn_home_rank(color)
            elif piece.piece_type in (PieceType.KING, PieceType.ROOK):
                moved = sq not in unmoved
            else:
                moved = False
            if moved:
                board[sq] = piece.moved()


def _double_step_through(ep: Square, mover: Color, board: Board) -> MoveRecord:
    direction = pawn_direction(mover)
    to_sq = Square(ep.rank + direction, ep.file)
    from_sq = Square(ep.rank - direction, ep.file)
    pawn = board[to_sq]
    if pawn is None or pawn.piece_type != PieceType.PAWN or pawn.color != mover:
        raise ValueError(f"FEN en-passant square {square_name(ep)} has no pawn behind it")
    if board[from_sq] is not None or board[ep] is not None:
        raise ValueError(f"FEN en-passant square {square_name(ep)} is not reachable")
    return MoveRecord(
        from_sq=from_sq,
        to_sq=to_sq,
        moved_piece=Piece(mover, PieceType.PAWN),
    )
