"""Tests for Board."""

import pytest

from rookie.core.board import Board, KingMissingError
from rookie.core.enums import Color, PieceType
from rookie.core.move import CastlingInfo, MoveRecord
from rookie.core.piece import Piece
from rookie.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E2, E4, Square,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawns_on_second_ranks(self) -> None:
        board = Board.initial()
        for file in range(8):
            assert board[Square(6, file)] == Piece(Color.WHITE, PieceType.PAWN)
            assert board[Square(1, file)] == Piece(Color.BLACK, PieceType.PAWN)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for rank in range(2, 6):
            for file in range(8):
                assert board[Square(rank, file)] is None

    def test_nothing_has_moved(self) -> None:
        board = Board.initial()
        for color in Color:
            assert len(board.pieces(color)) == 16
            assert not any(board[sq].has_moved for sq in board.pieces(color))


class TestBoardAccess:
    def test_set_and_clear(self) -> None:
        board = Board()
        knight = Piece(Color.WHITE, PieceType.KNIGHT)
        board[E4] = knight
        assert board[E4] == knight
        assert not board.is_empty(E4)
        board[E4] = None
        assert board.is_empty(E4)

    @pytest.mark.parametrize("sq", [Square(-1, 0), Square(0, 8), Square(8, 3)])
    def test_off_board_access_raises(self, sq: Square) -> None:
        board = Board()
        with pytest.raises(IndexError):
            board[sq]
        with pytest.raises(IndexError):
            board[sq] = Piece(Color.WHITE, PieceType.PAWN)

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_missing_king_is_a_fault(self) -> None:
        board = Board.initial()
        board[E1] = None
        with pytest.raises(KingMissingError):
            board.king_square(Color.WHITE)

    def test_snapshot_is_detached(self) -> None:
        board = Board.initial()
        snap = board.snapshot()
        board[E2] = None
        assert snap[6][4] == Piece(Color.WHITE, PieceType.PAWN)
        assert isinstance(snap, tuple) and isinstance(snap[0], tuple)

    def test_copy_and_equality(self) -> None:
        board = Board.initial()
        clone = board.copy()
        assert clone == board
        clone[E2] = None
        assert clone != board

    def test_repr_top_row_is_black(self) -> None:
        lines = repr(Board.initial()).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"


class TestBoardApplyRevert:
    def test_plain_move_marks_piece_moved(self) -> None:
        board = Board.initial()
        pawn = board[E2]
        record = MoveRecord(E2, E4, pawn)
        board.apply(record)
        assert board[E2] is None
        assert board[E4] == Piece(Color.WHITE, PieceType.PAWN, has_moved=True)
        board.revert(record)
        assert board == Board.initial()

    def test_castling_moves_rook(self) -> None:
        board = Board()
        board[E1] = Piece(Color.WHITE, PieceType.KING)
        board[H1] = Piece(Color.WHITE, PieceType.ROOK)
        before = board.copy()
        record = MoveRecord(
            E1, G1, board[E1], castling=CastlingInfo(rook_from=H1, rook_to=F1)
        )
        board.apply(record)
        assert board[G1] == Piece(Color.WHITE, PieceType.KING, has_moved=True)
        assert board[F1] == Piece(Color.WHITE, PieceType.ROOK, has_moved=True)
        assert board[H1] is None and board[E1] is None
        board.revert(record)
        assert board == before
