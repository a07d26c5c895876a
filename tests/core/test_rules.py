"""Tests for Rules: legal destinations, checkmate, status."""

from rookie.core.enums import Color, StatusKind
from rookie.core.notation import position_from_fen
from rookie.core.position import Position
from rookie.core.rules import Rules
from rookie.core.status import GameStatus
from rookie.core.types import D6, E2, E3, E4, E5, F3, G1, H3, Square
from rookie.core.validator import build_move_record, is_legal_move

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"


class TestLegalDestinations:
    def test_knight_from_start(self) -> None:
        pos = Position()
        assert Rules.legal_destinations(pos, G1) == [F3, H3]

    def test_pawn_from_start(self) -> None:
        pos = Position()
        assert Rules.legal_destinations(pos, E2) == [E4, E3]

    def test_empty_or_off_board_square(self) -> None:
        pos = Position()
        assert Rules.legal_destinations(pos, E4) == []
        assert Rules.legal_destinations(pos, Square(9, 9)) == []

    def test_pinned_piece_has_no_moves(self) -> None:
        pos = position_from_fen("4k3/4r3/8/8/8/8/4B3/4K3 w - - 0 1")
        assert Rules.legal_destinations(pos, E2) == []

    def test_includes_en_passant(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        assert set(Rules.legal_destinations(pos, E5)) == {D6, Square(2, 4)}

    def test_leaves_position_untouched(self) -> None:
        pos = position_from_fen("r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R w KQkq - 0 1")
        before = pos.copy()
        for sq in pos.board.pieces(Color.WHITE):
            Rules.legal_destinations(pos, sq)
        assert pos == before

    def test_exposes_king(self) -> None:
        pos = position_from_fen("4k3/4r3/8/8/8/8/4B3/4K3 w - - 0 1")
        bishop = pos.board[E2]
        to_sq = Square(5, 5)
        check = is_legal_move(bishop, E2, to_sq, pos.board, None)
        record = build_move_record(bishop, E2, to_sq, pos.board, check)
        assert Rules.exposes_king(pos, record)
        assert pos.board[E2] == bishop


class TestCheckmate:
    def test_fools_mate(self) -> None:
        pos = position_from_fen(FOOLS_MATE)
        assert Rules.is_checkmate(Color.WHITE, pos)
        assert Rules.game_status(pos) == GameStatus.checkmate(Color.BLACK)

    def test_back_rank_mate_with_own_pawns(self) -> None:
        pos = position_from_fen("R5k1/5ppp/8/8/8/8/8/6K1 b - - 0 1")
        assert Rules.is_checkmate(Color.BLACK, pos)

    def test_king_and_rook_mate(self) -> None:
        # R on a8 checks black king d8; white king d6 covers all escapes
        pos = position_from_fen("R2k4/8/3K4/8/8/8/8/8 b - - 0 1")
        assert Rules.is_checkmate(Color.BLACK, pos)
        status = Rules.game_status(pos)
        assert status.winner == Color.WHITE
        assert status.loser == Color.BLACK

    def test_not_checkmate_when_king_can_step_away(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        assert not Rules.is_checkmate(Color.WHITE, pos)
        assert Rules.game_status(pos) == GameStatus.check(Color.WHITE)

    def test_not_checkmate_when_check_can_be_blocked(self) -> None:
        pos = position_from_fen("R5k1/5ppp/8/8/8/8/7K/3r4 b - - 0 1")
        assert not Rules.is_checkmate(Color.BLACK, pos)

    def test_not_checkmate_when_checker_can_be_captured(self) -> None:
        pos = position_from_fen("6k1/5pQp/6p1/8/8/8/8/6K1 b - - 0 1")
        assert Rules.is_in_check(Color.BLACK, pos)
        assert not Rules.is_checkmate(Color.BLACK, pos)

    def test_not_checkmate_without_check(self) -> None:
        pos = Position()
        assert not Rules.is_checkmate(Color.WHITE, pos)

    def test_detection_leaves_position_untouched(self) -> None:
        pos = position_from_fen("R5k1/5ppp/8/8/8/8/7K/3r4 b - - 0 1")
        before = pos.copy()
        Rules.is_checkmate(Color.BLACK, pos)
        assert pos == before


class TestStatus:
    def test_in_progress_at_start(self) -> None:
        assert Rules.game_status(Position()).kind == StatusKind.IN_PROGRESS

    def test_stalemate_is_left_unclassified(self) -> None:
        pos = position_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert not Rules.has_legal_move(Color.BLACK, pos)
        assert Rules.game_status(pos) == GameStatus.in_progress()
