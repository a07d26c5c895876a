"""Perft node counts driven through the public controller API.

Leaves are bulk-counted from ``select_piece``; a pawn destination on the last
rank counts once per promotion choice.
"""

from __future__ import annotations

import pytest

from rookie.core.enums import PieceType
from rookie.core.geometry import promotion_rank
from rookie.game.controller import GameController
from rookie.game.executor import PROMOTION_CHOICES
from rookie.game.results import Applied, PromotionPending, Reverted


def perft(ctrl: GameController, depth: int) -> int:
    """Count leaf nodes at *depth* using attempt_move/undo."""
    position = ctrl.state.position
    color = position.turn
    nodes = 0
    for from_sq in position.board.pieces(color):
        piece = position.board[from_sq]
        assert piece is not None
        promotes = piece.piece_type == PieceType.PAWN
        for to_sq in ctrl.select_piece(from_sq):
            is_promotion = promotes and to_sq.rank == promotion_rank(color)
            if depth == 1:
                nodes += len(PROMOTION_CHOICES) if is_promotion else 1
                continue
            if not is_promotion:
                assert isinstance(ctrl.attempt_move(from_sq, to_sq), Applied)
                nodes += perft(ctrl, depth - 1)
                assert isinstance(ctrl.undo(), Reverted)
                continue
            for choice in PROMOTION_CHOICES:
                assert isinstance(ctrl.attempt_move(from_sq, to_sq), PromotionPending)
                assert isinstance(ctrl.choose_promotion(choice), Applied)
                nodes += perft(ctrl, depth - 1)
                assert isinstance(ctrl.undo(), Reverted)
    return nodes


def _controller(fen: str | None = None) -> GameController:
    ctrl = GameController()
    ctrl.new_game(fen)
    return ctrl


# ── Starting position ────────────────────────────────────────────────────────


class TestPerftStarting:
    def test_depth_1(self) -> None:
        assert perft(_controller(), 1) == 20

    def test_depth_2(self) -> None:
        assert perft(_controller(), 2) == 400

    @pytest.mark.slow
    def test_depth_3(self) -> None:
        assert perft(_controller(), 3) == 8_902

    def test_position_restored(self) -> None:
        ctrl = _controller()
        before = ctrl.state.position.copy()
        perft(ctrl, 2)
        assert ctrl.state.position == before
        assert ctrl.move_history == ()


# ── Kiwipete (castling, en passant, pins) ───────────────────────────────────

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


class TestPerftKiwipete:
    def test_depth_1(self) -> None:
        assert perft(_controller(KIWIPETE), 1) == 48

    @pytest.mark.slow
    def test_depth_2(self) -> None:
        assert perft(_controller(KIWIPETE), 2) == 2_039


# ── Position 3: en-passant edge cases ───────────────────────────────────────

POS3 = "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1"


class TestPerftPosition3:
    def test_depth_1(self) -> None:
        assert perft(_controller(POS3), 1) == 14

    def test_depth_2(self) -> None:
        assert perft(_controller(POS3), 2) == 191


# ── Promotion ────────────────────────────────────────────────────────────────

PROMO = "n1n5/PPPk4/8/8/8/8/4Kppp/5N1N b - - 0 1"


class TestPerftPromotion:
    def test_depth_1(self) -> None:
        assert perft(_controller(PROMO), 1) == 24

    @pytest.mark.slow
    def test_depth_2(self) -> None:
        assert perft(_controller(PROMO), 2) == 496
