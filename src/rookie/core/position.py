"""Position — board plus side to move and the move that led here."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookie.core.board import Board
from rookie.core.enums import Color

if TYPE_CHECKING:
    from rookie.core.move import MoveRecord


class Position:
    """Board, side to move and last move.

    ``last_move`` is what en-passant validation looks at; it is kept equal to
    the top of the game's history by the executor.
    """

    __slots__ = ("board", "turn", "last_move")

    def __init__(
        self,
        board: Board | None = None,
        turn: Color = Color.WHITE,
        last_move: MoveRecord | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.turn = turn
        self.last_move = last_move

    def copy(self) -> Position:
        return Position(self.board.copy(), self.turn, self.last_move)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.turn == other.turn
            and self.last_move == other.last_move
        )

    def __repr__(self) -> str:
        return f"Position(turn={self.turn}, last_move={self.last_move})\n{self.board!r}"
