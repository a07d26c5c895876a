"""GameStatus value object."""

from __future__ import annotations

from dataclasses import dataclass

from rookie.core.enums import Color, StatusKind


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Status of the side to move.

    For ``CHECK`` the colour is the side in check; for ``CHECKMATE`` it is the
    winner.
    """

    kind: StatusKind
    color: Color | None = None

    @classmethod
    def in_progress(cls) -> GameStatus:
        return cls(StatusKind.IN_PROGRESS)

    @classmethod
    def check(cls, color: Color) -> GameStatus:
        return cls(StatusKind.CHECK, color)

    @classmethod
    def checkmate(cls, winner: Color) -> GameStatus:
        return cls(StatusKind.CHECKMATE, winner)

    @property
    def is_checkmate(self) -> bool:
        return self.kind == StatusKind.CHECKMATE

    @property
    def winner(self) -> Color | None:
        return self.color if self.kind == StatusKind.CHECKMATE else None

    @property
    def loser(self) -> Color | None:
        return self.color.opposite if self.kind == StatusKind.CHECKMATE else None

    def __str__(self) -> str:
        if self.kind == StatusKind.CHECKMATE:
            return f"checkmate, {self.color} wins"
        if self.kind == StatusKind.CHECK:
            return f"{self.color} in check"
        return "in progress"
