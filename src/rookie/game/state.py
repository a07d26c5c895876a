"""GameState — the explicitly owned position and history of one game."""

from __future__ import annotations

from dataclasses import dataclass, field

from rookie.core.history import History
from rookie.core.notation import STARTING_FEN, position_from_fen
from rookie.core.position import Position
from rookie.core.rules import Rules
from rookie.core.status import GameStatus


@dataclass
class GameState:
    """Position plus history for a single game.

    ``status`` is cached after each committed move and dropped on undo; the
    :meth:`status` query recomputes it on demand.
    """

    position: Position = field(default_factory=Position)
    history: History = field(default_factory=History)
    start_fen: str = STARTING_FEN
    _status: GameStatus | None = field(default=None, init=False, repr=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game."""
        self.start_fen = fen or STARTING_FEN
        self.position = position_from_fen(self.start_fen)
        self.history.clear()
        self._status = None

    # ── Status ───────────────────────────────────────────────────────────

    def status(self) -> GameStatus:
        if self._status is None:
            self._status = Rules.game_status(self.position)
        return self._status

    def refresh_status(self) -> GameStatus:
        self._status = Rules.game_status(self.position)
        return self._status

    def invalidate_status(self) -> None:
        self._status = None

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.history)

    @property
    def is_game_over(self) -> bool:
        return self.status().is_checkmate
