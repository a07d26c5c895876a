"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from rookie.core.types import parse_square
from rookie.game.controller import GameController
from rookie.game.results import Applied, MoveResult

PlayFn = Callable[..., MoveResult]


@pytest.fixture
def ctrl() -> GameController:
    """A controller set up at the standard starting position."""
    return GameController()


@pytest.fixture
def play() -> PlayFn:
    """Play space-separated coordinate moves, e.g. ``play(ctrl, "e2e4 e7e5")``.

    Every move but the last must be applied; the last result is returned.
    """

    def _play(controller: GameController, moves: str) -> MoveResult:
        tokens = moves.split()
        result: MoveResult | None = None
        for i, token in enumerate(tokens):
            result = controller.attempt_move(
                parse_square(token[:2]), parse_square(token[2:4])
            )
            if i < len(tokens) - 1:
                assert isinstance(result, Applied), f"{token}: {result}"
        assert result is not None
        return result

    return _play
