"""Game management layer — executor, controller, result values.

Quick start::

    from rookie.core import parse_square
    from rookie.game import GameController

    ctrl = GameController()
    ctrl.attempt_move(parse_square("e2"), parse_square("e4"))
    print(ctrl.query_status())
"""

from rookie.game.controller import GameController, GameEvents
from rookie.game.executor import PROMOTION_CHOICES, MoveExecutor
from rookie.game.interfaces import ExecutorPhase, IGameController
from rookie.game.results import (
    Applied,
    EmptyHistory,
    MoveResult,
    PromotionPending,
    PromotionResult,
    Rejected,
    RejectReason,
    Reverted,
    UndoResult,
)
from rookie.game.state import GameState

__all__ = [
    # Interfaces
    "ExecutorPhase",
    "IGameController",
    # Results
    "Applied",
    "EmptyHistory",
    "MoveResult",
    "PromotionPending",
    "PromotionResult",
    "Rejected",
    "RejectReason",
    "Reverted",
    "UndoResult",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveExecutor",
    "PROMOTION_CHOICES",
]
