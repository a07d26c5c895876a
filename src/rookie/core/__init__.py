"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from rookie.core import Position, Rules, parse_square

    pos = Position()
    print(Rules.legal_destinations(pos, parse_square("g1")))
"""

from rookie.core.attacks import is_in_check, is_square_attacked
from rookie.core.board import Board, BoardSnapshot, KingMissingError
from rookie.core.enums import Color, PieceType, StatusKind
from rookie.core.geometry import attacks_square, can_reach
from rookie.core.history import History
from rookie.core.move import CastlingInfo, EnPassantInfo, MoveRecord
from rookie.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from rookie.core.piece import Piece
from rookie.core.position import Position
from rookie.core.rules import Rules
from rookie.core.status import GameStatus
from rookie.core.types import (
    Square,
    is_on_board,
    make_square,
    parse_square,
    square_name,
)
from rookie.core.validator import MoveCheck, build_move_record, is_legal_move

__all__ = [
    # Enums
    "Color",
    "PieceType",
    "StatusKind",
    # Types / helpers
    "Square",
    "is_on_board",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "BoardSnapshot",
    "CastlingInfo",
    "EnPassantInfo",
    "GameStatus",
    "History",
    "KingMissingError",
    "MoveCheck",
    "MoveRecord",
    "Piece",
    "Position",
    "Rules",
    # Rule functions
    "attacks_square",
    "build_move_record",
    "can_reach",
    "is_in_check",
    "is_legal_move",
    "is_square_attacked",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
