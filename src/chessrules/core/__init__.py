"""Core rules engine - pure chess logic with zero external dependencies.

Quick start::

    from chessrules.core import Board, MoveExecutor, Scenario, Side

    board = Board()
    board.setup(Scenario.standard())
    executor = MoveExecutor(board)
    outcome = executor.execute("e2 e4", Side.WHITE)
"""

from chessrules.core.board import Board, Square
from chessrules.core.enums import PieceKind, Side
from chessrules.core.errors import (
    CausingSelfCheck,
    ChessError,
    IllegalMove,
    InvariantViolation,
    MoveRejected,
    ScenarioFormatError,
    SetupConflict,
)
from chessrules.core.executor import Move, MoveExecutor, MoveOutcome, MoveStatus
from chessrules.core.move_generator import pseudo_legal_moves
from chessrules.core.piece import Piece
from chessrules.core.rules import CheckEngine, format_move
from chessrules.core.scenario import Placement, Scenario, load_scenario, parse_scenario
from chessrules.core.types import Position, parse_position, position_name

__all__ = [
    # Enums
    "PieceKind",
    "Side",
    # Types / helpers
    "Position",
    "format_move",
    "parse_position",
    "position_name",
    # Errors
    "CausingSelfCheck",
    "ChessError",
    "IllegalMove",
    "InvariantViolation",
    "MoveRejected",
    "ScenarioFormatError",
    "SetupConflict",
    # Domain objects
    "Board",
    "CheckEngine",
    "Move",
    "MoveExecutor",
    "MoveOutcome",
    "MoveStatus",
    "Piece",
    "Square",
    "pseudo_legal_moves",
    # Scenarios
    "Placement",
    "Scenario",
    "load_scenario",
    "parse_scenario",
]
