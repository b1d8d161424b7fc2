"""Game management layer - turn order, move limit, result.

Quick start::

    from chessrules.core import Scenario
    from chessrules.game import ChessGame

    game = ChessGame()
    game.start(Scenario.standard())
    game.play("e2 e4")
"""

from chessrules.game.config import GameConfig
from chessrules.game.session import ChessGame, GameEvents, GamePhase, GameResult

__all__ = [
    "ChessGame",
    "GameConfig",
    "GameEvents",
    "GamePhase",
    "GameResult",
]
