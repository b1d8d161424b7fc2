"""Error kinds raised by the rules engine.

``MoveRejected`` subclasses are recoverable: the move is not applied and the
host may re-prompt. ``InvariantViolation`` means the board is corrupted and
the game instance must be terminated.
"""

from __future__ import annotations


class ChessError(Exception):
    """Base class for every rules-engine error."""


class SetupConflict(ChessError):
    """A scenario placement is off-board, unknown or already occupied."""


class ScenarioFormatError(ChessError):
    """A scenario file cannot be parsed."""


class MoveRejected(ChessError):
    """A proposed move was not applied."""


class IllegalMove(MoveRejected):
    """Malformed command or a move the rules do not allow."""

    def __init__(self, message: str = "Illegal move") -> None:
        super().__init__(message)


class CausingSelfCheck(MoveRejected):
    """A pseudo-legal move that would expose the mover's own King."""

    def __init__(self, message: str = "Move would cause self-check") -> None:
        super().__init__(message)


class InvariantViolation(ChessError):
    """Corrupted board state, e.g. a side has no King."""
