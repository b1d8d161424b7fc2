"""Core enumerations for the rules engine."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Side to act.

    ``UNDECIDED`` only exists before the host assigns the first turn; it is
    never a legal acting side.
    """

    UNDECIDED = 0
    WHITE = 1
    BLACK = 2

    @property
    def opponent(self) -> Side:
        if self == Side.WHITE:
            return Side.BLACK
        if self == Side.BLACK:
            return Side.WHITE
        raise ValueError("UNDECIDED side has no opponent")

    @property
    def label(self) -> str:
        """Player name used in prompts, e.g. 'WHITE Player'."""
        if self == Side.UNDECIDED:
            return "Unknown Player"
        return f"{self.name} Player"

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6
