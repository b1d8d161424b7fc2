"""Position value object and coordinate helpers.

Board layout (top-down from Black's back rank):
    row 0 = rank 8, row 7 = rank 1
    col 0 = file a, col 7 = file h

so ``a8`` is ``Position(0, 0)`` and ``h1`` is ``Position(7, 7)``.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8

FILES = "abcdefgh"
RANKS = "12345678"


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A (row, col) pair on the 8x8 board."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not is_on_board(self.row, self.col):
            raise ValueError(f"Position out of range: ({self.row}, {self.col})")

    def offset(self, d_row: int, d_col: int) -> Position | None:
        """Neighbouring position, or None when it falls off the board."""
        row = self.row + d_row
        col = self.col + d_col
        if not is_on_board(row, col):
            return None
        return Position(row, col)

    @property
    def rank(self) -> int:
        """Rank number 1-8."""
        return BOARD_SIZE - self.row

    @property
    def file(self) -> str:
        return FILES[self.col]

    def __str__(self) -> str:
        return position_name(self)


def is_on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def parse_position(name: str) -> Position:
    """Parse a coordinate such as 'e2' into a :class:`Position`."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise ValueError(f"Invalid coordinate: {name!r}")
    return Position(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


def position_name(pos: Position) -> str:
    """Human-readable name, e.g. Position(6, 4) -> 'e2'."""
    return FILES[pos.col] + str(BOARD_SIZE - pos.row)


def all_positions() -> list[Position]:
    """Every position, row-major from a8 to h1."""
    return [Position(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]
