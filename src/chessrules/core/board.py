"""Board - piece placement, capture bookkeeping and tentative moves."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.enums import Side
from chessrules.core.errors import InvariantViolation, SetupConflict
from chessrules.core.move_generator import pseudo_legal_moves
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Position, parse_position

if TYPE_CHECKING:
    from chessrules.core.scenario import Scenario

_LOGGER = logging.getLogger(__name__)


@dataclass(eq=False, slots=True)
class Square:
    """One cell of the board; holds at most one piece."""

    position: Position
    piece: Piece | None = None

    @property
    def is_empty(self) -> bool:
        return self.piece is None

    def __str__(self) -> str:
        return "" if self.piece is None else self.piece.symbol


class Board:
    """8x8 grid of squares plus the captured-piece symbols of each side.

    All mutation goes through :meth:`place`, :meth:`move_piece`,
    :meth:`setup` and :meth:`tentative_move`. ``lock`` is re-entrant so a
    caller already holding it (the move executor) can run a tentative move.
    """

    __slots__ = ("_squares", "_captures", "lock")

    def __init__(self) -> None:
        self._squares: list[list[Square]] = [
            [Square(Position(row, col)) for col in range(BOARD_SIZE)]
            for row in range(BOARD_SIZE)
        ]
        # [side] -> symbols of the pieces that side has captured.
        self._captures: dict[Side, list[str]] = {Side.WHITE: [], Side.BLACK: []}
        self.lock = threading.RLock()

    # ── Element access ───────────────────────────────────────────────────

    def get_square(self, position: Position | str) -> Square | None:
        """Square at *position*, or None for an off-board reference."""
        if isinstance(position, str):
            try:
                position = parse_position(position)
            except ValueError:
                return None
        return self._squares[position.row][position.col]

    def piece_at(self, position: Position) -> Piece | None:
        return self._squares[position.row][position.col].piece

    def is_empty(self, position: Position) -> bool:
        return self.piece_at(position) is None

    def squares(self) -> Iterator[Square]:
        """All squares, row-major from a8 to h1."""
        for row in self._squares:
            yield from row

    def captures(self, side: Side) -> tuple[str, ...]:
        """Symbols of the pieces *side* has captured, in capture order."""
        return tuple(self._captures[side])

    # ── Query helpers ────────────────────────────────────────────────────

    def pieces_of(self, side: Side) -> Iterator[Piece]:
        """Lazily yield every piece currently belonging to *side*.

        The generator does not take :attr:`lock`; hold it while iterating if
        another thread may be moving pieces.
        """
        for square in self.squares():
            if square.piece is not None and square.piece.side == side:
                yield square.piece

    def king_position(self, side: Side) -> Position:
        """Position of *side*'s King.

        Raises:
            InvariantViolation: no King of that side is on the board.
        """
        with self.lock:
            for piece in self.pieces_of(side):
                if piece.is_king:
                    assert piece.position is not None
                    return piece.position
        raise InvariantViolation(f"Cannot find {side.name} King on the board")

    def reachable_positions(self, side: Side) -> set[Position]:
        """Union of pseudo-legal destinations of every piece of *side*."""
        reachable: set[Position] = set()
        with self.lock:
            for piece in self.pieces_of(side):
                reachable.update(pseudo_legal_moves(self, piece))
        return reachable

    def snapshot(self) -> dict[Position, str]:
        """Occupancy map (position -> symbol) of the current placement."""
        with self.lock:
            return {
                square.position: square.piece.symbol
                for square in self.squares()
                if square.piece is not None
            }

    # ── Mutation ─────────────────────────────────────────────────────────

    def place(self, position: Position | str, piece: Piece) -> None:
        """Put *piece* on an empty square.

        Raises:
            SetupConflict: off-board position or square already occupied.
        """
        square = self.get_square(position)
        if square is None:
            raise SetupConflict(
                f"Cannot place {piece.symbol} off the board: {position!r}"
            )
        if square.piece is not None:
            raise SetupConflict(
                f"Cannot place {piece.symbol} on {square.position}: "
                f"occupied by {square.piece.symbol}"
            )
        self._occupy(square, piece)

    def move_piece(
        self, piece: Piece, origin: Square, destination: Square
    ) -> Piece | None:
        """Relocate *piece* without any legality check.

        A piece already on *destination* is captured: it leaves the board and
        its symbol is appended to the capturing side's list. Returns the
        captured piece, if any.
        """
        with self.lock:
            captured = destination.piece
            if captured is not None:
                self._captures[captured.side.opponent].append(captured.symbol)
                captured.position = None
                _LOGGER.debug(
                    "%s captured %s on %s",
                    piece.side.name,
                    captured.symbol,
                    destination.position,
                )
            origin.piece = None
            self._occupy(destination, piece)
            return captured

    @contextmanager
    def tentative_move(
        self, origin: Position, destination: Position
    ) -> Iterator[Piece]:
        """Play origin -> destination for the duration of the ``with`` block.

        Both squares get their prior occupants back on exit, including a
        piece that was about to be captured. No capture is recorded. The
        board lock is held throughout so no other thread sees the moved state.
        """
        with self.lock:
            from_square = self._squares[origin.row][origin.col]
            to_square = self._squares[destination.row][destination.col]
            moving = from_square.piece
            if moving is None:
                raise ValueError(f"No piece on {origin}")
            displaced = to_square.piece

            from_square.piece = None
            self._occupy(to_square, moving)
            try:
                yield moving
            finally:
                self._occupy(from_square, moving)
                to_square.piece = displaced
                if displaced is not None:
                    displaced.position = destination

    def setup(self, scenario: Scenario) -> None:
        """Populate the board from *scenario* (all or nothing).

        Raises:
            SetupConflict: a placement is invalid; the board is left empty.
        """
        with self.lock:
            self.clear()
            try:
                for placement in scenario.placements:
                    try:
                        piece = Piece.from_symbol(placement.symbol)
                    except ValueError as exc:
                        raise SetupConflict(str(exc)) from None
                    self.place(placement.position, piece)
                for side, symbols in (
                    (Side.WHITE, scenario.white_captures),
                    (Side.BLACK, scenario.black_captures),
                ):
                    for symbol in symbols:
                        try:
                            Piece.from_symbol(symbol)
                        except ValueError as exc:
                            raise SetupConflict(str(exc)) from None
                        self._captures[side].append(symbol)
            except SetupConflict:
                self.clear()
                raise
            _LOGGER.debug("Board set up with %d pieces", len(scenario.placements))

    def clear(self) -> None:
        with self.lock:
            for square in self.squares():
                if square.piece is not None:
                    square.piece.position = None
                square.piece = None
            for captured in self._captures.values():
                captured.clear()

    @staticmethod
    def _occupy(square: Square, piece: Piece) -> None:
        square.piece = piece
        piece.position = square.position

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __repr__(self) -> str:
        rows: list[str] = []
        with self.lock:
            for row in self._squares:
                rank = BOARD_SIZE - row[0].position.row
                cells = " ".join(str(square) or "." for square in row)
                rows.append(f"{rank} {cells}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
