"""Move validation and execution."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from chessrules.core.board import Board, Square
from chessrules.core.enums import Side
from chessrules.core.errors import CausingSelfCheck, IllegalMove, MoveRejected
from chessrules.core.move_generator import pseudo_legal_moves
from chessrules.core.piece import Piece
from chessrules.core.rules import CheckEngine, format_move

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Move:
    """A validated transition; lives only while one command is applied."""

    piece: Piece
    origin: Square
    destination: Square

    def __str__(self) -> str:
        return format_move(self.origin.position, self.destination.position)


class MoveStatus(StrEnum):
    """Terminal state of one :meth:`MoveExecutor.execute` call."""

    APPLIED = "applied"
    ILLEGAL_MOVE = "illegal_move"
    CAUSING_SELF_CHECK = "causing_self_check"


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of executing one command."""

    command: str
    side: Side
    status: MoveStatus
    checkmate: bool = False
    captured: str | None = None
    error: MoveRejected | None = None

    @property
    def applied(self) -> bool:
        return self.status == MoveStatus.APPLIED

    @property
    def reason(self) -> str:
        """Human-readable rejection message ('' when applied)."""
        return "" if self.error is None else str(self.error)


class MoveExecutor:
    """Validates a command against the rules and, if legal, applies it.

    A rejected command never touches the board. ``InvariantViolation`` is
    the only exception that escapes :meth:`execute`.
    """

    __slots__ = ("_board", "_engine")

    def __init__(self, board: Board, engine: CheckEngine | None = None) -> None:
        self._board = board
        self._engine = engine if engine is not None else CheckEngine(board)

    @property
    def board(self) -> Board:
        return self._board

    @property
    def engine(self) -> CheckEngine:
        return self._engine

    def execute(self, command: str, side: Side) -> MoveOutcome:
        """Validate and apply *command* (e.g. ``"e2 e4"``) for *side*."""
        with self._board.lock:
            try:
                move = self.validate(command, side)
            except CausingSelfCheck as exc:
                _LOGGER.debug("Rejected %r for %s: %s", command, side.name, exc)
                return MoveOutcome(
                    command, side, MoveStatus.CAUSING_SELF_CHECK, error=exc
                )
            except IllegalMove as exc:
                _LOGGER.debug("Rejected %r for %s: %s", command, side.name, exc)
                return MoveOutcome(command, side, MoveStatus.ILLEGAL_MOVE, error=exc)

            captured = self._board.move_piece(move.piece, move.origin, move.destination)
            checkmate = self._engine.in_checkmate(side.opponent)

        _LOGGER.info("%s played %s", side.name, move)
        if checkmate:
            _LOGGER.info("%s is checkmated", side.opponent.name)
        return MoveOutcome(
            command,
            side,
            MoveStatus.APPLIED,
            checkmate=checkmate,
            captured=None if captured is None else captured.symbol,
        )

    def validate(self, command: str, side: Side) -> Move:
        """Check *command* without applying it.

        Raises:
            IllegalMove: the command is malformed or breaks the rules.
            CausingSelfCheck: the move would expose *side*'s own King.
        """
        if side == Side.UNDECIDED:
            raise IllegalMove("No side to move")

        tokens = command.split()
        if self._engine.in_check(side):
            escapes = self._engine.available_moves_while_in_check(side)
            if " ".join(tokens) not in escapes:
                raise IllegalMove(
                    f"{side.label} is in check; {command!r} does not escape"
                )

        if len(tokens) != 2:
            raise IllegalMove(f"Expected two coordinates, got {command!r}")

        origin = self._board.get_square(tokens[0])
        destination = self._board.get_square(tokens[1])
        if origin is None or destination is None:
            raise IllegalMove(f"Off-board reference in {command!r}")

        piece = origin.piece
        if piece is None:
            raise IllegalMove(f"No piece on {origin.position}")
        if piece.side != side:
            raise IllegalMove(
                f"Piece on {origin.position} does not belong to {side.label}"
            )

        target = destination.position
        if target not in pseudo_legal_moves(self._board, piece):
            raise IllegalMove(
                f"{piece.symbol} on {origin.position} cannot reach {target}"
            )

        if self._engine.would_cause_self_check(origin.position, target, side):
            raise CausingSelfCheck()

        return Move(piece, origin, destination)
