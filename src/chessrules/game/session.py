"""ChessGame - the host that owns turn order around the rules engine.

The core takes the acting side explicitly on every call; whose turn it is,
how many moves were played and how the game ended live here.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import IntEnum, auto
from typing import TypeVar

from chessrules.core.board import Board
from chessrules.core.enums import Side
from chessrules.core.errors import IllegalMove, InvariantViolation, SetupConflict
from chessrules.core.executor import MoveExecutor, MoveOutcome, MoveStatus
from chessrules.core.scenario import Scenario
from chessrules.game.config import GameConfig

_LOGGER = logging.getLogger(__name__)
_T = TypeVar("_T")


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
    ABORTED = 4


MoveCallback = Callable[[MoveOutcome], None]
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


class ChessGame:
    """One game instance: board, executor, turn order and result."""

    __slots__ = (
        "_config",
        "_board",
        "_executor",
        "_side",
        "_moves_count",
        "_phase",
        "_result",
        "_diagnostic",
        "events",
    )

    def __init__(self, config: GameConfig | None = None) -> None:
        self._config = config if config is not None else GameConfig()
        self._board = Board()
        self._executor = MoveExecutor(self._board)
        self._side = Side.UNDECIDED
        self._moves_count = 0
        self._phase = GamePhase.NOT_STARTED
        self._result = GameResult.IN_PROGRESS
        self._diagnostic = ""
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def board(self) -> Board:
        return self._board

    @property
    def side_to_move(self) -> Side:
        return self._side

    @property
    def moves_count(self) -> int:
        return self._moves_count

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def diagnostic(self) -> str:
        """Why the game was aborted ('' otherwise)."""
        return self._diagnostic

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    # ── Lifecycle ────────────────────────────────────────────────────────

    def start(self, scenario: Scenario) -> None:
        """Set up the board from *scenario*; White moves first.

        Raises:
            SetupConflict: a placement is invalid (the board stays empty).
        """
        self._side = Side.UNDECIDED
        self._moves_count = 0
        self._result = GameResult.IN_PROGRESS
        self._diagnostic = ""
        try:
            self._board.setup(scenario)
        except SetupConflict:
            self._phase = GamePhase.NOT_STARTED
            _LOGGER.warning("Unable to set up board", exc_info=True)
            raise
        self._phase = GamePhase.AWAITING_MOVE
        self.advance_turn()

    def advance_turn(self) -> Side:
        """Hand the move to the other side (White after UNDECIDED)."""
        if self._side == Side.WHITE:
            self._side = Side.BLACK
        else:
            self._side = Side.WHITE
        return self._side

    # ── Moves ────────────────────────────────────────────────────────────

    def play(self, command: str) -> MoveOutcome:
        """Execute *command* for the side to move.

        A rejected move leaves the turn with the same side.

        Raises:
            InvariantViolation: the board is corrupted; the game is aborted
                before the exception propagates.
        """
        if self._phase != GamePhase.AWAITING_MOVE:
            return MoveOutcome(
                command,
                self._side,
                MoveStatus.ILLEGAL_MOVE,
                error=IllegalMove("Game is not awaiting a move"),
            )

        side = self._side
        try:
            outcome = self._executor.execute(command, side)
        except InvariantViolation as exc:
            self._abort(str(exc))
            raise

        if not outcome.applied:
            return outcome

        self._moves_count += 1
        self._emit_move(outcome)

        if outcome.checkmate:
            self._finish(
                GameResult.WHITE_WINS if side == Side.WHITE else GameResult.BLACK_WINS
            )
        elif self._moves_count >= self._config.move_limit:
            _LOGGER.info("Move limit %d reached", self._config.move_limit)
            self._finish(GameResult.DRAW)
        else:
            self.advance_turn()
        return outcome

    def replay(
        self,
        commands: Iterable[str],
        *,
        before_move: Callable[[Side, str], None] | None = None,
        after_move: MoveCallback | None = None,
    ) -> list[MoveOutcome]:
        """Play scripted commands in order until the game ends.

        ``before_move`` sees the side to move and the command about to be
        played; ``after_move`` sees every outcome, rejected ones included.
        """
        outcomes: list[MoveOutcome] = []
        for command in commands:
            if self.is_game_over:
                break
            if before_move is not None:
                before_move(self._side, command)
            outcome = self.play(command)
            outcomes.append(outcome)
            if after_move is not None:
                after_move(outcome)
        return outcomes

    # ── Prompt helpers ───────────────────────────────────────────────────

    def in_check(self) -> bool:
        return self._guard(lambda: self._executor.engine.in_check(self._side))

    def available_moves(self) -> list[str]:
        """Escaping moves for the side to move ([] when not in check)."""
        engine = self._executor.engine
        if not self.in_check():
            return []
        return self._guard(lambda: engine.available_moves_while_in_check(self._side))

    # ── Internal helpers ─────────────────────────────────────────────────

    def _guard(self, query: Callable[[], _T]) -> _T:
        try:
            return query()
        except InvariantViolation as exc:
            self._abort(str(exc))
            raise

    def _abort(self, diagnostic: str) -> None:
        _LOGGER.error("Game aborted: %s", diagnostic)
        self._diagnostic = diagnostic
        self._finish(GameResult.ABORTED)

    def _finish(self, result: GameResult) -> None:
        self._result = result
        self._phase = GamePhase.GAME_OVER
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_move(self, outcome: MoveOutcome) -> None:
        for cb in self.events.on_move:
            cb(outcome)
