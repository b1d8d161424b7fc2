"""Interactive and scripted console front-ends for a :class:`ChessGame`."""

from __future__ import annotations

import logging
from collections.abc import Callable

from chessrules.core.errors import InvariantViolation, SetupConflict
from chessrules.core.executor import MoveOutcome
from chessrules.core.scenario import Scenario
from chessrules.game.session import ChessGame, GameResult
from chessrules.ui.board_text import render_status

_LOGGER = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


class ConsoleSession:
    """Drives a game over text input/output.

    ``read_line`` receives the prompt and returns one command; it may raise
    ``EOFError`` to end the session early. ``write`` prints one block of text.
    """

    __slots__ = ("_game", "_read_line", "_write")

    def __init__(
        self,
        game: ChessGame,
        read_line: ReadLine = input,
        write: Write = print,
    ) -> None:
        self._game = game
        self._read_line = read_line
        self._write = write

    @property
    def game(self) -> ChessGame:
        return self._game

    # ── Entry points ─────────────────────────────────────────────────────

    def run(self, scenario: Scenario) -> GameResult:
        """Interactive loop: prompt the side to move until the game ends."""
        if not self._start(scenario):
            return self._game.result

        game = self._game
        try:
            while not game.is_game_over:
                self._print_available_moves_in_check()
                try:
                    command = self._read_line(f"{game.side_to_move.label}> ").strip()
                except EOFError:
                    self._write("Input closed; leaving game.")
                    return game.result
                self._handle(game.play(command))
        except InvariantViolation:
            self._write(f"Error: game aborted: {game.diagnostic}")
        return game.result

    def replay(self, scenario: Scenario) -> GameResult:
        """File mode: play the scenario's scripted moves."""
        if not self._start(scenario):
            return self._game.result

        game = self._game
        try:
            game.replay(
                scenario.moves,
                before_move=lambda side, command: self._write(
                    f"{side.label}> {command}"
                ),
                after_move=self._handle,
            )
        except InvariantViolation:
            self._write(f"Error: game aborted: {game.diagnostic}")
        return game.result

    # ── Internal helpers ─────────────────────────────────────────────────

    def _start(self, scenario: Scenario) -> bool:
        try:
            self._game.start(scenario)
        except SetupConflict as exc:
            self._write(f"Error: Unable to setup board: {exc}")
            return False
        self._print_status()
        return True

    def _handle(self, outcome: MoveOutcome) -> None:
        if not outcome.applied:
            self._write(outcome.reason)
            return

        self._write(f"{outcome.side.label} action: {outcome.command}")
        self._print_status()

        result = self._game.result
        if result in (GameResult.WHITE_WINS, GameResult.BLACK_WINS):
            self._write(f"\n{outcome.side.label} wins. Checkmate")
        elif result == GameResult.DRAW:
            self._write("Tie game. Too many moves.")

    def _print_available_moves_in_check(self) -> None:
        game = self._game
        if not game.in_check():
            return
        lines = [f"{game.side_to_move.label} is in check!", "Available moves:"]
        lines.extend(game.available_moves())
        self._write("\n".join(lines) + "\n")

    def _print_status(self) -> None:
        self._write(render_status(self._game.board))
