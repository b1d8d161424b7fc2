"""Tests for ChessGame - turn order, move limit and results."""

import pytest

from chessrules.core.enums import Side
from chessrules.core.errors import InvariantViolation, SetupConflict
from chessrules.core.executor import MoveStatus
from chessrules.core.scenario import Placement, Scenario
from chessrules.game.config import GameConfig
from chessrules.game.session import ChessGame, GamePhase, GameResult

FOOLS_MATE = ("f2 f3", "e7 e5", "g2 g4", "d8 h4")


def _scenario(*placements: str) -> Scenario:
    return Scenario(tuple(Placement(*text.split()) for text in placements))


def _standard_game(config: GameConfig | None = None) -> ChessGame:
    game = ChessGame(config)
    game.start(Scenario.standard())
    return game


class TestStart:
    def test_before_start(self) -> None:
        game = ChessGame()
        assert game.phase == GamePhase.NOT_STARTED
        assert game.side_to_move == Side.UNDECIDED

    def test_white_moves_first(self) -> None:
        game = _standard_game()
        assert game.phase == GamePhase.AWAITING_MOVE
        assert game.side_to_move == Side.WHITE
        assert game.moves_count == 0
        assert game.result == GameResult.IN_PROGRESS

    def test_setup_conflict_propagates(self) -> None:
        game = ChessGame()
        with pytest.raises(SetupConflict):
            game.start(_scenario("K e1", "Q e1"))
        assert game.phase == GamePhase.NOT_STARTED
        assert game.board.snapshot() == {}

    def test_restart_resets(self) -> None:
        game = _standard_game()
        game.play("e2 e4")
        game.start(Scenario.standard())
        assert game.side_to_move == Side.WHITE
        assert game.moves_count == 0


class TestPlay:
    def test_legal_move_switches_side(self) -> None:
        game = _standard_game()
        outcome = game.play("e2 e4")
        assert outcome.applied
        assert game.side_to_move == Side.BLACK
        assert game.moves_count == 1

    def test_rejected_move_keeps_turn(self) -> None:
        game = _standard_game()
        outcome = game.play("e2 e5")
        assert outcome.status == MoveStatus.ILLEGAL_MOVE
        assert game.side_to_move == Side.WHITE
        assert game.moves_count == 0

    def test_cannot_move_opponent_piece(self) -> None:
        game = _standard_game()
        assert not game.play("e7 e5").applied
        assert game.side_to_move == Side.WHITE

    def test_move_event_fires(self) -> None:
        game = _standard_game()
        played: list[str] = []
        game.events.on_move.append(lambda outcome: played.append(outcome.command))
        game.play("e2 e4")
        game.play("e2 e4")  # rejected: no event
        assert played == ["e2 e4"]

    def test_fools_mate(self) -> None:
        game = _standard_game()
        results: list[GameResult] = []
        game.events.on_game_over.append(results.append)
        outcomes = [game.play(command) for command in FOOLS_MATE]
        assert all(outcome.applied for outcome in outcomes)
        assert outcomes[-1].checkmate
        assert game.is_game_over
        assert game.result == GameResult.BLACK_WINS
        assert results == [GameResult.BLACK_WINS]

    def test_play_after_game_over_rejected(self) -> None:
        game = _standard_game()
        game.replay(FOOLS_MATE)
        outcome = game.play("e1 f2")
        assert outcome.status == MoveStatus.ILLEGAL_MOVE
        assert "not awaiting" in outcome.reason

    def test_move_limit_draw(self) -> None:
        game = _standard_game(GameConfig(move_limit=2))
        game.play("e2 e4")
        assert not game.is_game_over
        game.play("e7 e5")
        assert game.is_game_over
        assert game.result == GameResult.DRAW


class TestReplay:
    def test_stops_at_game_over(self) -> None:
        game = _standard_game()
        outcomes = game.replay([*FOOLS_MATE, "a2 a3"])
        assert len(outcomes) == 4
        assert game.result == GameResult.BLACK_WINS

    def test_rejected_move_is_skipped(self) -> None:
        game = _standard_game()
        outcomes = game.replay(["e2 e5", "e2 e4"])
        assert [o.applied for o in outcomes] == [False, True]
        assert all(o.side == Side.WHITE for o in outcomes)
        assert game.side_to_move == Side.BLACK

    def test_hooks_wrap_each_command(self) -> None:
        game = _standard_game()
        seen: list[str] = []
        game.replay(
            ["e2 e5", "e2 e4", "e7 e5"],
            before_move=lambda side, cmd: seen.append(f"{side.name}> {cmd}"),
            after_move=lambda outcome: seen.append(outcome.status.name),
        )
        assert seen == [
            "WHITE> e2 e5",
            "ILLEGAL_MOVE",
            "WHITE> e2 e4",
            "APPLIED",
            "BLACK> e7 e5",
            "APPLIED",
        ]

    def test_hooks_not_called_after_game_over(self) -> None:
        game = _standard_game()
        announced: list[str] = []
        game.replay(
            [*FOOLS_MATE, "a2 a3"],
            before_move=lambda side, cmd: announced.append(cmd),
        )
        assert announced == list(FOOLS_MATE)


class TestCheckHelpers:
    def test_not_in_check(self) -> None:
        game = _standard_game()
        assert not game.in_check()
        assert game.available_moves() == []

    def test_in_check_lists_escapes(self) -> None:
        game = ChessGame()
        game.start(_scenario("K e1", "r e8", "k a8"))
        assert game.in_check()
        assert game.available_moves() == ["e1 d2", "e1 f2", "e1 d1", "e1 f1"]


class TestInvariantViolation:
    def test_missing_king_aborts_game(self) -> None:
        game = ChessGame()
        game.start(_scenario("K e1", "R a1"))
        with pytest.raises(InvariantViolation):
            game.play("a1 a2")
        assert game.is_game_over
        assert game.result == GameResult.ABORTED
        assert "BLACK King" in game.diagnostic

    def test_missing_own_king_aborts_on_query(self) -> None:
        game = ChessGame()
        game.start(_scenario("k e8", "R a1"))
        with pytest.raises(InvariantViolation):
            game.in_check()
        assert game.result == GameResult.ABORTED
