"""Tests for MoveExecutor."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Side
from chessrules.core.errors import CausingSelfCheck, IllegalMove, InvariantViolation
from chessrules.core.executor import MoveExecutor, MoveStatus
from chessrules.core.scenario import Scenario
from chessrules.core.types import parse_position as P


def _standard_executor() -> MoveExecutor:
    board = Board()
    board.setup(Scenario.standard())
    return MoveExecutor(board)


class TestApply:
    def test_pawn_double_step(self) -> None:
        executor = _standard_executor()
        outcome = executor.execute("e2 e4", Side.WHITE)
        assert outcome.applied
        assert outcome.status == MoveStatus.APPLIED
        assert not outcome.checkmate
        assert outcome.reason == ""
        assert executor.board.piece_at(P("e4")).symbol == "P"
        assert executor.board.is_empty(P("e2"))

    def test_extra_whitespace_tolerated(self) -> None:
        executor = _standard_executor()
        assert executor.execute("  g1   f3 ", Side.WHITE).applied

    def test_capture_recorded(self, make_board) -> None:
        executor = MoveExecutor(make_board("K a1", "R e2", "n e7", "k h8"))
        outcome = executor.execute("e2 e7", Side.WHITE)
        assert outcome.applied
        assert outcome.captured == "n"
        assert executor.board.captures(Side.WHITE) == ("n",)

    def test_checkmate_reported(self, make_board) -> None:
        executor = MoveExecutor(make_board("K h1", "P g2", "P h2", "r e8", "k a8"))
        outcome = executor.execute("e8 e1", Side.BLACK)
        assert outcome.applied
        assert outcome.checkmate

    def test_escape_from_check(self, make_board) -> None:
        executor = MoveExecutor(make_board("K e1", "r e8", "k a8"))
        outcome = executor.execute("e1 d1", Side.WHITE)
        assert outcome.applied
        assert executor.board.king_position(Side.WHITE) == P("d1")

    def test_pawn_reaching_far_rank_stays_pawn(self, make_board) -> None:
        executor = MoveExecutor(make_board("K a1", "P e7", "k h1"))
        assert executor.execute("e7 e8", Side.WHITE).applied
        assert executor.board.piece_at(P("e8")).symbol == "P"


class TestReject:
    @pytest.mark.parametrize(
        "command",
        [
            "e2",
            "e2 e4 e5",
            "",
            "z9 e4",
            "e2 e9",
            "e3 e4",  # empty origin
            "e7 e5",  # black piece
            "e2 e5",  # not pseudo-legal
            "d1 d3",  # blocked queen
        ],
    )
    def test_illegal(self, command: str) -> None:
        executor = _standard_executor()
        before = executor.board.snapshot()
        outcome = executor.execute(command, Side.WHITE)
        assert outcome.status == MoveStatus.ILLEGAL_MOVE
        assert isinstance(outcome.error, IllegalMove)
        assert not outcome.applied
        assert executor.board.snapshot() == before

    def test_undecided_side(self) -> None:
        executor = _standard_executor()
        outcome = executor.execute("e2 e4", Side.UNDECIDED)
        assert outcome.status == MoveStatus.ILLEGAL_MOVE

    def test_pinned_piece_causes_self_check(self, make_board) -> None:
        executor = MoveExecutor(make_board("K e1", "B e2", "r e8", "k a8"))
        before = executor.board.snapshot()
        outcome = executor.execute("e2 d3", Side.WHITE)
        assert outcome.status == MoveStatus.CAUSING_SELF_CHECK
        assert isinstance(outcome.error, CausingSelfCheck)
        assert not isinstance(outcome.error, IllegalMove)
        assert executor.board.snapshot() == before

    def test_king_into_attack_when_not_in_check(self, make_board) -> None:
        executor = MoveExecutor(make_board("K e1", "r d8", "k a8"))
        outcome = executor.execute("e1 d1", Side.WHITE)
        assert outcome.status == MoveStatus.CAUSING_SELF_CHECK

    def test_king_into_attack_when_in_check(self, make_board) -> None:
        executor = MoveExecutor(make_board("K e1", "r e8", "k a8"))
        outcome = executor.execute("e1 e2", Side.WHITE)
        assert outcome.status == MoveStatus.ILLEGAL_MOVE

    def test_in_check_move_must_escape(self, make_board) -> None:
        executor = MoveExecutor(make_board("K e1", "P a2", "r e8", "k a8"))
        outcome = executor.execute("a2 a3", Side.WHITE)
        assert outcome.status == MoveStatus.ILLEGAL_MOVE
        assert "in check" in outcome.reason


class TestValidate:
    def test_validate_does_not_apply(self) -> None:
        executor = _standard_executor()
        move = executor.validate("b1 c3", Side.WHITE)
        assert str(move) == "b1 c3"
        assert move.piece.symbol == "N"
        assert executor.board.piece_at(P("b1")) is move.piece

    def test_validate_raises(self) -> None:
        executor = _standard_executor()
        with pytest.raises(IllegalMove):
            executor.validate("b1 b3", Side.WHITE)


class TestInvariantViolation:
    def test_missing_opponent_king_propagates(self, make_board) -> None:
        executor = MoveExecutor(make_board("K e1", "R a1"))
        with pytest.raises(InvariantViolation):
            executor.execute("a1 a2", Side.WHITE)
