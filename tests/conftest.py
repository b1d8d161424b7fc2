"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.board import Board
from chessrules.core.scenario import Placement, Scenario


def scenario_of(*placements: str) -> Scenario:
    """Build a scenario from ``"<symbol> <coordinate>"`` strings."""
    return Scenario(tuple(Placement(*text.split()) for text in placements))


@pytest.fixture
def make_board() -> Callable[..., Board]:
    """Factory for a board holding only the given placements."""

    def _make(*placements: str) -> Board:
        board = Board()
        board.setup(scenario_of(*placements))
        return board

    return _make
