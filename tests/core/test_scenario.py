"""Tests for scenario parsing and loading."""

import pytest

from chessrules.core.errors import ScenarioFormatError
from chessrules.core.scenario import Placement, Scenario, load_scenario, parse_scenario

SAMPLE = """\
# back-rank study
K h1
P g2
P h2
r e8
k a8

[p n]
[]
e8 e1
"""


class TestParseScenario:
    def test_placements(self) -> None:
        scenario = parse_scenario(SAMPLE)
        assert scenario.placements[0] == Placement("K", "h1")
        assert [str(p) for p in scenario.placements] == [
            "K h1",
            "P g2",
            "P h2",
            "r e8",
            "k a8",
        ]

    def test_captures(self) -> None:
        scenario = parse_scenario(SAMPLE)
        assert scenario.white_captures == ("p", "n")
        assert scenario.black_captures == ()

    def test_moves(self) -> None:
        assert parse_scenario(SAMPLE).moves == ("e8 e1",)

    def test_without_moves(self) -> None:
        scenario = parse_scenario("K e1\nk e8\n\n[]\n[]\n")
        assert scenario.moves == ()
        assert len(scenario.placements) == 2

    def test_missing_captures(self) -> None:
        with pytest.raises(ScenarioFormatError, match="Missing White captures"):
            parse_scenario("K e1\nk e8\n")

    def test_missing_black_captures(self) -> None:
        with pytest.raises(ScenarioFormatError, match="Missing Black captures"):
            parse_scenario("K e1\nk e8\n\n[]\n")

    def test_unbracketed_captures(self) -> None:
        with pytest.raises(ScenarioFormatError, match="bracketed"):
            parse_scenario("K e1\n\np n\n[]\n")

    def test_bad_placement_line(self) -> None:
        with pytest.raises(ScenarioFormatError, match="Line 2"):
            parse_scenario("K e1\nk\n\n[]\n[]\n")


class TestLoadScenario:
    def test_load_from_file(self, tmp_path) -> None:
        path = tmp_path / "board.txt"
        path.write_text(SAMPLE, encoding="utf-8")
        assert load_scenario(path) == parse_scenario(SAMPLE)

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ScenarioFormatError, match="Cannot read"):
            load_scenario(tmp_path / "nope.txt")


class TestStandardScenario:
    def test_piece_count(self) -> None:
        scenario = Scenario.standard()
        assert len(scenario.placements) == 32
        assert Placement("K", "e1") in scenario.placements
        assert Placement("q", "d8") in scenario.placements
        assert scenario.white_captures == ()
