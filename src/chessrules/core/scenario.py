"""Scenarios: initial placements, capture history and scripted moves.

Text format::

    K e1
    k e8
                      <- blank line ends the placement block
    [p p]             <- symbols captured by White
    []                <- symbols captured by Black
    e2 e4             <- optional scripted moves, one per line

Lines starting with ``#`` are ignored everywhere.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from chessrules.core.errors import ScenarioFormatError

_BACK_RANK = "RNBQKBNR"


@dataclass(frozen=True, slots=True)
class Placement:
    """One initial piece: its symbol and its coordinate text."""

    symbol: str
    position: str

    def __str__(self) -> str:
        return f"{self.symbol} {self.position}"


@dataclass(frozen=True, slots=True)
class Scenario:
    """An initial board configuration used to seed a game."""

    placements: tuple[Placement, ...]
    white_captures: tuple[str, ...] = ()
    black_captures: tuple[str, ...] = ()
    moves: tuple[str, ...] = field(default=())

    @classmethod
    def standard(cls) -> Scenario:
        """The usual 32-piece starting layout."""
        placements: list[Placement] = []
        for file_idx, symbol in enumerate(_BACK_RANK):
            file = "abcdefgh"[file_idx]
            placements.append(Placement(symbol, f"{file}1"))
            placements.append(Placement("P", f"{file}2"))
            placements.append(Placement("p", f"{file}7"))
            placements.append(Placement(symbol.lower(), f"{file}8"))
        return cls(tuple(placements))


def parse_scenario(text: str) -> Scenario:
    """Parse scenario text (see module docstring)."""
    lines = [
        line.strip()
        for line in text.splitlines()
        if not line.strip().startswith("#")
    ]
    idx = 0

    placements: list[Placement] = []
    while idx < len(lines) and lines[idx]:
        parts = lines[idx].split()
        if len(parts) != 2:
            raise ScenarioFormatError(
                f"Line {idx + 1}: expected '<symbol> <coordinate>', got {lines[idx]!r}"
            )
        placements.append(Placement(parts[0], parts[1]))
        idx += 1

    # Skip the separator blank line(s).
    while idx < len(lines) and not lines[idx]:
        idx += 1

    white_captures = _parse_captures(lines, idx, "White")
    black_captures = _parse_captures(lines, idx + 1, "Black")
    moves = tuple(line for line in lines[idx + 2 :] if line)

    return Scenario(tuple(placements), white_captures, black_captures, moves)


def load_scenario(path: str | Path) -> Scenario:
    """Read and parse a scenario file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ScenarioFormatError(
            f"Cannot read scenario file {str(path)!r}: {exc}"
        ) from exc
    return parse_scenario(text)


def _parse_captures(lines: list[str], idx: int, owner: str) -> tuple[str, ...]:
    if idx >= len(lines):
        raise ScenarioFormatError(f"Missing {owner} captures line")
    line = lines[idx]
    if not (line.startswith("[") and line.endswith("]")):
        raise ScenarioFormatError(f"{owner} captures must be bracketed, got {line!r}")
    return tuple(line[1:-1].split())
