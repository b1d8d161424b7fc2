"""Game-level configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

MOVES_LIMIT_COUNT = 400
DEFAULT_SCENARIO_PATH = Path("playbook") / "initialBoard.txt"


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable settings for one game instance.

    Args:
        move_limit: Applied moves (both sides) after which the game is a draw.
        scenario_path: Scenario file loaded for interactive play.
        log_level: Name of the root logging level used by the CLI.
    """

    move_limit: int = MOVES_LIMIT_COUNT
    scenario_path: Path = field(default=DEFAULT_SCENARIO_PATH)
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.move_limit <= 0:
            raise ValueError(f"move_limit must be positive, got {self.move_limit}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())
