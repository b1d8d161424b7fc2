"""Command-line entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from chessrules import __version__
from chessrules.core.errors import ScenarioFormatError
from chessrules.core.scenario import Scenario, load_scenario
from chessrules.game.config import DEFAULT_SCENARIO_PATH, MOVES_LIMIT_COUNT, GameConfig
from chessrules.game.session import ChessGame, GameResult
from chessrules.ui.console import ConsoleSession

_LOGGER = logging.getLogger(__name__)

app = typer.Typer(
    name="chessrules",
    help="Two-player chess over a text console.",
    add_completion=False,
)


def _configure_logging(config: GameConfig) -> None:
    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


def _build_config(move_limit: int, log_level: str, scenario: Path | None) -> GameConfig:
    try:
        return GameConfig(
            move_limit=move_limit,
            scenario_path=scenario if scenario is not None else DEFAULT_SCENARIO_PATH,
            log_level=log_level,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _exit_code(result: GameResult) -> int:
    return 1 if result == GameResult.ABORTED else 0


@app.command()
def version() -> None:
    """Print version information."""
    typer.echo(f"chessrules v{__version__}")


@app.command()
def play(
    scenario: Optional[Path] = typer.Argument(
        None, help="Scenario file; defaults to playbook/initialBoard.txt"
    ),
    move_limit: int = typer.Option(
        MOVES_LIMIT_COUNT, "--move-limit", help="Moves before the game is a draw"
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
) -> None:
    """Play interactively; White moves first."""
    config = _build_config(move_limit, log_level, scenario)
    _configure_logging(config)

    if config.scenario_path.is_file():
        try:
            initial = load_scenario(config.scenario_path)
        except ScenarioFormatError as exc:
            typer.echo(f"Error: Unable to setup board from file: {exc}", err=True)
            raise typer.Exit(code=1) from exc
    elif scenario is not None:
        typer.echo(f"Error: scenario file not found: {scenario}", err=True)
        raise typer.Exit(code=1)
    else:
        _LOGGER.info("No %s found, using the standard layout", config.scenario_path)
        initial = Scenario.standard()

    session = ConsoleSession(ChessGame(config))
    raise typer.Exit(code=_exit_code(session.run(initial)))


@app.command()
def replay(
    scenario: Path = typer.Argument(..., help="Scenario file with scripted moves"),
    move_limit: int = typer.Option(
        MOVES_LIMIT_COUNT, "--move-limit", help="Moves before the game is a draw"
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
) -> None:
    """Replay the moves listed in a scenario file."""
    config = _build_config(move_limit, log_level, scenario)
    _configure_logging(config)

    typer.echo(f"Entered file path: {scenario}")
    try:
        initial = load_scenario(scenario)
    except ScenarioFormatError as exc:
        typer.echo(f"Error: Unable to setup board from file: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    session = ConsoleSession(ChessGame(config))
    raise typer.Exit(code=_exit_code(session.replay(initial)))


def main() -> None:
    """Launch the chessrules CLI."""
    app()


if __name__ == "__main__":
    main()
