"""Text presentation: board rendering and the console loop."""

from chessrules.ui.board_text import render_board, render_captures
from chessrules.ui.console import ConsoleSession

__all__ = ["ConsoleSession", "render_board", "render_captures"]
