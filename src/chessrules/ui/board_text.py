"""Plain-text board rendering."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Side
from chessrules.core.piece import glyph_for
from chessrules.core.types import BOARD_SIZE, FILES, Position


def _file_header() -> str:
    return "   " + "".join(f"{f} " for f in FILES)


def render_board(board: Board, *, glyphs: bool = True) -> str:
    """Board from rank 8 down to rank 1, framed by file letters.

    Empty squares render as ``_ |``; occupied ones as ``<piece> |`` where the
    piece is its Unicode glyph (or its symbol letter with ``glyphs=False``).
    """
    lines = [_file_header()]
    for row in range(BOARD_SIZE):
        rank = BOARD_SIZE - row
        cells: list[str] = []
        for col in range(BOARD_SIZE):
            piece = board.piece_at(Position(row, col))
            if piece is None:
                cells.append("_ |")
            else:
                cells.append(f"{piece.glyph if glyphs else piece.symbol} |")
        lines.append(f"{rank} |{''.join(cells)} {rank}")
        if row != BOARD_SIZE - 1:
            lines.append("")
    lines.append(_file_header())
    return "\n".join(lines) + "\n"


def render_captures(board: Board) -> str:
    """``White Captures: [...]`` and ``Black Captures: [...]`` lines."""
    lines = []
    for side in (Side.WHITE, Side.BLACK):
        figures = "".join(f"{glyph_for(symbol)} " for symbol in board.captures(side))
        lines.append(f"{side.name.capitalize()} Captures: [{figures}]")
    return "\n".join(lines) + "\n"


def render_status(board: Board) -> str:
    """Board followed by both capture lists."""
    return render_board(board) + render_captures(board)
