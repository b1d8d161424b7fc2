"""Piece identity."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.core.enums import PieceKind, Side
from chessrules.core.types import Position

# Symbol (FEN letter) <-> (Side, PieceKind)
_SYMBOL_MAP: dict[str, tuple[Side, PieceKind]] = {
    "P": (Side.WHITE, PieceKind.PAWN),
    "N": (Side.WHITE, PieceKind.KNIGHT),
    "B": (Side.WHITE, PieceKind.BISHOP),
    "R": (Side.WHITE, PieceKind.ROOK),
    "Q": (Side.WHITE, PieceKind.QUEEN),
    "K": (Side.WHITE, PieceKind.KING),
    "p": (Side.BLACK, PieceKind.PAWN),
    "n": (Side.BLACK, PieceKind.KNIGHT),
    "b": (Side.BLACK, PieceKind.BISHOP),
    "r": (Side.BLACK, PieceKind.ROOK),
    "q": (Side.BLACK, PieceKind.QUEEN),
    "k": (Side.BLACK, PieceKind.KING),
}

_GLYPHS: dict[str, str] = {
    "P": "♙",
    "N": "♘",
    "B": "♗",
    "R": "♖",
    "Q": "♕",
    "K": "♔",
    "p": "♟",
    "n": "♞",
    "b": "♝",
    "r": "♜",
    "q": "♛",
    "k": "♚",
}

_SYMBOLS: dict[tuple[Side, PieceKind], str] = {v: k for k, v in _SYMBOL_MAP.items()}


def glyph_for(symbol: str) -> str:
    """Unicode figure for a piece symbol, e.g. 'q' -> '♛'."""
    try:
        return _GLYPHS[symbol]
    except KeyError:
        raise ValueError(f"Invalid piece symbol: {symbol!r}") from None


@dataclass(eq=False, slots=True)
class Piece:
    """A piece on the board.

    ``kind`` and ``side`` never change. ``position`` is written only by
    :class:`~chessrules.core.board.Board` when the piece is placed or
    relocated; nothing else assigns it.
    """

    kind: PieceKind
    side: Side
    position: Position | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.side == Side.UNDECIDED:
            raise ValueError("A piece must belong to WHITE or BLACK")

    @classmethod
    def from_symbol(cls, symbol: str) -> Piece:
        """Create a piece from its symbol, e.g. 'N' -> white knight."""
        try:
            side, kind = _SYMBOL_MAP[symbol]
        except KeyError:
            raise ValueError(f"Invalid piece symbol: {symbol!r}") from None
        return cls(kind, side)

    @property
    def symbol(self) -> str:
        """Symbol letter (uppercase = white, lowercase = black)."""
        return _SYMBOLS[(self.side, self.kind)]

    @property
    def glyph(self) -> str:
        return _GLYPHS[self.symbol]

    @property
    def is_king(self) -> bool:
        return self.kind == PieceKind.KING

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        where = self.position if self.position is not None else "-"
        return f"Piece({self.side.name} {self.kind.name} @ {where})"
