"""Pseudo-legal move generation.

Policies look at occupancy and the side of the occupant only. Whether a move
exposes the mover's own King is decided separately by
:class:`~chessrules.core.rules.CheckEngine`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from chessrules.core.enums import PieceKind, Side
from chessrules.core.types import Position

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Row delta of a forward pawn step, and the row a pawn starts on.
_PAWN_DIRECTION: dict[Side, int] = {Side.WHITE: -1, Side.BLACK: 1}
_PAWN_START_ROW: dict[Side, int] = {Side.WHITE: 6, Side.BLACK: 1}


def pseudo_legal_moves(board: Board, piece: Piece) -> list[Position]:
    """Destinations *piece* could move to, ignoring self-check."""
    origin = piece.position
    if origin is None:
        return []

    match piece.kind:
        case PieceKind.PAWN:
            return _pawn_moves(board, origin, piece.side)
        case PieceKind.KNIGHT:
            return _step_moves(board, origin, piece.side, KNIGHT_OFFSETS)
        case PieceKind.BISHOP:
            return _sliding_moves(board, origin, piece.side, BISHOP_DIRS)
        case PieceKind.ROOK:
            return _sliding_moves(board, origin, piece.side, ROOK_DIRS)
        case PieceKind.QUEEN:
            return _sliding_moves(board, origin, piece.side, QUEEN_DIRS)
        case PieceKind.KING:
            return _step_moves(board, origin, piece.side, KING_OFFSETS)
        case _:
            assert_never(piece.kind)


# ── Piece-specific generators (private) ──────────────────────────────────


def _pawn_moves(board: Board, origin: Position, side: Side) -> list[Position]:
    moves: list[Position] = []
    direction = _PAWN_DIRECTION[side]

    one_step = origin.offset(direction, 0)
    if one_step is not None and board.is_empty(one_step):
        moves.append(one_step)
        if origin.row == _PAWN_START_ROW[side]:
            two_step = origin.offset(2 * direction, 0)
            if two_step is not None and board.is_empty(two_step):
                moves.append(two_step)

    # A pawn on the far rank stays a pawn and simply has no forward moves.
    for d_col in (-1, 1):
        target = origin.offset(direction, d_col)
        if target is None:
            continue
        occupant = board.piece_at(target)
        if occupant is not None and occupant.side != side:
            moves.append(target)
    return moves


def _step_moves(
    board: Board,
    origin: Position,
    side: Side,
    offsets: tuple[tuple[int, int], ...],
) -> list[Position]:
    moves: list[Position] = []
    for d_row, d_col in offsets:
        target = origin.offset(d_row, d_col)
        if target is None:
            continue
        occupant = board.piece_at(target)
        if occupant is None or occupant.side != side:
            moves.append(target)
    return moves


def _sliding_moves(
    board: Board,
    origin: Position,
    side: Side,
    directions: tuple[tuple[int, int], ...],
) -> list[Position]:
    moves: list[Position] = []
    for d_row, d_col in directions:
        target = origin.offset(d_row, d_col)
        while target is not None:
            occupant = board.piece_at(target)
            if occupant is None:
                moves.append(target)
                target = target.offset(d_row, d_col)
                continue
            if occupant.side != side:
                moves.append(target)
            break
    return moves
