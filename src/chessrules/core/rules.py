"""Check, checkmate and self-check detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Side
from chessrules.core.errors import IllegalMove
from chessrules.core.move_generator import pseudo_legal_moves
from chessrules.core.types import Position, position_name

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece


def format_move(origin: Position, destination: Position) -> str:
    """Command text for a move, e.g. 'e2 e4'."""
    return f"{position_name(origin)} {position_name(destination)}"


class CheckEngine:
    """Answers check-related questions about a :class:`Board`.

    The engine only reads the board, except inside
    :meth:`would_cause_self_check`, which plays a move tentatively and
    always restores it before returning.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # ── Public API ───────────────────────────────────────────────────────

    def in_check(self, side: Side) -> bool:
        """Is *side*'s King among the opponent's reachable positions?"""
        with self._board.lock:
            king = self._board.king_position(side)
            return king in self._board.reachable_positions(side.opponent)

    def in_checkmate(self, side: Side) -> bool:
        with self._board.lock:
            return self.in_check(side) and not self.available_moves_while_in_check(
                side
            )

    def threatening_pieces(self, side: Side) -> list[Piece]:
        """Opposing pieces whose pseudo-legal moves include *side*'s King."""
        with self._board.lock:
            king = self._board.king_position(side)
            return [
                piece
                for piece in self._board.pieces_of(side.opponent)
                if king in pseudo_legal_moves(self._board, piece)
            ]

    def available_moves_while_in_check(self, side: Side) -> list[str]:
        """Escaping moves as ``"origin destination"`` strings.

        King moves come first. Other pieces are only considered against a
        single attacker, and only for capturing it; interposing a piece
        between a sliding attacker and the King is not generated.
        """
        with self._board.lock:
            moves = self._king_escapes(side)
            moves.extend(self._captures_of_sole_attacker(side))
            return moves

    def would_cause_self_check(
        self, origin: Position, destination: Position, side: Side
    ) -> bool:
        """Would moving the piece on *origin* to *destination* leave *side* in check?

        The board is identical before and after the call.
        """
        if self._board.is_empty(origin):
            raise IllegalMove(f"No piece on {position_name(origin)}")
        with self._board.tentative_move(origin, destination):
            return self.in_check(side)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _king_escapes(self, side: Side) -> list[str]:
        king_position = self._board.king_position(side)
        king = self._board.piece_at(king_position)
        assert king is not None
        attacked = self._board.reachable_positions(side.opponent)
        return [
            format_move(king_position, target)
            for target in pseudo_legal_moves(self._board, king)
            if target not in attacked
        ]

    def _captures_of_sole_attacker(self, side: Side) -> list[str]:
        threats = self.threatening_pieces(side)
        if len(threats) != 1:
            # Double check: only the King can answer it.
            return []

        target = threats[0].position
        assert target is not None
        moves: list[str] = []
        # Materialise first: tentative moves mutate the squares being iterated.
        for piece in list(self._board.pieces_of(side)):
            if piece.is_king:
                continue
            origin = piece.position
            assert origin is not None
            if target not in pseudo_legal_moves(self._board, piece):
                continue
            if not self.would_cause_self_check(origin, target, side):
                moves.append(format_move(origin, target))
        return moves
