"""Move legality with king-safety filtering, legal move enumeration, check."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, IllegalMoveReason
from chessrules.core.errors import error_for_reason
from chessrules.core.move import Move
from chessrules.core.types import Coordinate


class MoveGenerator:
    """Answers legality questions about a :class:`Board`.

    King safety is tested by simulating the move on a value copy of the
    board; the board handed to the generator is never mutated.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Legality -----------------------------------------------------------

    def rejection_reason(
        self, origin: Coordinate, destination: Coordinate, color: Color
    ) -> IllegalMoveReason | None:
        """Why *color* may not play *origin* → *destination*, or None if legal."""
        board = self._board
        piece = board.piece_at(origin)
        if piece is None:
            return IllegalMoveReason.NO_PIECE_AT_ORIGIN
        if piece.color != color:
            return IllegalMoveReason.NOT_YOUR_PIECE
        if not piece.pseudo_legal_move(origin, destination, board):
            return IllegalMoveReason.PSEUDO_ILLEGAL_GEOMETRY

        scratch = board.copy()
        scratch.apply(Move(origin, destination, piece, scratch.piece_at(destination)))
        if _king_attacked(scratch, color):
            return IllegalMoveReason.LEAVES_KING_IN_CHECK
        return None

    def is_legal_move(
        self, origin: Coordinate, destination: Coordinate, color: Color
    ) -> bool:
        return self.rejection_reason(origin, destination, color) is None

    def validate_move(
        self, origin: Coordinate, destination: Coordinate, color: Color
    ) -> Move:
        """Return the :class:`Move` record, or raise the matching ``IllegalMove``."""
        reason = self.rejection_reason(origin, destination, color)
        if reason is not None:
            raise error_for_reason(
                reason, f"Illegal move {origin}{destination} for {color!s}: {reason!s}"
            )
        piece = self._board.piece_at(origin)
        assert piece is not None
        return Move(origin, destination, piece, self._board.piece_at(destination))

    def legal_moves(self, color: Color) -> set[tuple[Coordinate, Coordinate]]:
        """Every legal ``(origin, destination)`` pair for *color*."""
        legal: set[tuple[Coordinate, Coordinate]] = set()
        for origin, _piece in list(self._board.pieces(color)):
            for destination in Coordinate.all():
                if self.is_legal_move(origin, destination, color):
                    legal.add((origin, destination))
        return legal

    def has_legal_move(self, color: Color) -> bool:
        """Like ``bool(legal_moves(color))`` but stops at the first hit."""
        for origin, _piece in list(self._board.pieces(color)):
            for destination in Coordinate.all():
                if self.is_legal_move(origin, destination, color):
                    return True
        return False

    # -- Attack detection ---------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return _king_attacked(self._board, color)


def _king_attacked(board: Board, color: Color) -> bool:
    king_sq = board.find_king(color)
    if king_sq is None:
        raise ValueError(f"No {color.name} king on board")
    return board.is_attacked(king_sq, color.opposite)
