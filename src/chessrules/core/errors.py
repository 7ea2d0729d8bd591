"""Exception hierarchy for rejected coordinates and moves.

Every error is a recoverable rejection of a single attempt; none of them
leaves the board partially updated.
"""

from __future__ import annotations

from chessrules.core.enums import IllegalMoveReason


class ChessError(ValueError):
    """Base class for all chessrules errors."""


class OutOfBounds(ChessError):
    """Row or column outside the 8x8 board."""


class MalformedCoordinate(ChessError):
    """Square text that is not ``<file a-h><rank 1-8>``."""


class GameOver(ChessError):
    """A move was attempted after the game reached a terminal status."""


class IllegalMove(ChessError):
    """A move that may not be applied in the current position.

    Raised directly when :meth:`RulesEngine.commit` receives a move that was
    not validated for the current ply; the subclasses below carry the exact
    legality failure.
    """

    reason: IllegalMoveReason | None = None


class NoPieceAtOrigin(IllegalMove):
    reason = IllegalMoveReason.NO_PIECE_AT_ORIGIN


class NotYourPiece(IllegalMove):
    reason = IllegalMoveReason.NOT_YOUR_PIECE


class PseudoIllegalGeometry(IllegalMove):
    reason = IllegalMoveReason.PSEUDO_ILLEGAL_GEOMETRY


class LeavesKingInCheck(IllegalMove):
    reason = IllegalMoveReason.LEAVES_KING_IN_CHECK


_ERROR_BY_REASON: dict[IllegalMoveReason, type[IllegalMove]] = {
    IllegalMoveReason.NO_PIECE_AT_ORIGIN: NoPieceAtOrigin,
    IllegalMoveReason.NOT_YOUR_PIECE: NotYourPiece,
    IllegalMoveReason.PSEUDO_ILLEGAL_GEOMETRY: PseudoIllegalGeometry,
    IllegalMoveReason.LEAVES_KING_IN_CHECK: LeavesKingInCheck,
}


def error_for_reason(reason: IllegalMoveReason, message: str) -> IllegalMove:
    """Build the :class:`IllegalMove` subclass matching *reason*."""
    return _ERROR_BY_REASON[reason](message)
