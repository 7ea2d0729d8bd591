"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class StatusKind(IntEnum):
    """Game status classification after a move."""

    ACTIVE = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3
    DRAW = 4
    RESIGNED = 5


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3


class IllegalMoveReason(IntEnum):
    """Why a proposed move was rejected, in the order the checks run."""

    NO_PIECE_AT_ORIGIN = 1
    NOT_YOUR_PIECE = 2
    PSEUDO_ILLEGAL_GEOMETRY = 3
    LEAVES_KING_IN_CHECK = 4

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
