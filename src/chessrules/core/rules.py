"""High-level chess rules: check, checkmate, stalemate classification."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, StatusKind
from chessrules.core.move_generator import MoveGenerator

_TERMINAL: frozenset[StatusKind] = frozenset(
    {
        StatusKind.CHECKMATE,
        StatusKind.STALEMATE,
        StatusKind.DRAW,
        StatusKind.RESIGNED,
    }
)


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Current status of a game.

    ``color`` is the side the status is about: the side in check, the side
    that was mated, or the side that resigned. It is None for the other kinds.
    """

    kind: StatusKind
    color: Color | None = None

    @classmethod
    def active(cls) -> GameStatus:
        return cls(StatusKind.ACTIVE)

    @classmethod
    def check(cls, color: Color) -> GameStatus:
        return cls(StatusKind.CHECK, color)

    @classmethod
    def checkmate(cls, color: Color) -> GameStatus:
        return cls(StatusKind.CHECKMATE, color)

    @classmethod
    def stalemate(cls) -> GameStatus:
        return cls(StatusKind.STALEMATE)

    @classmethod
    def draw(cls) -> GameStatus:
        return cls(StatusKind.DRAW)

    @classmethod
    def resigned(cls, color: Color) -> GameStatus:
        return cls(StatusKind.RESIGNED, color)

    @property
    def is_terminal(self) -> bool:
        return self.kind in _TERMINAL

    @property
    def is_draw(self) -> bool:
        return self.kind in (StatusKind.STALEMATE, StatusKind.DRAW)

    @property
    def winner(self) -> Color | None:
        if self.kind in (StatusKind.CHECKMATE, StatusKind.RESIGNED):
            assert self.color is not None
            return self.color.opposite
        return None

    @property
    def result(self) -> GameResult:
        winner = self.winner
        if winner is not None:
            if winner == Color.WHITE:
                return GameResult.WHITE_WINS
            return GameResult.BLACK_WINS
        if self.is_draw:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS

    def __str__(self) -> str:
        kind = self.kind.name.lower()
        if self.color is None:
            return kind
        return f"{kind} ({self.color!s})"


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        return gen.is_in_check(color) and not gen.has_legal_move(color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        return not gen.is_in_check(color) and not gen.has_legal_move(color)

    @staticmethod
    def classify(board: Board, to_move: Color) -> GameStatus:
        """Status of the game with *to_move* about to play."""
        gen = MoveGenerator(board)
        in_check = gen.is_in_check(to_move)
        has_escape = gen.has_legal_move(to_move)

        if not has_escape:
            if in_check:
                return GameStatus.checkmate(to_move)
            return GameStatus.stalemate()
        if in_check:
            return GameStatus.check(to_move)
        return GameStatus.active()
