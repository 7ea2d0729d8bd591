"""RulesEngine: the turn / status state machine around a single board."""

from __future__ import annotations

import logging

from chessrules.core.board import Board
from chessrules.core.enums import Color, IllegalMoveReason, PieceType, StatusKind
from chessrules.core.errors import GameOver, IllegalMove
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import position_from_fen
from chessrules.core.piece import Piece
from chessrules.core.rules import GameStatus, Rules
from chessrules.core.types import Coordinate

_LOGGER = logging.getLogger(__name__)


def _check_kings(board: Board) -> None:
    for color in Color:
        kings = [
            sq for sq, piece in board.pieces(color) if piece.piece_type == PieceType.KING
        ]
        if len(kings) != 1:
            raise ValueError(
                f"Position needs exactly one {color!s} king, found {len(kings)}"
            )


class RulesEngine:
    """Owns one board, its move history and the game status.

    Moves go through two steps: :meth:`validate_move` checks legality for the
    side to move and hands back the pending :class:`Move`; :meth:`commit`
    applies the move most recently validated for the current ply.
    :meth:`apply_move` does both. Callers never get the live board, only
    copies and ``piece_at``.

    The side to move is derived from the starting side and the history
    length, so a rejected attempt cannot change it.
    """

    __slots__ = (
        "_board",
        "_start_side",
        "_history",
        "_redo",
        "_pending",
        "_status",
    )

    def __init__(
        self, board: Board | None = None, side_to_move: Color = Color.WHITE
    ) -> None:
        self._board = board.copy() if board is not None else Board.initial()
        _check_kings(self._board)
        self._start_side = side_to_move
        self._history: list[Move] = []
        self._redo: list[Move] = []
        self._pending: Move | None = None
        self._status = Rules.classify(self._board, side_to_move)

    @classmethod
    def from_fen(cls, fen: str) -> RulesEngine:
        board, side = position_from_fen(fen)
        return cls(board, side)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        if len(self._history) % 2 == 0:
            return self._start_side
        return self._start_side.opposite

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_game_over(self) -> bool:
        return self._status.is_terminal

    @property
    def history(self) -> tuple[Move, ...]:
        return tuple(self._history)

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self._history)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def board(self) -> Board:
        """A copy of the current board."""
        return self._board.copy()

    def piece_at(self, coord: Coordinate) -> Piece | None:
        return self._board.piece_at(coord)

    # ── Queries ──────────────────────────────────────────────────────────

    def rejection_reason(
        self,
        origin: Coordinate,
        destination: Coordinate,
        color: Color | None = None,
    ) -> IllegalMoveReason | None:
        mover = self.side_to_move if color is None else color
        return MoveGenerator(self._board).rejection_reason(origin, destination, mover)

    def is_legal_move(
        self,
        origin: Coordinate,
        destination: Coordinate,
        color: Color | None = None,
    ) -> bool:
        return self.rejection_reason(origin, destination, color) is None

    def legal_moves_for(self, color: Color) -> set[tuple[Coordinate, Coordinate]]:
        return MoveGenerator(self._board).legal_moves(color)

    def is_in_check(self, color: Color | None = None) -> bool:
        mover = self.side_to_move if color is None else color
        return MoveGenerator(self._board).is_in_check(mover)

    # ── Move application ─────────────────────────────────────────────────

    def validate_move(self, origin: Coordinate, destination: Coordinate) -> Move:
        """Check a move for the side to move and return its pending record."""
        self._ensure_in_progress()
        move = MoveGenerator(self._board).validate_move(
            origin, destination, self.side_to_move
        )
        self._pending = move
        return move

    def commit(self, move: Move) -> Move:
        """Apply *move*, the latest result of :meth:`validate_move` this ply."""
        self._ensure_in_progress()
        if move != self._pending:
            raise IllegalMove(f"Move {move} was not validated for the current turn")
        self._redo.clear()
        self._push(move)
        return move

    def apply_move(self, origin: Coordinate, destination: Coordinate) -> Move:
        """Validate and commit in one step."""
        return self.commit(self.validate_move(origin, destination))

    def undo(self) -> Move | None:
        """Take back the last move. Returns it, or None if there is none."""
        self._ensure_not_concluded()
        if not self._history:
            return None
        move = self._history.pop()
        self._board.revert(move)
        self._redo.append(move)
        self._pending = None
        self._reclassify()
        _LOGGER.debug("Undid %s", move)
        return move

    def redo(self) -> Move | None:
        """Replay the last undone move. Returns it, or None if there is none."""
        self._ensure_not_concluded()
        if not self._redo:
            return None
        move = self._redo.pop()
        self._push(move)
        return move

    # ── Resignation / draw ───────────────────────────────────────────────

    def resign(self, color: Color) -> None:
        self._ensure_in_progress()
        self._pending = None
        self._status = GameStatus.resigned(color)
        _LOGGER.debug("%s resigned", color)

    def agree_draw(self) -> None:
        self._ensure_in_progress()
        self._pending = None
        self._status = GameStatus.draw()
        _LOGGER.debug("Draw agreed")

    # ── Internal ─────────────────────────────────────────────────────────

    def _push(self, move: Move) -> None:
        self._board.apply(move)
        self._history.append(move)
        self._pending = None
        _LOGGER.debug("Applied %s (%s)", move, move.piece)
        self._reclassify()

    def _reclassify(self) -> None:
        previous = self._status
        self._status = Rules.classify(self._board, self.side_to_move)
        if self._status != previous:
            _LOGGER.debug("Status %s -> %s", previous, self._status)

    def _ensure_in_progress(self) -> None:
        if self._status.is_terminal:
            raise GameOver(f"Game is over: {self._status}")

    def _ensure_not_concluded(self) -> None:
        # Checkmate and stalemate can be taken back; a resignation or an
        # agreed draw ends the game for good.
        if self._status.kind in (StatusKind.RESIGNED, StatusKind.DRAW):
            raise GameOver(f"Game is over: {self._status}")
