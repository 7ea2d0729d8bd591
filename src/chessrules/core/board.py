"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Coordinate

if TYPE_CHECKING:
    from chessrules.core.move import Move

_SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Board:
    """Mutable 64-square board.

    A dumb state holder: it places and moves pieces without checking legality
    and answers occupancy and attack queries by scanning every square.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * _SQUARE_COUNT

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coordinate) -> Piece | None:
        return self._squares[coord.index]

    def __setitem__(self, coord: Coordinate, piece: Piece | None) -> None:
        self._squares[coord.index] = piece

    def piece_at(self, coord: Coordinate) -> Piece | None:
        return self._squares[coord.index]

    def place(self, coord: Coordinate, piece: Piece) -> None:
        self._squares[coord.index] = piece

    def remove(self, coord: Coordinate) -> Piece | None:
        """Clear *coord* and return whatever stood there."""
        piece = self._squares[coord.index]
        self._squares[coord.index] = None
        return piece

    def is_empty(self, coord: Coordinate) -> bool:
        return self._squares[coord.index] is None

    # -- Mutation -----------------------------------------------------------

    def apply(self, move: Move) -> None:
        """Move the piece, replacing anything on the destination."""
        self[move.destination] = move.piece
        self[move.origin] = None

    def revert(self, move: Move) -> None:
        """Exact inverse of :meth:`apply`."""
        self[move.origin] = move.piece
        self[move.destination] = move.captured

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Coordinate, Piece]]:
        """``(square, piece)`` pairs, optionally only those of *color*."""
        for coord in Coordinate.all():
            piece = self._squares[coord.index]
            if piece is not None and (color is None or piece.color == color):
                yield coord, piece

    def find_king(self, color: Color) -> Coordinate | None:
        """Square of *color*'s king, or None if it is missing."""
        for coord, piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return coord
        return None

    def is_path_clear(self, origin: Coordinate, destination: Coordinate) -> bool:
        """Are all squares strictly between two aligned squares empty?"""
        drow = destination.row - origin.row
        dcol = destination.col - origin.col
        if drow and dcol and abs(drow) != abs(dcol):
            raise ValueError(f"{origin} and {destination} are not on a common line")

        step_row, step_col = _sign(drow), _sign(dcol)
        steps = max(abs(drow), abs(dcol))
        for i in range(1, steps):
            between = Coordinate(origin.row + i * step_row, origin.col + i * step_col)
            if self._squares[between.index] is not None:
                return False
        return True

    def is_attacked(self, target: Coordinate, by_color: Color) -> bool:
        """Is *target* attacked by any piece of *by_color*?"""
        return any(
            piece.attacks(coord, target, self) for coord, piece in self.pieces(by_color)
        )

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * _SQUARE_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b.place(Coordinate(0, col), Piece(Color.BLACK, pt))
            b.place(Coordinate(1, col), Piece(Color.BLACK, PieceType.PAWN))
            b.place(Coordinate(6, col), Piece(Color.WHITE, PieceType.PAWN))
            b.place(Coordinate(7, col), Piece(Color.WHITE, pt))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self._squares[row * BOARD_SIZE + col]
                cells.append(str(p) if p else ".")
            rank = BOARD_SIZE - row
            rows.append(f"{rank} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
