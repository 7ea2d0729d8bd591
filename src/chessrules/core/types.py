"""Square coordinates and name helpers.

Board layout (row-major, rank 8 first)::

    row 0:  a8 b8 c8 d8 e8 f8 g8 h8
    row 1:  a7 ...
    ...
    row 7:  a1 b1 c1 d1 e1 f1 g1 h1

``row = 8 - rank`` and ``col = file index``, so ``e2`` is ``Coordinate(6, 4)``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chessrules.core.errors import MalformedCoordinate, OutOfBounds

BOARD_SIZE = 8

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True, order=True)
class Coordinate:
    """Immutable (row, col) address of one of the 64 squares."""

    row: int
    col: int

    def __post_init__(self) -> None:
        for value in (self.row, self.col):
            if isinstance(value, bool) or not isinstance(value, int):
                raise OutOfBounds(f"Coordinate components must be ints: {self!r}")
            if not 0 <= value < BOARD_SIZE:
                raise OutOfBounds(f"Coordinate off the board: ({self.row}, {self.col})")

    # ── Text conversion ──────────────────────────────────────────────────

    @classmethod
    def from_name(cls, name: str) -> Coordinate:
        """Parse square name, e.g. 'e2' → Coordinate(6, 4)."""
        if (
            not isinstance(name, str)
            or len(name) != 2
            or name[0] not in _FILES
            or name[1] not in _RANKS
        ):
            raise MalformedCoordinate(f"Invalid square name: {name!r}")
        return cls(BOARD_SIZE - int(name[1]), _FILES.index(name[0]))

    @property
    def name(self) -> str:
        """Human-readable name, e.g. Coordinate(7, 0) → 'a1'."""
        return _FILES[self.col] + str(BOARD_SIZE - self.row)

    def __str__(self) -> str:
        return self.name

    # ── Geometry helpers ─────────────────────────────────────────────────

    @property
    def index(self) -> int:
        """Row-major index 0–63 (a8=0, h1=63)."""
        return self.row * BOARD_SIZE + self.col

    def offset(self, drow: int, dcol: int) -> Coordinate | None:
        """Square shifted by (*drow*, *dcol*), or None if that leaves the board."""
        row = self.row + drow
        col = self.col + dcol
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            return Coordinate(row, col)
        return None

    @classmethod
    def all(cls) -> Iterator[Coordinate]:
        """All 64 squares in row-major order."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                yield cls(row, col)


def parse_square(name: str) -> Coordinate:
    """Parse square name, e.g. 'e4' → Coordinate(4, 4)."""
    return Coordinate.from_name(name)


def square_name(coord: Coordinate) -> str:
    """Human-readable name, e.g. Coordinate(0, 7) → 'h8'."""
    return coord.name
