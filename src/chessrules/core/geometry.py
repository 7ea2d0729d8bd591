"""Per-piece movement geometry.

One exhaustive ``match`` over :class:`PieceType` decides whether a piece can
reach a square, ignoring whether the mover's own king would be left in check.
Sliding pieces need an empty path; knights jump; pawns distinguish moving
from capturing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece
    from chessrules.core.types import Coordinate


KNIGHT_DELTAS: frozenset[tuple[int, int]] = frozenset({(1, 2), (2, 1)})

# White pawns walk toward row 0 (rank 8), black pawns toward row 7.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


# -- Shape predicates -------------------------------------------------------


def is_orthogonal(drow: int, dcol: int) -> bool:
    return (drow == 0) != (dcol == 0)


def is_diagonal(drow: int, dcol: int) -> bool:
    return drow != 0 and abs(drow) == abs(dcol)


def is_knight_jump(drow: int, dcol: int) -> bool:
    return (abs(drow), abs(dcol)) in KNIGHT_DELTAS


def is_king_step(drow: int, dcol: int) -> bool:
    return max(abs(drow), abs(dcol)) == 1


# -- Public API -------------------------------------------------------------


def is_pseudo_legal(
    piece: Piece, origin: Coordinate, destination: Coordinate, board: Board
) -> bool:
    """Whether *piece* on *origin* may move to *destination* on *board*."""
    if origin == destination:
        return False
    target = board.piece_at(destination)
    if target is not None and target.color == piece.color:
        return False

    drow = destination.row - origin.row
    dcol = destination.col - origin.col

    if piece.piece_type == PieceType.PAWN:
        return _pawn_move(piece.color, origin, drow, dcol, target is not None, board)
    return _reaches(piece.piece_type, origin, destination, drow, dcol, board)


def attacks(piece: Piece, origin: Coordinate, target: Coordinate, board: Board) -> bool:
    """Whether *piece* on *origin* attacks *target*.

    Pawns attack their two forward diagonals only. Occupancy of *target* is
    irrelevant: a square guarded by its own side still counts as attacked.
    """
    if origin == target:
        return False

    drow = target.row - origin.row
    dcol = target.col - origin.col

    if piece.piece_type == PieceType.PAWN:
        return drow == PAWN_DIRECTION[piece.color] and abs(dcol) == 1
    return _reaches(piece.piece_type, origin, target, drow, dcol, board)


# -- Internals --------------------------------------------------------------


def _reaches(
    piece_type: PieceType,
    origin: Coordinate,
    destination: Coordinate,
    drow: int,
    dcol: int,
    board: Board,
) -> bool:
    match piece_type:
        case PieceType.KNIGHT:
            return is_knight_jump(drow, dcol)
        case PieceType.KING:
            return is_king_step(drow, dcol)
        case PieceType.BISHOP:
            return is_diagonal(drow, dcol) and board.is_path_clear(origin, destination)
        case PieceType.ROOK:
            return is_orthogonal(drow, dcol) and board.is_path_clear(
                origin, destination
            )
        case PieceType.QUEEN:
            return (
                is_orthogonal(drow, dcol) or is_diagonal(drow, dcol)
            ) and board.is_path_clear(origin, destination)
        case PieceType.PAWN:
            raise ValueError("Pawn geometry depends on color; use _pawn_move")
    raise ValueError(f"Unknown piece type: {piece_type!r}")


def _pawn_move(
    color: Color,
    origin: Coordinate,
    drow: int,
    dcol: int,
    is_capture: bool,
    board: Board,
) -> bool:
    direction = PAWN_DIRECTION[color]

    if dcol == 0:
        if is_capture:
            return False
        if drow == direction:
            return True
        if drow == 2 * direction and origin.row == PAWN_START_ROW[color]:
            middle = origin.offset(direction, 0)
            return middle is not None and board.piece_at(middle) is None
        return False

    return is_capture and abs(dcol) == 1 and drow == direction
