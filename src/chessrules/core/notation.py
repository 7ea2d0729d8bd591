"""FEN piece-placement parsing and serialization.

Only the placement and side-to-move fields carry meaning here. Castling,
en-passant and clock fields are accepted so that ordinary FEN strings can be
pasted in, and are ignored.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Coordinate

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1"

_SIDES: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


def board_from_fen(placement: str) -> Board:
    """Parse the FEN placement field (rank 8 first) into a :class:`Board`."""
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")
    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {placement!r}")
                board.place(Coordinate(row, col), Piece.from_char(ch))
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {placement!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {placement!r}")
    return board


def position_from_fen(fen: str) -> tuple[Board, Color]:
    """Parse a FEN string into ``(board, side_to_move)``.

    The side-to-move field is optional and defaults to white.
    """
    parts = fen.split()
    if not (1 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 1-6 fields): {fen!r}")

    board = board_from_fen(parts[0])

    side = Color.WHITE
    if len(parts) > 1:
        try:
            side = _SIDES[parts[1]]
        except KeyError:
            raise ValueError(f"Invalid FEN side-to-move field: {parts[1]!r}") from None
    return board, side


def board_to_fen(board: Board) -> str:
    """Serialise the piece placement of *board*."""
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        empty = 0
        text = ""
        for col in range(BOARD_SIZE):
            piece = board.piece_at(Coordinate(row, col))
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)


def position_to_fen(board: Board, side_to_move: Color, fullmove_number: int = 1) -> str:
    """Serialise *board* and side to move as a full six-field FEN."""
    side_str = "w" if side_to_move == Color.WHITE else "b"
    return f"{board_to_fen(board)} {side_str} - - 0 {fullmove_number}"
