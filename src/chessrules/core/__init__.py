"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Color, MoveGenerator, Rules, parse_square

    board = Board.initial()
    gen = MoveGenerator(board)
    gen.is_legal_move(parse_square("e2"), parse_square("e4"), Color.WHITE)
    Rules.classify(board, Color.WHITE)
"""

from chessrules.core.board import Board
from chessrules.core.enums import (
    Color,
    GameResult,
    IllegalMoveReason,
    PieceType,
    StatusKind,
)
from chessrules.core.errors import (
    ChessError,
    GameOver,
    IllegalMove,
    LeavesKingInCheck,
    MalformedCoordinate,
    NoPieceAtOrigin,
    NotYourPiece,
    OutOfBounds,
    PseudoIllegalGeometry,
)
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    position_from_fen,
    position_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import GameStatus, Rules
from chessrules.core.types import Coordinate, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "IllegalMoveReason",
    "PieceType",
    "StatusKind",
    # Errors
    "ChessError",
    "GameOver",
    "IllegalMove",
    "LeavesKingInCheck",
    "MalformedCoordinate",
    "NoPieceAtOrigin",
    "NotYourPiece",
    "OutOfBounds",
    "PseudoIllegalGeometry",
    # Types / helpers
    "Coordinate",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "GameStatus",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "position_from_fen",
    "position_to_fen",
]
