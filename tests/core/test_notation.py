"""Tests for FEN placement parsing and serialization."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    position_from_fen,
    position_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.types import parse_square


class TestFenParsing:
    def test_starting_position(self) -> None:
        board, side = position_from_fen(STARTING_FEN)
        assert board == Board.initial()
        assert side == Color.WHITE

    def test_black_to_move(self) -> None:
        _, side = position_from_fen("4k3/8/8/8/8/8/8/4K3 b")
        assert side == Color.BLACK

    def test_placement_only_defaults_to_white(self) -> None:
        _, side = position_from_fen("4k3/8/8/8/8/8/8/4K3")
        assert side == Color.WHITE

    def test_castling_and_ep_fields_ignored(self) -> None:
        board, side = position_from_fen(
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )
        assert side == Color.BLACK
        assert board[parse_square("e4")] == Piece(Color.WHITE, PieceType.PAWN)
        assert board.is_empty(parse_square("e2"))

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8/8/8/8/8 w",  # seven ranks
            "9/8/8/8/8/8/8/8 w",  # bad digit
            "8/8/8/8/8/8/8/7 w",  # short rank
            "8/8/8/8/8/8/8/8p w",  # long rank
            "8/8/8/8/8/8/8/x7 w",  # unknown piece
            "8/8/8/8/8/8/8/8 x",  # bad side
        ],
    )
    def test_invalid(self, fen: str) -> None:
        with pytest.raises(ValueError):
            position_from_fen(fen)


class TestFenSerialization:
    def test_initial_placement(self) -> None:
        assert board_to_fen(Board.initial()) == STARTING_FEN.split()[0]

    def test_round_trip(self) -> None:
        placement = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R"
        assert board_to_fen(board_from_fen(placement)) == placement

    def test_position_to_fen(self) -> None:
        board = Board.initial()
        assert position_to_fen(board, Color.WHITE) == STARTING_FEN
        assert position_to_fen(board, Color.BLACK, 3).endswith(" b - - 0 3")
