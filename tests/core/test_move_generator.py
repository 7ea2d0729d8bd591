"""Tests for MoveGenerator: legality checks, king safety, enumeration."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, IllegalMoveReason
from chessrules.core.errors import (
    IllegalMove,
    LeavesKingInCheck,
    NoPieceAtOrigin,
    NotYourPiece,
    PseudoIllegalGeometry,
)
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import board_from_fen
from chessrules.core.types import parse_square

# White rook d2 is pinned to the king on e1 by the bishop on b4.
PINNED_ROOK = "4k3/8/8/8/1b6/8/3R4/4K3"


def _reason(
    board: Board, origin: str, destination: str, color: Color
) -> IllegalMoveReason | None:
    gen = MoveGenerator(board)
    return gen.rejection_reason(parse_square(origin), parse_square(destination), color)


class TestRejectionReasons:
    def test_no_piece(self) -> None:
        assert (
            _reason(Board.initial(), "e4", "e5", Color.WHITE)
            == IllegalMoveReason.NO_PIECE_AT_ORIGIN
        )

    def test_not_your_piece(self) -> None:
        assert (
            _reason(Board.initial(), "e7", "e5", Color.WHITE)
            == IllegalMoveReason.NOT_YOUR_PIECE
        )

    def test_bad_geometry(self) -> None:
        assert (
            _reason(Board.initial(), "e2", "e5", Color.WHITE)
            == IllegalMoveReason.PSEUDO_ILLEGAL_GEOMETRY
        )

    def test_legal(self) -> None:
        assert _reason(Board.initial(), "e2", "e4", Color.WHITE) is None


class TestKingSafety:
    def test_pinned_rook_cannot_leave_the_diagonal(self) -> None:
        board = board_from_fen(PINNED_ROOK)
        for target in ("d5", "d1", "a2", "h2", "d8"):
            assert (
                _reason(board, "d2", target, Color.WHITE)
                == IllegalMoveReason.LEAVES_KING_IN_CHECK
            ), target

    def test_pinned_rook_raises(self) -> None:
        gen = MoveGenerator(board_from_fen(PINNED_ROOK))
        with pytest.raises(LeavesKingInCheck) as info:
            gen.validate_move(parse_square("d2"), parse_square("d5"), Color.WHITE)
        assert info.value.reason == IllegalMoveReason.LEAVES_KING_IN_CHECK

    def test_simulation_leaves_board_untouched(self) -> None:
        board = board_from_fen(PINNED_ROOK)
        snapshot = board.copy()
        MoveGenerator(board).legal_moves(Color.WHITE)
        assert board == snapshot

    def test_king_may_not_step_into_attack(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/r7/4K3")
        gen = MoveGenerator(board)
        assert not gen.is_legal_move(parse_square("e1"), parse_square("e2"), Color.WHITE)
        assert gen.is_legal_move(parse_square("e1"), parse_square("f1"), Color.WHITE)

    def test_king_may_not_capture_defended_piece(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/3rr3/4K3")
        gen = MoveGenerator(board)
        # d2 is defended by the rook on e2 and vice versa.
        assert not gen.is_legal_move(parse_square("e1"), parse_square("d2"), Color.WHITE)
        assert not gen.is_legal_move(parse_square("e1"), parse_square("e2"), Color.WHITE)

    def test_check_must_be_answered(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/P7/r3K3")
        gen = MoveGenerator(board)
        assert gen.is_in_check(Color.WHITE)
        assert not gen.is_legal_move(parse_square("a2"), parse_square("a3"), Color.WHITE)
        assert gen.is_legal_move(parse_square("e1"), parse_square("e2"), Color.WHITE)

    def test_missing_king_is_an_error(self) -> None:
        board = board_from_fen("8/8/8/8/8/8/4P3/8")
        with pytest.raises(ValueError, match="No WHITE king"):
            MoveGenerator(board).is_in_check(Color.WHITE)


class TestValidateMove:
    def test_returns_move_record(self) -> None:
        board = board_from_fen("4k3/8/8/3p4/4P3/8/8/4K3")
        move = MoveGenerator(board).validate_move(
            parse_square("e4"), parse_square("d5"), Color.WHITE
        )
        assert str(move) == "e4d5"
        assert move.is_capture
        assert move.captured == board[parse_square("d5")]

    @pytest.mark.parametrize(
        "origin, destination, error",
        [
            ("e4", "e5", NoPieceAtOrigin),
            ("e7", "e5", NotYourPiece),
            ("a1", "a3", PseudoIllegalGeometry),
        ],
    )
    def test_raises_specific_error(
        self, origin: str, destination: str, error: type[IllegalMove]
    ) -> None:
        gen = MoveGenerator(Board.initial())
        with pytest.raises(error):
            gen.validate_move(
                parse_square(origin), parse_square(destination), Color.WHITE
            )


class TestLegalMoves:
    def test_starting_position_has_twenty(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert len(gen.legal_moves(Color.WHITE)) == 20
        assert len(gen.legal_moves(Color.BLACK)) == 20

    def test_pinned_rook_contributes_nothing(self) -> None:
        gen = MoveGenerator(board_from_fen(PINNED_ROOK))
        origins = {origin for origin, _ in gen.legal_moves(Color.WHITE)}
        assert origins == {parse_square("e1")}

    def test_has_legal_move_agrees(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.has_legal_move(Color.WHITE)

    def test_self_capture_never_legal(self) -> None:
        board = Board.initial()
        gen = MoveGenerator(board)
        for color in Color:
            own = [sq for sq, _ in board.pieces(color)]
            for origin in own:
                for target in own:
                    assert (
                        gen.rejection_reason(origin, target, color)
                        == IllegalMoveReason.PSEUDO_ILLEGAL_GEOMETRY
                    )
