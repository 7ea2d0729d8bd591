"""Tests for the console front end."""

import io

from chessrules.app import main, run_console
from chessrules.core.enums import Color, StatusKind
from chessrules.game.controller import GameController
from chessrules.game.interfaces import DrawOffer


def _run(script: str, fen: str | None = None) -> tuple[GameController, str]:
    ctrl = GameController()
    ctrl.new_game(fen)
    out = io.StringIO()
    assert run_console(ctrl, io.StringIO(script), out) == 0
    return ctrl, out.getvalue()


class TestRunConsole:
    def test_moves_and_quit(self) -> None:
        ctrl, text = _run("e2 e4\nquit\n")
        assert "Black to move" in text
        assert ctrl.engine.ply_count == 1
        assert "Game Over" not in text

    def test_move_prefix(self) -> None:
        ctrl, _ = _run("move e2 e4\nmove e7 e5\n")
        assert ctrl.engine.ply_count == 2

    def test_fools_mate(self) -> None:
        _, text = _run("f2 f3\ne7 e5\ng2 g4\nd8 h4\n")
        assert "=== Game Over ===" in text
        assert "checkmate (white). Black wins!" in text

    def test_bad_input_reports_error(self) -> None:
        ctrl, text = _run("e2 e5\nhello\n")
        assert text.count("Error:") == 2
        assert ctrl.engine.ply_count == 0

    def test_resign(self) -> None:
        _, text = _run("resign\n")
        assert "White wins!" not in text
        assert "Black wins!" in text

    def test_draw_agreed(self) -> None:
        _, text = _run("draw\ne2 e4\naccept\n")
        assert "Game drawn!" in text

    def test_offerer_cannot_accept_own_draw(self) -> None:
        ctrl, text = _run("draw\naccept\ndecline\n")
        assert "You cannot accept your own draw offer." in text
        assert "No draw offer to decline." in text
        assert ctrl.status.kind != StatusKind.DRAW
        assert not ctrl.is_game_over
        assert ctrl.side_to_move == Color.WHITE

    def test_opponent_declines(self) -> None:
        ctrl, _ = _run("draw\ne2 e4\ndecline\naccept\n")
        assert ctrl.draw_offer == DrawOffer.DECLINED
        assert not ctrl.is_game_over

    def test_accept_without_offer(self) -> None:
        ctrl, text = _run("accept\n")
        assert "No draw offer to accept." in text
        assert not ctrl.is_game_over

    def test_undo_redo(self) -> None:
        ctrl, text = _run("undo\ne2 e4\nundo\nredo\nredo\n")
        assert "Nothing to undo." in text
        assert "Nothing to redo." in text
        assert ctrl.engine.ply_count == 1

    def test_stalemate_start(self) -> None:
        _, text = _run("", fen="7k/8/5KQ1/8/8/8/8/8 b")
        assert "stalemate. Game drawn!" in text


class TestMain:
    def test_bad_fen_exits_with_error(self) -> None:
        assert main(["--fen", "bad"]) == 2

    def test_missing_king_exits_with_error(self) -> None:
        assert main(["--fen", "8/8/8/8/8/8/8/4K3 w"]) == 2
