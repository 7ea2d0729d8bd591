"""Console entry point: a two-player game on one terminal."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from chessrules.game.controller import GameController
from chessrules.game.interfaces import DrawOffer

_LOGGER = logging.getLogger(__name__)

HELP_TEXT = (
    "Commands: 'move e2 e4' (or just 'e2 e4'), 'undo', 'redo', 'draw', "
    "'accept', 'decline', 'resign', 'board', 'help', 'quit'"
)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="chessrules", description=__doc__)
    parser.add_argument(
        "--fen",
        default=None,
        help="start from this FEN (placement and optional side to move)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="logging verbosity (default: %(default)s)",
    )
    return parser.parse_args(argv)


def _describe_result(ctrl: GameController) -> str:
    status = ctrl.status
    winner = status.winner
    if winner is not None:
        return f"{status}. {winner.name.capitalize()} wins!"
    if status.is_draw:
        return f"{status}. Game drawn!"
    return "Game ended."


def _print_position(ctrl: GameController, out: TextIO) -> None:
    print(repr(ctrl.engine.board), file=out)
    side = ctrl.side_to_move
    line = f"{side.name.capitalize()} to move"
    if ctrl.engine.is_in_check():
        line += " (check)"
    print(line, file=out)


def run_console(ctrl: GameController, stdin: TextIO, out: TextIO) -> int:
    """Read commands from *stdin* until the game ends or input runs out."""
    print(HELP_TEXT, file=out)
    _print_position(ctrl, out)

    while not ctrl.is_game_over:
        print(f"{ctrl.side_to_move!s}> ", end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            break
        command = line.strip().lower()
        if not command:
            continue

        side = ctrl.side_to_move
        if command in ("quit", "exit"):
            break
        if command == "help":
            print(HELP_TEXT, file=out)
        elif command == "board":
            _print_position(ctrl, out)
        elif command == "resign":
            ctrl.resign(side)
        elif command == "draw":
            ctrl.offer_draw(side)
            print(
                f"{side!s} offers a draw; {side.opposite!s} may 'accept' or "
                "'decline' on their turn.",
                file=out,
            )
        elif command == "accept":
            if ctrl.draw_offer != DrawOffer.OFFERED:
                print("No draw offer to accept.", file=out)
            elif ctrl.draw_offer_by == side:
                print("You cannot accept your own draw offer.", file=out)
            else:
                ctrl.accept_draw(side)
        elif command == "decline":
            if ctrl.draw_offer != DrawOffer.OFFERED or ctrl.draw_offer_by == side:
                print("No draw offer to decline.", file=out)
            else:
                ctrl.decline_draw()
        elif command == "undo":
            if not ctrl.undo_move():
                print("Nothing to undo.", file=out)
            else:
                _print_position(ctrl, out)
        elif command == "redo":
            if not ctrl.redo_move():
                print("Nothing to redo.", file=out)
            else:
                _print_position(ctrl, out)
        else:
            text = command.removeprefix("move ").strip()
            if ctrl.submit_text(text):
                _print_position(ctrl, out)
            else:
                print(f"Error: {ctrl.last_error}", file=out)

    if ctrl.is_game_over:
        print("=== Game Over ===", file=out)
        print(_describe_result(ctrl), file=out)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Launch a console game."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    ctrl = GameController()
    try:
        ctrl.new_game(args.fen)
    except ValueError as exc:
        _LOGGER.error("Cannot start game: %s", exc)
        return 2
    return run_console(ctrl, sys.stdin, sys.stdout)
