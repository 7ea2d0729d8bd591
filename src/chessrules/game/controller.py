"""GameController: drives a game session on top of a RulesEngine.

Parses square tokens, forwards moves to the engine, tracks draw offers and
emits events via simple callbacks so front ends and tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.enums import Color
from chessrules.core.errors import ChessError, MalformedCoordinate
from chessrules.core.move import Move
from chessrules.core.rules import GameStatus
from chessrules.core.types import Coordinate, parse_square
from chessrules.game.engine import RulesEngine
from chessrules.game.interfaces import DrawOffer, GamePhase, IGameController

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, GameStatus], None]  # move, status after it
GameOverCallback = Callable[[GameStatus], None]
PhaseCallback = Callable[[GamePhase], None]
RejectedCallback = Callable[[ChessError], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a game: validates and applies moves, handles resignation,
    draw offers and takebacks, notifies listeners.

    Methods are meant to be called from a single thread; one
    validate-and-commit sequence runs to completion before the next starts.
    """

    __slots__ = (
        "_engine",
        "_phase",
        "draw_offer",
        "draw_offer_by",
        "last_error",
        "events",
    )

    def __init__(self) -> None:
        self._engine = RulesEngine()
        self._phase = GamePhase.NOT_STARTED
        self.draw_offer = DrawOffer.NONE
        self.draw_offer_by: Color | None = None
        self.last_error: ChessError | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> RulesEngine:
        return self._engine

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def status(self) -> GameStatus:
        return self._engine.status

    @property
    def side_to_move(self) -> Color:
        return self._engine.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self._engine.is_game_over

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        self._engine = RulesEngine.from_fen(fen) if fen else RulesEngine()
        self.draw_offer = DrawOffer.NONE
        self.draw_offer_by = None
        self.last_error = None
        _LOGGER.info("New game, %s to move", self._engine.side_to_move)
        self._set_phase(GamePhase.AWAITING_MOVE)
        if self._engine.is_game_over:
            self._finish()

    def submit_move(self, origin: Coordinate, destination: Coordinate) -> bool:
        if self._phase != GamePhase.AWAITING_MOVE:
            return False
        try:
            move = self._engine.apply_move(origin, destination)
        except ChessError as exc:
            self._reject(exc)
            return False

        self.last_error = None
        # An offer stands through the offerer's own move; the opponent
        # moving instead of accepting lets it lapse.
        if self.draw_offer_by != move.piece.color:
            self._clear_draw_offer()
        status = self._engine.status
        _LOGGER.info("%s played %s, status %s", move.piece.color, move, status)
        for cb in self.events.on_move:
            cb(move, status)

        if self._engine.is_game_over:
            self._finish()
        return True

    def submit_text(self, text: str) -> bool:
        tokens = text.split()
        try:
            if len(tokens) != 2:
                raise MalformedCoordinate(f"Expected two squares like 'e2 e4': {text!r}")
            origin, destination = (parse_square(token) for token in tokens)
        except ChessError as exc:
            self._reject(exc)
            return False
        return self.submit_move(origin, destination)

    def resign(self, color: Color) -> None:
        if self._engine.is_game_over:
            return
        self._engine.resign(color)
        _LOGGER.info("%s resigned", color)
        self._finish()

    def offer_draw(self, color: Color) -> None:
        if self._engine.is_game_over:
            return
        if self.draw_offer == DrawOffer.OFFERED:
            return
        self.draw_offer = DrawOffer.OFFERED
        self.draw_offer_by = color
        _LOGGER.info("%s offers a draw", color)

    def accept_draw(self, color: Color) -> None:
        if self.draw_offer != DrawOffer.OFFERED:
            return
        if self.draw_offer_by in (None, color):
            return
        self.draw_offer = DrawOffer.ACCEPTED
        self.draw_offer_by = None
        self._engine.agree_draw()
        _LOGGER.info("%s accepts the draw", color)
        self._finish()

    def decline_draw(self) -> None:
        if self.draw_offer != DrawOffer.OFFERED:
            return
        self.draw_offer = DrawOffer.DECLINED
        self.draw_offer_by = None

    def undo_move(self) -> bool:
        if self._phase == GamePhase.NOT_STARTED:
            return False
        try:
            move = self._engine.undo()
        except ChessError as exc:
            self._reject(exc)
            return False
        if move is None:
            return False
        self._clear_draw_offer()
        _LOGGER.info("Took back %s", move)
        self._set_phase(GamePhase.AWAITING_MOVE)
        return True

    def redo_move(self) -> bool:
        if self._phase == GamePhase.NOT_STARTED:
            return False
        try:
            move = self._engine.redo()
        except ChessError as exc:
            self._reject(exc)
            return False
        if move is None:
            return False
        self._clear_draw_offer()
        status = self._engine.status
        _LOGGER.info("Replayed %s", move)
        for cb in self.events.on_move:
            cb(move, status)
        if self._engine.is_game_over:
            self._finish()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _clear_draw_offer(self) -> None:
        self.draw_offer = DrawOffer.NONE
        self.draw_offer_by = None

    def _reject(self, exc: ChessError) -> None:
        self.last_error = exc
        _LOGGER.info("Rejected: %s", exc)
        for cb in self.events.on_rejected:
            cb(exc)

    def _finish(self) -> None:
        status = self._engine.status
        _LOGGER.info("Game over: %s", status)
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(status)

    def _set_phase(self, phase: GamePhase) -> None:
        if phase == self._phase:
            return
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
