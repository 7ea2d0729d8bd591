"""Abstract interfaces for the game layer.

Front ends (console, tests) depend on :class:`IGameController`, not on the
concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chessrules.core.enums import Color

if TYPE_CHECKING:
    from chessrules.core.types import Coordinate


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game session."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class DrawOffer(IntEnum):
    """Draw offer status between players."""

    NONE = 0
    OFFERED = auto()
    ACCEPTED = auto()
    DECLINED = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, fen: str | None = None) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, origin: Coordinate, destination: Coordinate) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def submit_text(self, text: str) -> bool:
        """Submit a move written as two square tokens, e.g. ``"e2 e4"``."""

    @abstractmethod
    def resign(self, color: Color) -> None:
        """Player of *color* resigns."""

    @abstractmethod
    def offer_draw(self, color: Color) -> None:
        """Player offers a draw."""

    @abstractmethod
    def accept_draw(self, color: Color) -> None:
        """Opponent accepts the draw offer."""

    @abstractmethod
    def decline_draw(self) -> None:
        """Reject the pending draw offer."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Undo the last move. Returns True on success."""

    @abstractmethod
    def redo_move(self) -> bool:
        """Replay the last undone move. Returns True on success."""
