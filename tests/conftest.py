"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.core.board import Board
from chessrules.game.controller import GameController
from chessrules.game.engine import RulesEngine


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def engine() -> RulesEngine:
    """A fresh engine on the standard starting position."""
    return RulesEngine()


@pytest.fixture
def controller() -> GameController:
    ctrl = GameController()
    ctrl.new_game()
    return ctrl
