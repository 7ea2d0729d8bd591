"""Game management layer: rules engine state machine and controller.

Quick start::

    from chessrules.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.submit_text("e2 e4")
"""

from chessrules.game.controller import GameController, GameEvents
from chessrules.game.engine import RulesEngine
from chessrules.game.interfaces import DrawOffer, GamePhase, IGameController

__all__ = [
    # Interfaces
    "DrawOffer",
    "GamePhase",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "RulesEngine",
]
