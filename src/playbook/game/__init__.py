"""Game management layer — turn controller, highlight state, interfaces.

Quick start::

    from playbook.game import GameController

    ctrl = GameController()
    ctrl.events.on_log.append(print)
    ctrl.handle_click(5, 2)  # White selects e2
    ctrl.handle_click(5, 4)  # e4
"""

from playbook.game.controller import GameController, GameEvents
from playbook.game.highlights import BoardHighlights
from playbook.game.interfaces import GamePhase, IBoardView

__all__ = [
    # Interfaces
    "GamePhase",
    "IBoardView",
    # Concrete
    "BoardHighlights",
    "GameController",
    "GameEvents",
]
