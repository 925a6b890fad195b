"""Game layer - commands, snapshots and the selection state machine.

Quick start::

    from chessgrid.game import Activate, Direction, MoveCursor, SelectionController

    ctrl = SelectionController()
    ctrl.handle(MoveCursor(Direction.DOWN))
    snapshot = ctrl.handle(Activate())
    print(snapshot.status)
"""

from chessgrid.game.controller import ControllerEvents, SelectionController
from chessgrid.game.interfaces import (
    Activate,
    Command,
    Direction,
    IRenderer,
    MoveCursor,
    Quit,
    SelectionPhase,
)
from chessgrid.game.snapshot import GameSnapshot, Highlight, PieceView

__all__ = [
    # Commands / interfaces
    "Activate",
    "Command",
    "Direction",
    "IRenderer",
    "MoveCursor",
    "Quit",
    "SelectionPhase",
    # Concrete
    "ControllerEvents",
    "GameSnapshot",
    "Highlight",
    "PieceView",
    "SelectionController",
]
