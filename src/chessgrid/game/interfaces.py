"""Commands, phases and the renderer interface for the game layer.

Front ends decode their raw input (Qt key events, curses key codes) into
the command values below and feed them to the
:class:`~chessgrid.game.controller.SelectionController`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from chessgrid.game.snapshot import GameSnapshot


# ── Selection FSM states ─────────────────────────────────────────────────────


class SelectionPhase(IntEnum):
    """Finite-state-machine states of the selection controller."""

    IDLE = auto()
    SELECTED = auto()
    QUIT = auto()  # terminal


# ── Commands ─────────────────────────────────────────────────────────────────


class Direction(Enum):
    """Cursor direction as a (file, rank) delta. Rank 0 is the top row."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def df(self) -> int:
        return self.value[0]

    @property
    def dr(self) -> int:
        return self.value[1]


@dataclass(frozen=True, slots=True)
class MoveCursor:
    direction: Direction


@dataclass(frozen=True, slots=True)
class Activate:
    """Select the piece under the cursor, or play/drop the current selection."""


@dataclass(frozen=True, slots=True)
class Quit:
    pass


Command: TypeAlias = MoveCursor | Activate | Quit


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IRenderer(ABC):
    """Anything that can draw a :class:`GameSnapshot`."""

    @abstractmethod
    def render(self, snapshot: GameSnapshot) -> None:
        """Draw *snapshot*; must not mutate game state."""
