"""Read-only view of the game handed to renderers after every command."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType

from chessgrid.core.enums import Color, PieceType
from chessgrid.core.piece import piece_char, piece_name, piece_symbol
from chessgrid.core.types import Coordinate
from chessgrid.game.interfaces import SelectionPhase


class Highlight(IntEnum):
    """Square highlight, ordered by precedence (higher wins)."""

    NONE = 0
    CANDIDATE = 1
    SELECTED = 2
    CURSOR = 3


@dataclass(frozen=True, slots=True)
class PieceView:
    """Detached description of a piece (no reference to the live object)."""

    color: Color
    kind: PieceType

    @property
    def name(self) -> str:
        return piece_name(self.color, self.kind)

    @property
    def symbol(self) -> str:
        return piece_symbol(self.color, self.kind)

    @property
    def char(self) -> str:
        return piece_char(self.color, self.kind)


@dataclass(frozen=True)
class GameSnapshot:
    """Board occupancy, cursor, selection and status after one command."""

    occupancy: Mapping[Coordinate, PieceView]
    cursor: Coordinate
    selected: Coordinate | None = None
    selected_piece: PieceView | None = None
    candidates: frozenset[Coordinate] = field(default_factory=frozenset)
    status: str = ""
    phase: SelectionPhase = SelectionPhase.IDLE

    def __post_init__(self) -> None:
        object.__setattr__(self, "occupancy", MappingProxyType(dict(self.occupancy)))

    def piece_at(self, sq: Coordinate) -> PieceView | None:
        return self.occupancy.get(sq)

    def highlight_at(self, sq: Coordinate) -> Highlight:
        """Strongest highlight on *sq*: cursor > selected piece > candidate."""
        if sq == self.cursor:
            return Highlight.CURSOR
        if sq == self.selected:
            return Highlight.SELECTED
        if sq in self.candidates:
            return Highlight.CANDIDATE
        return Highlight.NONE

    @property
    def is_finished(self) -> bool:
        return self.phase == SelectionPhase.QUIT
