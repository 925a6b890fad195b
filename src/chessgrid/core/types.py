"""Coordinate value type and board-geometry helpers.

Board layout (screen order, top row first)::

    rank 0:  a8 b8 ... h8   <- Black back row
    rank 1:  a7 b7 ... h7
    ...
    rank 7:  a1 b1 ... h1   <- White back row

``file`` grows to the right, ``rank`` grows downwards.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8
_FILE_NAMES = "abcdefgh"


def is_on_board(file: int, rank: int) -> bool:
    """Whether (*file*, *rank*) addresses a square of the 8x8 board."""
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


def _clamp(value: int) -> int:
    return max(0, min(BOARD_SIZE - 1, value))


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Validated (file, rank) pair; the addressing unit of the board."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not is_on_board(self.file, self.rank):
            raise ValueError(f"Coordinate out of range: ({self.file}, {self.rank})")

    def offset(self, df: int, dr: int) -> Coordinate | None:
        """Shifted coordinate, or ``None`` if it would leave the board."""
        file, rank = self.file + df, self.rank + dr
        if not is_on_board(file, rank):
            return None
        return Coordinate(file, rank)

    def clamped(self, df: int, dr: int) -> Coordinate:
        """Shifted coordinate with each axis clamped to the board edge."""
        return Coordinate(_clamp(self.file + df), _clamp(self.rank + dr))

    @property
    def name(self) -> str:
        """Human-readable name, e.g. ``Coordinate(1, 7)`` -> ``'b1'``."""
        return f"{_FILE_NAMES[self.file]}{BOARD_SIZE - self.rank}"

    def __str__(self) -> str:
        return self.name


def parse_coordinate(name: str) -> Coordinate:
    """Parse a square name, e.g. ``'e4'`` -> ``Coordinate(4, 4)``."""
    if len(name) != 2 or name[0] not in _FILE_NAMES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Coordinate(_FILE_NAMES.index(name[0]), BOARD_SIZE - int(name[1]))


ALL_COORDINATES: tuple[Coordinate, ...] = tuple(
    Coordinate(f, r) for r in range(BOARD_SIZE) for f in range(BOARD_SIZE)
)
