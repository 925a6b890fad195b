"""Piece entity."""

from __future__ import annotations

from dataclasses import dataclass

from chessgrid.core.enums import Color, PieceType
from chessgrid.core.types import Coordinate

# ASCII character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


def piece_char(color: Color, kind: PieceType) -> str:
    """ASCII letter (uppercase = white, lowercase = black)."""
    return _CHARS[(color, kind)]


def piece_symbol(color: Color, kind: PieceType) -> str:
    """Unicode chess symbol, e.g. ♞."""
    return _UNICODE[(color, kind)]


def piece_name(color: Color, kind: PieceType) -> str:
    return f"{color.label} {kind.label}"


@dataclass(eq=False, slots=True)
class Piece:
    """A live piece on a board.

    Equality is identity: two white pawns are different pieces.
    ``coordinate`` is a cache of the owning board cell and is kept in
    sync by :class:`~chessgrid.core.board.Board`.
    """

    color: Color
    kind: PieceType
    coordinate: Coordinate
    move_count: int = 0

    @classmethod
    def from_char(cls, char: str, coordinate: Coordinate) -> Piece:
        """Create piece from its letter, e.g. 'N' → white knight."""
        try:
            color, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, kind, coordinate)

    @property
    def name(self) -> str:
        """E.g. ``'White Knight'``."""
        return piece_name(self.color, self.kind)

    @property
    def symbol(self) -> str:
        return piece_symbol(self.color, self.kind)

    @property
    def char(self) -> str:
        return piece_char(self.color, self.kind)

    @property
    def has_moved(self) -> bool:
        return self.move_count > 0

    def __str__(self) -> str:
        return self.char

    def __repr__(self) -> str:
        return f"Piece({self.name} @ {self.coordinate.name}, moves={self.move_count})"
