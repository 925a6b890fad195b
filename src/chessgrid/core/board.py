"""Board - piece ownership on an 8x8 grid."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from chessgrid.core.enums import Color, PieceType
from chessgrid.core.move_generator import MoveGenerator
from chessgrid.core.piece import Piece
from chessgrid.core.types import ALL_COORDINATES, BOARD_SIZE, Coordinate

_LOGGER = logging.getLogger(__name__)

_BACK_ROW: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class InvalidMoveError(ValueError):
    """Raised when a move is not in the piece's generated destination set."""


def _index(sq: Coordinate) -> int:
    return sq.rank * BOARD_SIZE + sq.file


class Board:
    """Mutable 64-cell board; each cell exclusively owns at most one piece.

    Capturing a piece simply drops it from its cell.  ``move_piece`` is the
    only gameplay mutation; ``place`` is meant for setup.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Coordinate) -> Piece | None:
        return self._cells[_index(sq)]

    def piece_at(self, sq: Coordinate) -> Piece | None:
        """Occupant of *sq*, or ``None`` for an empty cell."""
        return self._cells[_index(sq)]

    def is_empty(self, sq: Coordinate) -> bool:
        return self._cells[_index(sq)] is None

    def owns(self, piece: Piece) -> bool:
        """Whether *piece* is live on this board."""
        return self._cells[_index(piece.coordinate)] is piece

    def __len__(self) -> int:
        return sum(1 for p in self._cells if p is not None)

    def __iter__(self) -> Iterator[Piece]:
        return self.pieces()

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[Piece]:
        """Live pieces in screen order, optionally filtered by *color*."""
        for piece in self._cells:
            if piece is not None and (color is None or piece.color == color):
                yield piece

    def occupancy(self) -> dict[Coordinate, tuple[Color, PieceType]]:
        """Read-only view of who stands where."""
        return {
            sq: (piece.color, piece.kind)
            for sq, piece in zip(ALL_COORDINATES, self._cells)
            if piece is not None
        }

    def sync_coordinates(self) -> None:
        """Re-synchronise every piece's cached coordinate with its cell."""
        for sq, piece in zip(ALL_COORDINATES, self._cells):
            if piece is not None:
                piece.coordinate = sq

    # -- Mutation -----------------------------------------------------------

    def place(self, piece: Piece, sq: Coordinate) -> None:
        """Put *piece* on *sq*, dropping any previous occupant (setup only)."""
        # Found by identity; the cached coordinate may be stale.
        for i, occupant in enumerate(self._cells):
            if occupant is piece:
                self._cells[i] = None
        self._cells[_index(sq)] = piece
        piece.coordinate = sq

    def move_piece(self, piece: Piece, target: Coordinate) -> Piece | None:
        """Move *piece* to *target*, returning the captured piece if any.

        Raises:
            InvalidMoveError: *target* is not a generated destination for
                *piece*, or *piece* is not on this board.  The board is left
                untouched.
        """
        if not self.owns(piece):
            raise InvalidMoveError(f"{piece.name} is not on this board")
        if target not in MoveGenerator(self).generate(piece):
            raise InvalidMoveError(
                f"{piece.name} cannot move from {piece.coordinate} to {target}"
            )

        origin = piece.coordinate
        captured = self._cells[_index(target)]
        if captured is not None:
            _LOGGER.debug("%s captures %s on %s", piece.name, captured.name, target)

        self._cells[_index(origin)] = None
        self._cells[_index(target)] = piece
        piece.coordinate = target
        piece.move_count += 1
        _LOGGER.debug("%s moved %s -> %s", piece.name, origin, target)
        return captured

    def clear(self) -> None:
        self._cells = [None] * (BOARD_SIZE * BOARD_SIZE)

    def copy(self) -> Board:
        """Deep copy: pieces are duplicated, not shared."""
        b = Board()
        b._cells = [
            None if p is None else Piece(p.color, p.kind, p.coordinate, p.move_count)
            for p in self._cells
        ]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting layout, Black on top and White at the bottom."""
        b = cls()
        for f, kind in enumerate(_BACK_ROW):
            b.place(Piece(Color.BLACK, kind, Coordinate(f, 0)), Coordinate(f, 0))
            b.place(Piece(Color.BLACK, PieceType.PAWN, Coordinate(f, 1)), Coordinate(f, 1))
            b.place(Piece(Color.WHITE, PieceType.PAWN, Coordinate(f, 6)), Coordinate(f, 6))
            b.place(Piece(Color.WHITE, kind, Coordinate(f, 7)), Coordinate(f, 7))
        return b

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Board:
        """Build a board from eight rows of piece letters, top row first.

        ``'.'`` marks an empty cell, e.g. ``"rnbqkbnr"`` or ``"....P..."``.
        """
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")
        b = cls()
        for rank, row in enumerate(rows):
            if len(row) != BOARD_SIZE:
                raise ValueError(f"Row {rank} must have {BOARD_SIZE} cells: {row!r}")
            for file, char in enumerate(row):
                if char == ".":
                    continue
                sq = Coordinate(file, rank)
                b.place(Piece.from_char(char, sq), sq)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.occupancy() == other.occupancy()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE):
            row = []
            for file in range(BOARD_SIZE):
                p = self[Coordinate(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
