"""Pseudo-legal destination generation, one rule per piece kind."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessgrid.core.enums import Color, PieceType
from chessgrid.core.types import Coordinate

if TYPE_CHECKING:
    from chessgrid.core.board import Board
    from chessgrid.core.piece import Piece


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


class MoveGenerator:
    """Generates candidate destinations for pieces on a :class:`Board`.

    The generator only reads the board it is given; every result lies on
    the board and never lands on a square held by the mover's own side.
    Check is not considered (moves are pseudo-legal).
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate(self, piece: Piece) -> frozenset[Coordinate]:
        """All destinations *piece* could move to."""
        match piece.kind:
            case PieceType.PAWN:
                return self._gen_pawn(piece)
            case PieceType.KNIGHT:
                return self._gen_stepping(piece, KNIGHT_OFFSETS)
            case PieceType.BISHOP:
                return self._gen_sliding(piece, BISHOP_DIRS)
            case PieceType.ROOK:
                return self._gen_sliding(piece, ROOK_DIRS)
            case PieceType.QUEEN:
                return self._gen_sliding(piece, QUEEN_DIRS)
            case PieceType.KING:
                return self._gen_stepping(piece, KING_OFFSETS)
        raise ValueError(f"Unknown piece kind: {piece.kind!r}")

    def generate_all(self, color: Color | None = None) -> dict[Piece, frozenset[Coordinate]]:
        """Destinations for every piece (optionally of one *color*)."""
        return {piece: self.generate(piece) for piece in self._board.pieces(color)}

    def is_pseudo_legal(self, piece: Piece, target: Coordinate) -> bool:
        return target in self.generate(piece)

    # -- Piece-specific generators (private) -------------------------------

    def _is_enemy(self, sq: Coordinate, color: Color) -> bool:
        target = self._board[sq]
        return target is not None and target.color != color

    def _gen_sliding(
        self,
        piece: Piece,
        directions: tuple[tuple[int, int], ...],
    ) -> frozenset[Coordinate]:
        board = self._board
        moves: set[Coordinate] = set()
        for df, dr in directions:
            sq = piece.coordinate.offset(df, dr)
            while sq is not None:
                target = board[sq]
                if target is None:
                    moves.add(sq)
                    sq = sq.offset(df, dr)
                    continue
                if target.color != piece.color:
                    moves.add(sq)
                break
        return frozenset(moves)

    def _gen_stepping(
        self,
        piece: Piece,
        offsets: tuple[tuple[int, int], ...],
    ) -> frozenset[Coordinate]:
        board = self._board
        moves: set[Coordinate] = set()
        for df, dr in offsets:
            sq = piece.coordinate.offset(df, dr)
            if sq is None:
                continue
            target = board[sq]
            if target is None or target.color != piece.color:
                moves.add(sq)
        return frozenset(moves)

    def _gen_pawn(self, piece: Piece) -> frozenset[Coordinate]:
        board = self._board
        color = piece.color
        forward = color.pawn_direction
        moves: set[Coordinate] = set()

        one_step = piece.coordinate.offset(0, forward)
        if one_step is not None and board.is_empty(one_step):
            moves.add(one_step)
            # Depends on the pawn's own history, not on its rank.
            if piece.move_count == 0:
                two_step = one_step.offset(0, forward)
                if two_step is not None and board.is_empty(two_step):
                    moves.add(two_step)

        for df in (-1, 1):
            cap_sq = piece.coordinate.offset(df, forward)
            if cap_sq is not None and self._is_enemy(cap_sq, color):
                moves.add(cap_sq)

        return frozenset(moves)


def generate_moves(piece: Piece, board: Board) -> frozenset[Coordinate]:
    """Functional shorthand for ``MoveGenerator(board).generate(piece)``."""
    return MoveGenerator(board).generate(piece)
