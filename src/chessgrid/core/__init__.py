"""Core domain layer - board state and move generation, no external dependencies.

Quick start::

    from chessgrid.core import Board, MoveGenerator, Coordinate

    board = Board.initial()
    knight = board.piece_at(Coordinate(1, 7))
    for sq in MoveGenerator(board).generate(knight):
        print(sq)
"""

from chessgrid.core.board import Board, InvalidMoveError
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.move_generator import MoveGenerator, generate_moves
from chessgrid.core.piece import Piece
from chessgrid.core.types import (
    ALL_COORDINATES,
    BOARD_SIZE,
    Coordinate,
    is_on_board,
    parse_coordinate,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "ALL_COORDINATES",
    "BOARD_SIZE",
    "Coordinate",
    "is_on_board",
    "parse_coordinate",
    # Domain objects
    "Board",
    "InvalidMoveError",
    "MoveGenerator",
    "Piece",
    "generate_moves",
]
