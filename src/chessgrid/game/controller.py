"""SelectionController - turns cursor/activate commands into board moves.

Two live states, ``IDLE`` and ``SELECTED(piece, moves)``, plus the terminal
``QUIT``.  Emits events via simple callbacks so front ends / tests can
subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessgrid.core.board import Board, InvalidMoveError
from chessgrid.core.move_generator import MoveGenerator
from chessgrid.core.piece import Piece
from chessgrid.core.types import Coordinate
from chessgrid.game.interfaces import (
    Activate,
    Direction,
    MoveCursor,
    Quit,
    SelectionPhase,
)
from chessgrid.game.snapshot import GameSnapshot, PieceView

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Piece, Coordinate, "Piece | None"], None]  # piece, to, captured
SelectionCallback = Callable[["Piece | None"], None]
QuitCallback = Callable[[], None]


@dataclass
class ControllerEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_quit: list[QuitCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class SelectionController:
    """Drives a :class:`Board` from discrete commands, one at a time.

    The candidate set is computed once, when a piece is selected, and is
    dropped on every transition back to ``IDLE``.  There is no direct
    reselection: activating anywhere while a piece is selected ends the
    selection, moving the piece first if the cursor is on a candidate.
    """

    __slots__ = (
        "_board",
        "_cursor",
        "_phase",
        "_selected",
        "_moves",
        "_status",
        "events",
    )

    def __init__(
        self,
        board: Board | None = None,
        cursor: Coordinate = Coordinate(0, 0),
    ) -> None:
        self._board = Board.initial() if board is None else board
        self._cursor = cursor
        self._phase = SelectionPhase.IDLE
        self._selected: Piece | None = None
        self._moves: frozenset[Coordinate] = frozenset()
        self._status = ""
        self.events = ControllerEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def cursor(self) -> Coordinate:
        return self._cursor

    @property
    def phase(self) -> SelectionPhase:
        return self._phase

    @property
    def selected_piece(self) -> Piece | None:
        return self._selected

    @property
    def candidate_moves(self) -> frozenset[Coordinate]:
        return self._moves

    @property
    def status(self) -> str:
        return self._status

    @property
    def is_finished(self) -> bool:
        return self._phase == SelectionPhase.QUIT

    # ── Command dispatch ─────────────────────────────────────────────────

    def handle(self, command: object) -> GameSnapshot:
        """Apply one command and return the resulting snapshot.

        Unknown commands, and anything arriving after ``Quit``, are ignored.
        """
        if self._ignored_after_quit(command):
            return self.snapshot()

        match command:
            case MoveCursor(direction=direction):
                self.move_cursor(direction)
            case Activate():
                self.activate()
            case Quit():
                self.quit()
            case _:
                _LOGGER.debug("Ignoring unknown command %r", command)
        return self.snapshot()

    def move_cursor(self, direction: Direction) -> None:
        """Move the cursor one square, clamped at the board edge."""
        if self._ignored_after_quit(direction):
            return
        self._cursor = self._cursor.clamped(direction.df, direction.dr)
        self._status = f"{self._selected.name} selected" if self._selected else ""

    def activate(self) -> None:
        if self._ignored_after_quit("activate"):
            return
        if self._selected is None:
            self._select_at_cursor()
        else:
            self._play_or_deselect()

    def quit(self) -> None:
        if self._ignored_after_quit("quit"):
            return
        self._drop_selection()
        self._phase = SelectionPhase.QUIT
        self._status = "Exiting..."
        _LOGGER.debug("Controller finished")
        for cb in self.events.on_quit:
            cb()

    # ── Snapshot ─────────────────────────────────────────────────────────

    def snapshot(self) -> GameSnapshot:
        """Read-only view for renderers; re-syncs piece coordinates first."""
        self._board.sync_coordinates()
        selected = self._selected
        return GameSnapshot(
            occupancy={
                sq: PieceView(color, kind)
                for sq, (color, kind) in self._board.occupancy().items()
            },
            cursor=self._cursor,
            selected=None if selected is None else selected.coordinate,
            selected_piece=None if selected is None else PieceView(selected.color, selected.kind),
            candidates=self._moves,
            status=self._status,
            phase=self._phase,
        )

    # ── Internal helpers ─────────────────────────────────────────────────

    def _select_at_cursor(self) -> None:
        piece = self._board.piece_at(self._cursor)
        if piece is None:
            self._status = "Empty square"
            return

        self._selected = piece
        self._moves = MoveGenerator(self._board).generate(piece)
        self._phase = SelectionPhase.SELECTED
        self._status = f"{piece.name} selected"
        _LOGGER.debug("Selected %s on %s (%d moves)", piece.name, self._cursor, len(self._moves))
        self._emit_selection(piece)

    def _play_or_deselect(self) -> None:
        piece = self._selected
        assert piece is not None
        target = self._cursor

        if target not in self._moves:
            self._status = "Deselected"
        else:
            try:
                captured = self._board.move_piece(piece, target)
            except InvalidMoveError as exc:
                _LOGGER.info("Move rejected: %s", exc)
                self._status = "Invalid move"
            else:
                self._status = f"Moved {piece.name}"
                if captured is not None:
                    self._status += f", captured {captured.name}"
                self._emit_move(piece, target, captured)

        self._drop_selection()
        self._emit_selection(None)

    def _ignored_after_quit(self, what: object) -> bool:
        if self._phase != SelectionPhase.QUIT:
            return False
        _LOGGER.debug("Ignoring %r after quit", what)
        return True

    def _drop_selection(self) -> None:
        self._selected = None
        self._moves = frozenset()
        if self._phase == SelectionPhase.SELECTED:
            self._phase = SelectionPhase.IDLE

    def _emit_move(self, piece: Piece, target: Coordinate, captured: Piece | None) -> None:
        for cb in self.events.on_move:
            cb(piece, target, captured)

    def _emit_selection(self, piece: Piece | None) -> None:
        for cb in self.events.on_selection_changed:
            cb(piece)
