"""Tests for SelectionController - the cursor/selection state machine."""

from chessgrid.core.board import Board
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.piece import Piece
from chessgrid.core.types import Coordinate
from chessgrid.game.controller import SelectionController
from chessgrid.game.interfaces import (
    Activate,
    Direction,
    MoveCursor,
    Quit,
    SelectionPhase,
)
from chessgrid.game.snapshot import GameSnapshot

B1 = Coordinate(1, 7)
A3 = Coordinate(0, 5)
C3 = Coordinate(2, 5)
B3 = Coordinate(1, 5)


def _goto(ctrl: SelectionController, target: Coordinate) -> GameSnapshot:
    """Drive the cursor to *target* with arrow commands."""
    snapshot = ctrl.snapshot()
    while ctrl.cursor.file < target.file:
        snapshot = ctrl.handle(MoveCursor(Direction.RIGHT))
    while ctrl.cursor.file > target.file:
        snapshot = ctrl.handle(MoveCursor(Direction.LEFT))
    while ctrl.cursor.rank < target.rank:
        snapshot = ctrl.handle(MoveCursor(Direction.DOWN))
    while ctrl.cursor.rank > target.rank:
        snapshot = ctrl.handle(MoveCursor(Direction.UP))
    assert ctrl.cursor == target
    return snapshot


def _select(ctrl: SelectionController, sq: Coordinate) -> GameSnapshot:
    _goto(ctrl, sq)
    return ctrl.handle(Activate())


class TestInitialState:
    def test_idle_with_cursor_top_left(self) -> None:
        ctrl = SelectionController()
        snapshot = ctrl.snapshot()
        assert snapshot.phase == SelectionPhase.IDLE
        assert snapshot.cursor == Coordinate(0, 0)
        assert snapshot.selected is None
        assert snapshot.candidates == frozenset()
        assert len(snapshot.occupancy) == 32

    def test_custom_board_and_cursor(self) -> None:
        board = Board()
        ctrl = SelectionController(board, cursor=Coordinate(4, 4))
        assert ctrl.board is board
        assert ctrl.cursor == Coordinate(4, 4)


class TestMoveCursor:
    def test_moves_one_square(self) -> None:
        ctrl = SelectionController()
        ctrl.handle(MoveCursor(Direction.DOWN))
        ctrl.handle(MoveCursor(Direction.RIGHT))
        assert ctrl.cursor == Coordinate(1, 1)

    def test_clamped_at_edges(self) -> None:
        ctrl = SelectionController()
        ctrl.handle(MoveCursor(Direction.UP))
        ctrl.handle(MoveCursor(Direction.LEFT))
        assert ctrl.cursor == Coordinate(0, 0)

        ctrl = SelectionController(cursor=Coordinate(7, 7))
        ctrl.handle(MoveCursor(Direction.DOWN))
        ctrl.handle(MoveCursor(Direction.RIGHT))
        assert ctrl.cursor == Coordinate(7, 7)

    def test_selection_survives_cursor_moves(self) -> None:
        ctrl = SelectionController()
        _select(ctrl, B1)
        snapshot = ctrl.handle(MoveCursor(Direction.UP))
        assert snapshot.phase == SelectionPhase.SELECTED
        assert snapshot.selected == B1
        assert snapshot.candidates == {A3, C3}
        assert snapshot.status == "White Knight selected"

    def test_status_cleared_when_idle(self) -> None:
        ctrl = SelectionController()
        ctrl.handle(Activate())
        ctrl.handle(Activate())  # deselect the black rook
        snapshot = ctrl.handle(MoveCursor(Direction.RIGHT))
        assert snapshot.status == ""


class TestActivateIdle:
    def test_empty_square(self) -> None:
        ctrl = SelectionController()
        snapshot = _select(ctrl, Coordinate(3, 3))
        assert snapshot.phase == SelectionPhase.IDLE
        assert snapshot.status == "Empty square"
        assert snapshot.selected is None

    def test_select_knight(self) -> None:
        ctrl = SelectionController()
        snapshot = _select(ctrl, B1)
        assert snapshot.phase == SelectionPhase.SELECTED
        assert snapshot.status == "White Knight selected"
        assert snapshot.selected == B1
        assert snapshot.selected_piece is not None
        assert snapshot.selected_piece.kind == PieceType.KNIGHT
        assert A3 in snapshot.candidates
        assert C3 in snapshot.candidates
        assert B3 not in snapshot.candidates

    def test_either_side_may_be_selected(self) -> None:
        ctrl = SelectionController()
        snapshot = ctrl.handle(Activate())
        assert snapshot.status == "Black Rook selected"

    def test_boxed_in_rook_has_no_candidates(self) -> None:
        ctrl = SelectionController()
        snapshot = _select(ctrl, Coordinate(0, 7))
        assert snapshot.phase == SelectionPhase.SELECTED
        assert snapshot.candidates == frozenset()


class TestActivateSelected:
    def test_move_knight(self) -> None:
        ctrl = SelectionController()
        _select(ctrl, B1)
        snapshot = _select(ctrl, C3)

        assert snapshot.status == "Moved White Knight"
        assert snapshot.phase == SelectionPhase.IDLE
        assert snapshot.candidates == frozenset()
        assert snapshot.selected is None
        assert snapshot.piece_at(B1) is None
        moved = snapshot.piece_at(C3)
        assert moved is not None and moved.name == "White Knight"

    def test_deselect_on_non_candidate(self) -> None:
        ctrl = SelectionController()
        _select(ctrl, B1)
        before = ctrl.board.occupancy()
        snapshot = _select(ctrl, B3)

        assert snapshot.status == "Deselected"
        assert snapshot.phase == SelectionPhase.IDLE
        assert ctrl.board.occupancy() == before

    def test_no_direct_reselection(self) -> None:
        ctrl = SelectionController()
        _select(ctrl, B1)
        snapshot = _select(ctrl, Coordinate(6, 7))  # the other knight
        assert snapshot.status == "Deselected"
        assert snapshot.selected is None

        snapshot = ctrl.handle(Activate())
        assert snapshot.status == "White Knight selected"
        assert snapshot.selected == Coordinate(6, 7)

    def test_capture_status(self) -> None:
        board = Board.from_rows(
            [
                "........",
                "........",
                "........",
                "...p....",
                "........",
                "........",
                "........",
                "...Q....",
            ]
        )
        ctrl = SelectionController(board)
        _select(ctrl, Coordinate(3, 7))
        snapshot = _select(ctrl, Coordinate(3, 3))
        assert snapshot.status == "Moved White Queen, captured Black Pawn"
        assert len(snapshot.occupancy) == 1

    def test_rejected_move_reports_invalid_and_ends_selection(self) -> None:
        ctrl = SelectionController()
        _select(ctrl, B1)
        # The board changes under the stale candidate set.
        blocker = Piece(Color.WHITE, PieceType.PAWN, C3)
        ctrl.board.place(blocker, C3)
        before = ctrl.board.occupancy()

        snapshot = _select(ctrl, C3)

        assert snapshot.status == "Invalid move"
        assert snapshot.phase == SelectionPhase.IDLE
        assert ctrl.board.occupancy() == before

    def test_pawn_moves_then_loses_double_step(self) -> None:
        ctrl = SelectionController()
        _select(ctrl, Coordinate(4, 6))
        _select(ctrl, Coordinate(4, 5))
        snapshot = _select(ctrl, Coordinate(4, 5))
        assert snapshot.candidates == {Coordinate(4, 4)}


class TestQuitAndNoise:
    def test_quit_is_terminal(self) -> None:
        ctrl = SelectionController()
        _select(ctrl, B1)
        snapshot = ctrl.handle(Quit())
        assert snapshot.phase == SelectionPhase.QUIT
        assert snapshot.is_finished
        assert snapshot.selected is None

        snapshot = ctrl.handle(MoveCursor(Direction.DOWN))
        assert snapshot.cursor == B1
        snapshot = ctrl.handle(Activate())
        assert snapshot.phase == SelectionPhase.QUIT

    def test_public_methods_after_quit_are_no_ops(self) -> None:
        ctrl = SelectionController(cursor=B1)
        ctrl.quit()

        ctrl.activate()
        assert ctrl.phase == SelectionPhase.QUIT
        assert ctrl.selected_piece is None
        assert ctrl.candidate_moves == frozenset()

        ctrl.move_cursor(Direction.UP)
        assert ctrl.cursor == B1
        assert ctrl.status == "Exiting..."

    def test_quit_twice_fires_once(self) -> None:
        ctrl = SelectionController()
        fired: list[bool] = []
        ctrl.events.on_quit.append(lambda: fired.append(True))
        ctrl.quit()
        ctrl.quit()
        assert fired == [True]
        assert ctrl.is_finished

    def test_unknown_commands_are_ignored(self) -> None:
        ctrl = SelectionController()
        before = ctrl.snapshot()
        after = ctrl.handle("\x1b[Z")
        assert after == before
        assert ctrl.handle(None).phase == SelectionPhase.IDLE


class TestEvents:
    def test_move_and_selection_events(self) -> None:
        ctrl = SelectionController()
        moves: list[tuple[str, Coordinate, object]] = []
        selections: list[str | None] = []
        ctrl.events.on_move.append(lambda p, to, cap: moves.append((p.name, to, cap)))
        ctrl.events.on_selection_changed.append(
            lambda p: selections.append(None if p is None else p.name)
        )

        _select(ctrl, B1)
        _select(ctrl, A3)

        assert moves == [("White Knight", A3, None)]
        assert selections == ["White Knight", None]

    def test_quit_event(self) -> None:
        ctrl = SelectionController()
        fired: list[bool] = []
        ctrl.events.on_quit.append(lambda: fired.append(True))
        ctrl.handle(Quit())
        ctrl.handle(Quit())
        assert fired == [True]
