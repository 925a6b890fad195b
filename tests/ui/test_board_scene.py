"""Tests for BoardScene snapshot rendering."""

from __future__ import annotations

import pytest

from chessgrid.core.types import Coordinate
from chessgrid.game.controller import SelectionController
from chessgrid.game.interfaces import Activate, Direction, MoveCursor
from chessgrid.game.snapshot import Highlight
from chessgrid.ui.board.board_scene import BoardScene

B1 = Coordinate(1, 7)
A3 = Coordinate(0, 5)
C3 = Coordinate(2, 5)


@pytest.fixture
def scene(qapp) -> BoardScene:
    return BoardScene()


def _knight_selected() -> SelectionController:
    ctrl = SelectionController(cursor=B1)
    ctrl.handle(Activate())
    return ctrl


def test_draws_64_squares_and_labels(scene: BoardScene) -> None:
    assert len(scene._square_items) == 64
    assert len(scene._coord_items) == 16
    assert scene.sceneRect().width() == 8 * BoardScene.TILE


def test_pieces_follow_snapshot(scene: BoardScene) -> None:
    scene.set_snapshot(SelectionController().snapshot())
    assert len(scene._piece_items) == 32
    assert scene.glyph_at(Coordinate(0, 0)) == "♜"
    assert scene.glyph_at(B1) == "♘"
    assert scene.glyph_at(Coordinate(4, 4)) is None


def test_ascii_glyphs(scene: BoardScene) -> None:
    scene.set_snapshot(SelectionController().snapshot())
    scene.set_ascii_glyphs(True)
    assert scene.glyph_at(Coordinate(0, 0)) == "r"
    assert scene.glyph_at(B1) == "N"


def test_selection_highlights(scene: BoardScene) -> None:
    ctrl = _knight_selected()
    ctrl.handle(MoveCursor(Direction.RIGHT))
    scene.set_snapshot(ctrl.snapshot())

    assert scene.highlight_of(B1) == Highlight.SELECTED
    assert scene.highlight_of(Coordinate(2, 7)) == Highlight.CURSOR
    assert scene.highlight_of(A3) == Highlight.CANDIDATE
    assert scene.highlight_of(C3) == Highlight.CANDIDATE
    assert scene.highlight_of(Coordinate(4, 4)) == Highlight.NONE


def test_cursor_wins_over_candidate(scene: BoardScene) -> None:
    ctrl = _knight_selected()
    ctrl.handle(MoveCursor(Direction.UP))
    ctrl.handle(MoveCursor(Direction.UP))
    ctrl.handle(MoveCursor(Direction.RIGHT))
    scene.set_snapshot(ctrl.snapshot())

    assert scene.highlight_of(C3) == Highlight.CURSOR
    assert scene.highlight_of(A3) == Highlight.CANDIDATE
    assert len(scene._highlight_items) == 3


def test_highlight_z_order(scene: BoardScene) -> None:
    ctrl = _knight_selected()
    ctrl.handle(MoveCursor(Direction.LEFT))
    scene.set_snapshot(ctrl.snapshot())

    z = {sq: item.zValue() for sq, item in scene._highlight_items.items()}
    assert z[A3] < z[B1] < z[Coordinate(0, 7)]


def test_hide_candidates(scene: BoardScene) -> None:
    scene.set_snapshot(_knight_selected().snapshot())
    scene.set_show_candidates(False)
    assert scene.highlight_of(A3) == Highlight.NONE
    assert scene.highlight_of(B1) == Highlight.CURSOR


def test_set_show_coordinates_toggles_all_labels_visibility(scene: BoardScene) -> None:
    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)
