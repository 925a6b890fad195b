"""BoardView - QGraphicsView wrapper for the board scene."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QKeyEvent, QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy

from chessgrid.game.interfaces import Activate, Command, Direction, MoveCursor, Quit
from chessgrid.ui.board.board_scene import BoardScene

_KEY_COMMANDS: dict[int, Command] = {
    Qt.Key.Key_Up.value: MoveCursor(Direction.UP),
    Qt.Key.Key_Down.value: MoveCursor(Direction.DOWN),
    Qt.Key.Key_Left.value: MoveCursor(Direction.LEFT),
    Qt.Key.Key_Right.value: MoveCursor(Direction.RIGHT),
    Qt.Key.Key_Space.value: Activate(),
    Qt.Key.Key_Return.value: Activate(),
    Qt.Key.Key_Enter.value: Activate(),
    Qt.Key.Key_Q.value: Quit(),
    Qt.Key.Key_Escape.value: Quit(),
}


def command_for_qt_key(key: int | Qt.Key) -> Command | None:
    """Command bound to a ``Qt.Key`` value, or ``None`` if unbound."""
    if isinstance(key, Qt.Key):
        key = key.value
    return _KEY_COMMANDS.get(key)


class BoardView(QGraphicsView):
    """Displays the board scene, scales it to fit and turns keys into commands.

    Signals:
        command_issued(object): A :data:`Command` decoded from a key press.
    """

    command_issued = pyqtSignal(object)

    def __init__(self, parent=None) -> None:
        self._scene = BoardScene()
        super().__init__(self._scene, parent)

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMinimumSize(320, 320)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if event is None:
            return
        command = command_for_qt_key(event.key())
        if command is None:
            super().keyPressEvent(event)
            return
        event.accept()
        self.command_issued.emit(command)

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
