"""MainWindow - top-level window wiring the board view to the controller."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar, QVBoxLayout, QWidget

from chessgrid.core.board import Board
from chessgrid.game.controller import SelectionController
from chessgrid.game.interfaces import Quit
from chessgrid.game.snapshot import GameSnapshot
from chessgrid.ui.board.board_view import BoardView
from chessgrid.ui.settings import AppSettings, theme_for

_LOGGER = logging.getLogger(__name__)

HELP_TEXT = "Controls: Arrow Keys, Space or Enter to Select ('q' to quit)"


class MainWindow(QMainWindow):
    """Main application window; renders controller snapshots."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("chessgrid")
        self.setMinimumSize(480, 540)
        self.resize(720, 780)

        self._settings = settings or AppSettings()
        self._controller = SelectionController()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._apply_settings()

        self.render(self._controller.snapshot())

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> SelectionController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._help_label = QLabel(HELP_TEXT)
        root.addWidget(self._help_label)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=1)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel("")
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        menu_game = menu_bar.addMenu("&Game")
        assert menu_game is not None

        self._act_new_board = QAction("&New board", self)
        self._act_new_board.setShortcut("Ctrl+N")
        self._act_new_board.triggered.connect(self.new_board)
        menu_game.addAction(self._act_new_board)

        menu_game.addSeparator()

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(lambda: self.handle_command(Quit()))
        menu_game.addAction(self._act_quit)

    def _connect_signals(self) -> None:
        self._board_view.command_issued.connect(self.handle_command)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(theme_for(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_candidates(s.show_candidates)
        scene.set_ascii_glyphs(s.ascii_glyphs)

    # ── Commands / rendering ─────────────────────────────────────────────

    def handle_command(self, command: object) -> None:
        """Feed one command to the controller and redraw."""
        snapshot = self._controller.handle(command)
        self.render(snapshot)
        if snapshot.is_finished:
            self.close()

    def render(self, snapshot: GameSnapshot) -> None:
        self._board_view.board_scene.set_snapshot(snapshot)
        self._status_label.setText(snapshot.status)

    def new_board(self) -> None:
        """Discard the current board and start from the standard layout."""
        _LOGGER.debug("Starting a new board")
        self._controller = SelectionController(Board.initial())
        self.render(self._controller.snapshot())

    # ── Lifecycle ────────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:
        _LOGGER.debug("Main window closing")
        super().closeEvent(event)
