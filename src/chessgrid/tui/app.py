"""Terminal front end: curses board with arrow-key cursor."""

from __future__ import annotations

import contextlib
import curses
import locale
import logging

from chessgrid.core.enums import Color
from chessgrid.core.types import BOARD_SIZE, Coordinate
from chessgrid.game.controller import SelectionController
from chessgrid.game.interfaces import Activate, Command, Direction, IRenderer, MoveCursor, Quit
from chessgrid.game.snapshot import GameSnapshot, Highlight
from chessgrid.tui.render import cell_glyph

_LOGGER = logging.getLogger(__name__)

HELP_TEXT = "Controls: Arrow Keys, Space or Enter to Select ('q' to quit)"
CELL_W = 3  # characters per cell
CTRL_C = 3

_KEY_COMMANDS: dict[int, Command] = {
    curses.KEY_UP: MoveCursor(Direction.UP),
    curses.KEY_DOWN: MoveCursor(Direction.DOWN),
    curses.KEY_LEFT: MoveCursor(Direction.LEFT),
    curses.KEY_RIGHT: MoveCursor(Direction.RIGHT),
    ord(" "): Activate(),
    ord("\n"): Activate(),
    ord("\r"): Activate(),
    curses.KEY_ENTER: Activate(),
    ord("q"): Quit(),
    ord("Q"): Quit(),
    CTRL_C: Quit(),
}

# ── Colour pairs ─────────────────────────────────────────────────────────────

# Cell background per highlight; cursor beats selection beats candidate.
_BACKGROUNDS: dict[Highlight, int] = {
    Highlight.NONE: curses.COLOR_BLACK,
    Highlight.CANDIDATE: curses.COLOR_RED,
    Highlight.SELECTED: curses.COLOR_GREEN,
    Highlight.CURSOR: curses.COLOR_WHITE,
}
_FOREGROUNDS: dict[Color | None, int] = {
    None: curses.COLOR_WHITE,  # empty-cell dot
    Color.WHITE: curses.COLOR_YELLOW,
    Color.BLACK: curses.COLOR_CYAN,
}
_FG_ORDER: tuple[Color | None, ...] = (None, Color.WHITE, Color.BLACK)


def _pair_id(highlight: Highlight, color: Color | None) -> int:
    return 1 + int(highlight) * len(_FG_ORDER) + _FG_ORDER.index(color)


def init_colors() -> None:
    """Register one curses colour pair per (highlight, piece colour)."""
    curses.start_color()
    for highlight, bg in _BACKGROUNDS.items():
        for color in _FG_ORDER:
            fg = _FOREGROUNDS[color]
            if highlight == Highlight.CURSOR and fg == curses.COLOR_WHITE:
                fg = curses.COLOR_BLACK
            curses.init_pair(_pair_id(highlight, color), fg, bg)


def command_for_key(key: int) -> Command | None:
    """Command bound to a curses key code, or ``None`` (ignored)."""
    return _KEY_COMMANDS.get(key)


def safe_addstr(win: curses.window, y: int, x: int, text: str, attr: int = 0) -> None:
    """addstr that ignores curses errors at screen edges."""
    with contextlib.suppress(curses.error):
        win.addstr(y, x, text, attr)


# ── Renderer ─────────────────────────────────────────────────────────────────


class CursesRenderer(IRenderer):
    """Draws snapshots onto a curses window."""

    def __init__(self, window: curses.window, *, ascii_glyphs: bool = False) -> None:
        self._win = window
        self._ascii_glyphs = ascii_glyphs
        self._colors = curses.has_colors()

    def render(self, snapshot: GameSnapshot) -> None:
        win = self._win
        win.erase()
        safe_addstr(win, 0, 0, HELP_TEXT)
        top = 2
        for rank in range(BOARD_SIZE):
            y = top + rank
            safe_addstr(win, y, 0, str(BOARD_SIZE - rank))
            for file in range(BOARD_SIZE):
                sq = Coordinate(file, rank)
                text = f" {cell_glyph(snapshot, sq, ascii_glyphs=self._ascii_glyphs)} "
                safe_addstr(win, y, 2 + file * CELL_W, text, self._attr(snapshot, sq))
        files = "".join(f" {chr(ord('a') + f)} " for f in range(BOARD_SIZE))
        safe_addstr(win, top + BOARD_SIZE, 2, files)
        safe_addstr(win, top + BOARD_SIZE + 1, 0, snapshot.status)
        win.refresh()

    def _attr(self, snapshot: GameSnapshot, sq: Coordinate) -> int:
        highlight = snapshot.highlight_at(sq)
        if not self._colors:
            return curses.A_REVERSE if highlight != Highlight.NONE else curses.A_NORMAL
        view = snapshot.piece_at(sq)
        color = None if view is None else view.color
        return curses.color_pair(_pair_id(highlight, color)) | curses.A_BOLD


# ── Interaction loop ─────────────────────────────────────────────────────────


def run(
    stdscr: curses.window,
    controller: SelectionController | None = None,
    *,
    ascii_glyphs: bool = False,
) -> GameSnapshot:
    """Process keys until the controller reaches ``QUIT``."""
    controller = controller or SelectionController()
    with contextlib.suppress(curses.error):
        curses.curs_set(0)
    curses.raw()
    stdscr.keypad(True)
    if curses.has_colors():
        init_colors()

    renderer = CursesRenderer(stdscr, ascii_glyphs=ascii_glyphs)
    snapshot = controller.snapshot()
    renderer.render(snapshot)

    while not snapshot.is_finished:
        command = command_for_key(stdscr.getch())
        if command is None:
            continue
        snapshot = controller.handle(command)
        renderer.render(snapshot)

    _LOGGER.debug("Terminal loop finished: %s", snapshot.status)
    return snapshot


def main() -> None:
    """Launch the terminal front end."""
    locale.setlocale(locale.LC_ALL, "")
    snapshot = curses.wrapper(run)
    print(snapshot.status)


if __name__ == "__main__":
    main()
