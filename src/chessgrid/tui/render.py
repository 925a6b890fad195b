"""Plain-text rendering of a snapshot.

Each cell is three characters wide; the brackets mark the highlight::

    [r] cursor     <r> selected piece     (.) candidate move
"""

from __future__ import annotations

from typing import TextIO

from chessgrid.core.types import BOARD_SIZE, Coordinate
from chessgrid.game.interfaces import IRenderer
from chessgrid.game.snapshot import GameSnapshot, Highlight

EMPTY = "."

_BRACKETS: dict[Highlight, tuple[str, str]] = {
    Highlight.NONE: (" ", " "),
    Highlight.CANDIDATE: ("(", ")"),
    Highlight.SELECTED: ("<", ">"),
    Highlight.CURSOR: ("[", "]"),
}


def cell_glyph(snapshot: GameSnapshot, sq: Coordinate, *, ascii_glyphs: bool = False) -> str:
    view = snapshot.piece_at(sq)
    if view is None:
        return EMPTY
    return view.char if ascii_glyphs else view.symbol


def render_text(snapshot: GameSnapshot, *, ascii_glyphs: bool = False) -> str:
    """Board grid with rank/file labels followed by the status line."""
    lines: list[str] = []
    for rank in range(BOARD_SIZE):
        cells = []
        for file in range(BOARD_SIZE):
            sq = Coordinate(file, rank)
            left, right = _BRACKETS[snapshot.highlight_at(sq)]
            cells.append(f"{left}{cell_glyph(snapshot, sq, ascii_glyphs=ascii_glyphs)}{right}")
        lines.append(f"{BOARD_SIZE - rank} {''.join(cells)}")
    lines.append("   " + "  ".join("abcdefgh"))
    lines.append(snapshot.status)
    return "\n".join(lines)


class TextRenderer(IRenderer):
    """Writes :func:`render_text` output to a stream."""

    def __init__(self, stream: TextIO, *, ascii_glyphs: bool = True) -> None:
        self._stream = stream
        self._ascii_glyphs = ascii_glyphs

    def render(self, snapshot: GameSnapshot) -> None:
        self._stream.write(render_text(snapshot, ascii_glyphs=self._ascii_glyphs))
        self._stream.write("\n")
