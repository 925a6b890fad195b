"""BoardScene - QGraphicsScene that draws the chessboard from a snapshot."""

from __future__ import annotations

from PyQt6.QtCore import QObject, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSimpleTextItem,
)

from chessgrid.core.types import ALL_COORDINATES, BOARD_SIZE, Coordinate
from chessgrid.game.snapshot import GameSnapshot, Highlight
from chessgrid.ui.styles.theme import BoardTheme

# Overlay stacking; a higher highlight always sits above a lower one.
_HIGHLIGHT_Z: dict[Highlight, float] = {
    Highlight.CANDIDATE: 0.5,
    Highlight.SELECTED: 0.6,
    Highlight.CURSOR: 0.7,
}


class BoardScene(QGraphicsScene):
    """Renders squares, coordinates, highlights and piece glyphs.

    Purely a view: everything it shows comes from the last
    :class:`GameSnapshot` passed to :meth:`set_snapshot`.
    """

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._snapshot: GameSnapshot | None = None
        self._show_coordinates = True
        self._show_candidates = True
        self._ascii_glyphs = False

        # Visual layers
        self._square_items: dict[Coordinate, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._highlight_items: dict[Coordinate, QGraphicsRectItem] = {}
        self._piece_items: dict[Coordinate, QGraphicsSimpleTextItem] = {}

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def snapshot(self) -> GameSnapshot | None:
        return self._snapshot

    def set_snapshot(self, snapshot: GameSnapshot) -> None:
        """Redraw highlights and pieces for *snapshot*."""
        self._snapshot = snapshot
        self._sync_highlights()
        self._sync_pieces()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._refresh()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_candidates(self, visible: bool) -> None:
        """Show or hide candidate-move highlights."""
        self._show_candidates = visible
        self._refresh()

    def set_ascii_glyphs(self, enabled: bool) -> None:
        """Draw pieces as letters instead of Unicode chess symbols."""
        self._ascii_glyphs = enabled
        self._refresh()

    def highlight_of(self, sq: Coordinate) -> Highlight:
        """Highlight currently drawn on *sq* (``NONE`` if nothing)."""
        item = self._highlight_items.get(sq)
        if item is None:
            return Highlight.NONE
        return Highlight(item.data(0))

    def glyph_at(self, sq: Coordinate) -> str | None:
        item = self._piece_items.get(sq)
        return None if item is None else item.text()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))

        for sq in ALL_COORDINATES:
            f, r = sq.file, sq.rank
            is_light = (f + r) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(f * t, r * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            label_color = self._theme.coord_light if is_light else self._theme.coord_dark

            # Rank numbers (left edge)
            if f == 0:
                self._add_coord_label(str(BOARD_SIZE - r), font, label_color, f * t + 2, r * t + 1)

            # File letters (bottom edge)
            if r == BOARD_SIZE - 1:
                letter = chr(ord("a") + f)
                self._add_coord_label(letter, font, label_color, f * t + t - 12, r * t + t - 16)

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord_label(self, text: str, font: QFont, color: QColor, x: float, y: float) -> None:
        txt = QGraphicsSimpleTextItem(text)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Snapshot synchronisation ─────────────────────────────────────────

    def _refresh(self) -> None:
        if self._snapshot is not None:
            self.set_snapshot(self._snapshot)

    def _sync_highlights(self) -> None:
        for item in self._highlight_items.values():
            self.removeItem(item)
        self._highlight_items.clear()

        snapshot = self._snapshot
        if snapshot is None:
            return

        colors = {
            Highlight.CANDIDATE: self._theme.highlight_candidate,
            Highlight.SELECTED: self._theme.highlight_selected,
            Highlight.CURSOR: self._theme.highlight_cursor,
        }
        for sq in ALL_COORDINATES:
            level = snapshot.highlight_at(sq)
            if level == Highlight.NONE:
                continue
            if level == Highlight.CANDIDATE and not self._show_candidates:
                continue
            rect = self._make_highlight(sq, colors[level])
            rect.setZValue(_HIGHLIGHT_Z[level])
            rect.setData(0, int(level))
            self._highlight_items[sq] = rect

    def _sync_pieces(self) -> None:
        """Re-create all piece glyphs from the current snapshot."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        snapshot = self._snapshot
        if snapshot is None:
            return

        t = self.TILE
        font = QFont("Adwaita Sans", int(t * 0.55))
        for sq, view in snapshot.occupancy.items():
            item = QGraphicsSimpleTextItem(view.char if self._ascii_glyphs else view.symbol)
            item.setFont(font)
            item.setBrush(QBrush(self._theme.piece_text))
            bounds = item.boundingRect()
            item.setPos(
                sq.file * t + (t - bounds.width()) / 2,
                sq.rank * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    def _clear_items(self, items: list[QGraphicsSimpleTextItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    def _make_highlight(self, sq: Coordinate, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        rect = QGraphicsRectItem(sq.file * t, sq.rank * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        self.addItem(rect)
        return rect
