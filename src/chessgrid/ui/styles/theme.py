"""Visual theme constants and QSS styles for chessgrid."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_candidate: QColor  # candidate move targets
    highlight_selected: QColor  # selected piece origin
    highlight_cursor: QColor  # keyboard cursor
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    piece_text: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_candidate=QColor(220, 40, 40, 150),  # red
            highlight_selected=QColor(40, 170, 60, 190),  # green
            highlight_cursor=QColor(130, 130, 130, 220),  # grey
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
            piece_text=QColor(20, 20, 20),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_candidate=QColor(220, 40, 40, 150),
            highlight_selected=QColor(40, 170, 60, 190),
            highlight_cursor=QColor(90, 90, 90, 220),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
            piece_text=QColor(20, 20, 20),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_candidate=QColor(220, 40, 40, 150),
            highlight_selected=QColor(230, 200, 40, 190),
            highlight_cursor=QColor(90, 90, 90, 220),
            coord_light=QColor(112, 149, 120),
            coord_dark=QColor(236, 238, 220),
            piece_text=QColor(20, 20, 20),
        )


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Blue": BoardTheme.blue(),
    "Green": BoardTheme.green(),
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QStatusBar {
    background: #1e1e1e;
    color: #d4d4d4;
    font-size: 13px;
}

QGraphicsView {
    background: #2b2b2b;
    border: none;
}
"""
