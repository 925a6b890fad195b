"""User-configurable settings for the Qt front end."""

from __future__ import annotations

from dataclasses import dataclass

from chessgrid.ui.styles.theme import THEMES, BoardTheme

GLYPH_SETS = ("unicode", "ascii")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_candidates: bool = True
    glyphs: str = "unicode"  # one of GLYPH_SETS

    # Diagnostics
    log_level: str = "WARNING"

    @property
    def ascii_glyphs(self) -> bool:
        return self.glyphs == "ascii"


def theme_for(name: str) -> BoardTheme:
    """Theme preset by name, falling back to the classic one."""
    return THEMES.get(name, BoardTheme.default())
