"""Visual theme constants for the board."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_selected: QColor  # selected piece origin
    highlight_move: QColor  # last move destination
    highlight_check: QColor  # king in check
    highlight_checkmate: QColor  # checkmated king
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(238, 238, 210),
            dark_square=QColor(118, 150, 86),
            highlight_selected=QColor(255, 255, 0, 80),  # yellow
            highlight_move=QColor(255, 255, 0, 180),
            highlight_check=QColor(255, 165, 0, 120),  # orange
            highlight_checkmate=QColor(255, 0, 0, 80),  # red
            coord_light=QColor(118, 150, 86),
            coord_dark=QColor(238, 238, 210),
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_selected=QColor(255, 255, 0, 100),
            highlight_move=QColor(155, 199, 0, 105),
            highlight_check=QColor(255, 165, 0, 120),
            highlight_checkmate=QColor(255, 0, 0, 120),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_selected=QColor(255, 255, 0, 100),
            highlight_move=QColor(155, 199, 0, 105),
            highlight_check=QColor(255, 165, 0, 120),
            highlight_checkmate=QColor(255, 0, 0, 120),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Theme by settings name; unknown names fall back to green."""
        factories = {"Green": cls.green, "Classic": cls.classic, "Blue": cls.blue}
        return factories.get(name, cls.green)()
