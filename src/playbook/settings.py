"""Application settings and their environment overrides."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

_LOGGER = logging.getLogger(__name__)

_ENV_PREFIX = "PLAYBOOK_"
_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")

THEMES = ("Green", "Classic", "Blue")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Green"
    show_coordinates: bool = True
    tile_size: int = 80  # px per square

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults overridden by ``PLAYBOOK_*`` variables.

        Malformed values are logged and ignored.
        """
        env = os.environ if environ is None else environ
        settings = cls()

        theme = env.get(_ENV_PREFIX + "BOARD_THEME")
        if theme is not None:
            if theme in THEMES:
                settings.board_theme = theme
            else:
                _LOGGER.warning("Unknown board theme %r, keeping %r", theme, settings.board_theme)

        coords = env.get(_ENV_PREFIX + "SHOW_COORDINATES")
        if coords is not None:
            if coords.lower() in _TRUE:
                settings.show_coordinates = True
            elif coords.lower() in _FALSE:
                settings.show_coordinates = False
            else:
                _LOGGER.warning("Invalid boolean for SHOW_COORDINATES: %r", coords)

        tile = env.get(_ENV_PREFIX + "TILE_SIZE")
        if tile is not None:
            try:
                size = int(tile)
            except ValueError:
                _LOGGER.warning("Invalid TILE_SIZE: %r", tile)
            else:
                if size > 0:
                    settings.tile_size = size
                else:
                    _LOGGER.warning("TILE_SIZE must be positive, got %d", size)

        level = env.get(_ENV_PREFIX + "LOG_LEVEL")
        if level is not None:
            if isinstance(logging.getLevelName(level.upper()), int):
                settings.log_level = level.upper()
            else:
                _LOGGER.warning("Unknown log level: %r", level)

        return settings
