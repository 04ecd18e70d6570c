"""Abstract interfaces for the game layer.

The controller depends on :class:`IBoardView`, not on any Qt class, so it
can be driven headless in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto

# ── Turn FSM states ──────────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for one click-driven ply."""

    AWAITING_SELECTION = auto()
    PIECE_SELECTED = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IBoardView(ABC):
    """Highlight sink for the board display.

    All coordinates are 1-based. Anything off the board, ``(0, 0)``
    included, means "no highlight" and must not raise.
    """

    @abstractmethod
    def clear_highlights(self) -> None:
        """Drop the selection, check and checkmate highlights."""

    @abstractmethod
    def set_selected_square(self, file: int, rank: int) -> None:
        """Mark the square of the selected piece."""

    @abstractmethod
    def set_move_square(self, file: int, rank: int) -> None:
        """Mark the destination of the last completed move."""

    @abstractmethod
    def set_check_highlight(self, file: int, rank: int) -> None:
        """Mark a king in check."""

    @abstractmethod
    def set_checkmate_highlight(self, file: int, rank: int) -> None:
        """Mark a checkmated king."""
