"""BoardHighlights — the four board highlights as plain state."""

from __future__ import annotations

from dataclasses import dataclass

from playbook.core.types import Square, is_on_board
from playbook.game.interfaces import IBoardView


def _square_or_none(file: int, rank: int) -> Square | None:
    return Square(file, rank) if is_on_board(file, rank) else None


@dataclass
class BoardHighlights(IBoardView):
    """Headless :class:`IBoardView`; also the model behind the Qt scene."""

    selected: Square | None = None
    move: Square | None = None
    check: Square | None = None
    checkmate: Square | None = None

    def clear_highlights(self) -> None:
        # The last-move marker stays until the next move replaces it.
        self.selected = None
        self.check = None
        self.checkmate = None

    def set_selected_square(self, file: int, rank: int) -> None:
        self.selected = _square_or_none(file, rank)

    def set_move_square(self, file: int, rank: int) -> None:
        self.move = _square_or_none(file, rank)

    def set_check_highlight(self, file: int, rank: int) -> None:
        self.check = _square_or_none(file, rank)

    def set_checkmate_highlight(self, file: int, rank: int) -> None:
        self.checkmate = _square_or_none(file, rank)
