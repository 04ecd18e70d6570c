"""GameController — turns board clicks into plies.

Coordinates: PieceSet, Rules, the board view highlights and the move log.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from playbook.core.board import PieceId, PieceSet
from playbook.core.enums import Color
from playbook.core.move_validator import is_valid_move
from playbook.core.notation import (
    ILLEGAL_MOVE,
    ILLEGAL_MOVE_KING_IN_CHECK,
    checkmate_text,
    move_text,
    selection_text,
)
from playbook.core.piece import Piece
from playbook.core.rules import Rules
from playbook.core.types import Square, is_on_board
from playbook.game.highlights import BoardHighlights
from playbook.game.interfaces import GamePhase, IBoardView

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

LogCallback = Callable[[str], None]
MoveCallback = Callable[[Piece, Square, Square, str], None]  # piece, from, to, text
GameOverCallback = Callable[[Color], None]  # winner
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_log: list[LogCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Owns the piece set and runs the select-then-move state machine.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread). Every click is handled to completion, and the
    rule simulations it triggers are reverted before it returns.
    """

    __slots__ = (
        "_pieces",
        "_view",
        "_phase",
        "_side_to_move",
        "_selected",
        "_winner",
        "events",
    )

    def __init__(self, view: IBoardView | None = None) -> None:
        self._view: IBoardView = view if view is not None else BoardHighlights()
        self._pieces = PieceSet.initial()
        self._phase = GamePhase.AWAITING_SELECTION
        self._side_to_move = Color.WHITE
        self._selected: PieceId | None = None
        self._winner: Color | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def pieces(self) -> PieceSet:
        return self._pieces

    @property
    def view(self) -> IBoardView:
        return self._view

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def selected(self) -> PieceId | None:
        return self._selected

    @property
    def winner(self) -> Color | None:
        return self._winner

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    # ── Public API ───────────────────────────────────────────────────────

    def new_game(self, pieces: PieceSet | None = None) -> None:
        """Reset to White to move, from *pieces* or the starting arrangement."""
        self._pieces = pieces if pieces is not None else PieceSet.initial()
        self._side_to_move = Color.WHITE
        self._selected = None
        self._winner = None
        self._view.clear_highlights()
        self._view.set_move_square(0, 0)
        self._set_phase(GamePhase.AWAITING_SELECTION)

    def handle_click(self, file: int, rank: int) -> None:
        """Process one click on (*file*, *rank*)."""
        if self.is_game_over or not is_on_board(file, rank):
            return

        if self._selected is None:
            self._select(file, rank)
            return

        piece_id = self._selected
        self._selected = None
        self._try_move(piece_id, file, rank)
        if not self.is_game_over:
            self._set_phase(GamePhase.AWAITING_SELECTION)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _select(self, file: int, rank: int) -> None:
        piece_id = self._pieces.id_at(file, rank)
        if piece_id is None:
            return
        piece = self._pieces.get(piece_id)
        if piece is None or piece.color != self._side_to_move:
            return

        self._view.clear_highlights()
        self._selected = piece_id
        self._view.set_selected_square(file, rank)
        self._emit_log(selection_text(piece))
        self._set_phase(GamePhase.PIECE_SELECTED)

    def _try_move(self, piece_id: PieceId, file: int, rank: int) -> None:
        piece = self._pieces.get(piece_id)
        if piece is None:
            _LOGGER.warning("Selected piece %r is no longer in play", piece_id)
            return

        if not is_valid_move(piece, file, rank, self._pieces):
            self._emit_log(ILLEGAL_MOVE)
            return

        if Rules.leaves_king_in_check(piece_id, file, rank, self._pieces):
            self._emit_log(ILLEGAL_MOVE_KING_IN_CHECK)
            return

        self._commit(piece, file, rank)

    def _commit(self, piece: Piece, file: int, rank: int) -> None:
        origin = piece.square
        captured_id = self._pieces.id_at(file, rank)
        if captured_id is not None:
            self._pieces.remove(captured_id)
        piece.move_to(file, rank)

        mover = piece.color
        opponent = mover.opposite
        self._side_to_move = opponent
        self._view.set_move_square(file, rank)

        opponent_in_check = Rules.is_in_check(opponent, self._pieces)
        text = move_text(
            piece.piece_type,
            origin.file,
            file,
            rank,
            capture=captured_id is not None,
            check=opponent_in_check,
        )
        self._emit_log(text)
        self._emit_move(piece, origin, piece.square, text)

        king = self._pieces.king(opponent)
        if Rules.is_checkmate(opponent, self._pieces):
            self._emit_log(checkmate_text(mover))
            if king is not None:
                self._view.set_checkmate_highlight(king.file, king.rank)
            self._winner = mover
            self._set_phase(GamePhase.GAME_OVER)
            self._emit_game_over(mover)
        elif opponent_in_check:
            if king is not None:
                self._view.set_check_highlight(king.file, king.rank)
        else:
            self._view.clear_highlights()

    def _set_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_log(self, line: str) -> None:
        _LOGGER.info("%s", line)
        for cb in self.events.on_log:
            cb(line)

    def _emit_move(self, piece: Piece, origin: Square, dest: Square, text: str) -> None:
        for cb in self.events.on_move:
            cb(piece, origin, dest, text)

    def _emit_game_over(self, winner: Color) -> None:
        for cb in self.events.on_game_over:
            cb(winner)
