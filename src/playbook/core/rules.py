"""High-level chess rules: check and checkmate detection by simulation."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from playbook.core.enums import Color
from playbook.core.move_validator import is_valid_move, valid_destinations

if TYPE_CHECKING:
    from playbook.core.board import PieceId, PieceSet

_LOGGER = logging.getLogger(__name__)


class Rules:
    """Static rule-checker that operates on a :class:`PieceSet`."""

    # Product policy: not being in check is never checkmate, and a side
    # without legal moves outside of check is not declared stalemated.

    @staticmethod
    def is_in_check(color: Color, pieces: PieceSet) -> bool:
        """Whether any opposing piece can currently move onto *color*'s king."""
        king = pieces.king(color)
        if king is None:
            # Off-board sentinel: no validator accepts it.
            _LOGGER.error("King not found for %s while testing for check", color.label)
            return False

        return any(
            is_valid_move(p, king.file, king.rank, pieces)
            for p in pieces
            if p.color != color
        )

    @staticmethod
    def is_checkmate(color: Color, pieces: PieceSet) -> bool:
        """In check, and no move by *color* gets the king out of it."""
        if not Rules.is_in_check(color, pieces):
            return False

        for piece_id in pieces.ids():
            piece = pieces.get(piece_id)
            if piece is None or piece.color != color:
                continue
            for dest in valid_destinations(piece, pieces):
                if not Rules.leaves_king_in_check(piece_id, dest.file, dest.rank, pieces):
                    return False
        return True

    @staticmethod
    def leaves_king_in_check(
        piece_id: PieceId, file: int, rank: int, pieces: PieceSet
    ) -> bool:
        """Whether moving *piece_id* to (*file*, *rank*) leaves its own king attacked."""
        piece = pieces.get(piece_id)
        if piece is None:
            raise KeyError(piece_id)
        with Rules.simulate(pieces, piece_id, file, rank):
            return Rules.is_in_check(piece.color, pieces)

    @staticmethod
    @contextmanager
    def simulate(
        pieces: PieceSet, piece_id: PieceId, file: int, rank: int
    ) -> Iterator[bool]:
        """Temporarily play a move; yields whether it captured.

        On exit the mover returns to its square and any captured piece is
        restored under its original handle, so the set is left unchanged.
        """
        piece = pieces.get(piece_id)
        if piece is None:
            raise KeyError(piece_id)
        origin_file, origin_rank = piece.file, piece.rank

        captured_id = pieces.id_at(file, rank)
        captured = None
        if captured_id is not None:
            occupant = pieces.get(captured_id)
            if occupant is not None and occupant.color != piece.color:
                captured = pieces.remove(captured_id)

        piece.move_to(file, rank)
        try:
            yield captured is not None
        finally:
            piece.move_to(origin_file, origin_rank)
            if captured is not None and captured_id is not None:
                pieces.restore(captured_id, captured)
