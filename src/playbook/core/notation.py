"""Text for the move log: selections, moves, results.

The move text is a reduced algebraic form: no disambiguation, no ``#`` for
mate, and a pawn capture is written with its origin file (``exd5``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from playbook.core.enums import Color, PieceType
from playbook.core.types import file_letter, square_name

if TYPE_CHECKING:
    from playbook.core.piece import Piece

ILLEGAL_MOVE = "Illegal move"
ILLEGAL_MOVE_KING_IN_CHECK = "Illegal move, King in check"


def selection_text(piece: Piece) -> str:
    """e.g. ``"White selects Ng1"``."""
    return (
        f"{piece.color.label} selects "
        f"{piece.piece_type.letter}{square_name(piece.file, piece.rank)}"
    )


def move_text(
    piece_type: PieceType,
    origin_file: int,
    dest_file: int,
    dest_rank: int,
    *,
    capture: bool = False,
    check: bool = False,
) -> str:
    """Notation for a completed move, e.g. ``"Nf3"``, ``"exd5"``, ``"Qxf7+"``."""
    text = piece_type.letter
    if capture:
        if piece_type == PieceType.PAWN:
            text = file_letter(origin_file)
        text += "x"
    text += square_name(dest_file, dest_rank)
    if check:
        text += "+"
    return text


def checkmate_text(winner: Color) -> str:
    return f"{winner.label} wins by checkmate."
