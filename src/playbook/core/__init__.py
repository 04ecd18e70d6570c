"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from playbook.core import Color, PieceSet, Rules, is_valid_move

    pieces = PieceSet.initial()
    pawn = pieces.piece_at(5, 2)
    assert is_valid_move(pawn, 5, 4, pieces)
    assert not Rules.is_in_check(Color.WHITE, pieces)
"""

from playbook.core.board import PieceId, PieceSet
from playbook.core.enums import Color, PieceType
from playbook.core.move_validator import (
    is_path_clear,
    is_valid_move,
    valid_destinations,
)
from playbook.core.notation import checkmate_text, move_text, selection_text
from playbook.core.piece import Piece
from playbook.core.rules import Rules
from playbook.core.types import Square, is_on_board, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Piece",
    "PieceId",
    "PieceSet",
    "Rules",
    # Move validation
    "is_path_clear",
    "is_valid_move",
    "valid_destinations",
    # Notation
    "checkmate_text",
    "move_text",
    "selection_text",
]
