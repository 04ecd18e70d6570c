"""Tests for move-log text."""

import pytest

from playbook.core.enums import Color, PieceType
from playbook.core.notation import checkmate_text, move_text, selection_text
from playbook.core.piece import Piece


class TestSelectionText:
    def test_knight(self) -> None:
        assert selection_text(Piece(Color.WHITE, PieceType.KNIGHT, 7, 1)) == (
            "White selects Ng1"
        )

    def test_pawn_has_no_letter(self) -> None:
        assert selection_text(Piece(Color.BLACK, PieceType.PAWN, 5, 7)) == (
            "Black selects e7"
        )


class TestMoveText:
    @pytest.mark.parametrize(
        ("piece_type", "origin_file", "dest", "capture", "check", "expected"),
        [
            (PieceType.PAWN, 5, (5, 4), False, False, "e4"),
            (PieceType.KNIGHT, 7, (6, 3), False, False, "Nf3"),
            (PieceType.PAWN, 5, (4, 5), True, False, "exd5"),
            (PieceType.QUEEN, 4, (6, 7), True, True, "Qxf7+"),
            (PieceType.ROOK, 1, (1, 8), False, True, "Ra8+"),
            (PieceType.KING, 5, (4, 2), True, False, "Kxd2"),
        ],
    )
    def test_notation(
        self,
        piece_type: PieceType,
        origin_file: int,
        dest: tuple[int, int],
        capture: bool,
        check: bool,
        expected: str,
    ) -> None:
        text = move_text(
            piece_type, origin_file, dest[0], dest[1], capture=capture, check=check
        )
        assert text == expected

    def test_no_mate_symbol(self) -> None:
        # Mate is reported on its own line, the move only carries "+".
        assert move_text(PieceType.QUEEN, 4, 8, 4, check=True) == "Qh4+"


class TestCheckmateText:
    def test_winner(self) -> None:
        assert checkmate_text(Color.BLACK) == "Black wins by checkmate."
        assert checkmate_text(Color.WHITE) == "White wins by checkmate."
