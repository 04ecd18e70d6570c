"""Tests for PieceSet, Piece and square helpers."""

import pytest

from playbook.core.board import PieceSet
from playbook.core.enums import Color, PieceType
from playbook.core.piece import Piece
from playbook.core.types import Square, all_squares, parse_square


class TestPieceSetInitial:
    def test_thirty_two_pieces(self) -> None:
        pieces = PieceSet.initial()
        assert len(pieces) == 32
        assert len(pieces.pieces(Color.WHITE)) == 16
        assert len(pieces.pieces(Color.BLACK)) == 16

    def test_kings(self) -> None:
        pieces = PieceSet.initial()
        white_king = pieces.king(Color.WHITE)
        black_king = pieces.king(Color.BLACK)
        assert white_king is not None and white_king.square == Square(5, 1)
        assert black_king is not None and black_king.square == Square(5, 8)

    def test_white_back_rank(self) -> None:
        pieces = PieceSet.initial()
        expected = [
            PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
            PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
        ]
        for file, pt in enumerate(expected, start=1):
            piece = pieces.piece_at(file, 1)
            assert piece is not None, f"Empty square at file {file}"
            assert piece.color == Color.WHITE
            assert piece.piece_type == pt

    def test_pawn_ranks(self) -> None:
        pieces = PieceSet.initial()
        for file in range(1, 9):
            white = pieces.piece_at(file, 2)
            black = pieces.piece_at(file, 7)
            assert white is not None and white.piece_type == PieceType.PAWN
            assert black is not None and black.color == Color.BLACK

    def test_empty_middle(self) -> None:
        pieces = PieceSet.initial()
        for sq in all_squares():
            if 3 <= sq.rank <= 6:
                assert not pieces.is_occupied(sq.file, sq.rank)


class TestOccupancy:
    def test_piece_at_and_id_at_agree(self) -> None:
        pieces = PieceSet.initial()
        piece_id = pieces.id_at(7, 1)
        assert piece_id is not None
        assert pieces.get(piece_id) is pieces.piece_at(7, 1)

    def test_empty_square(self) -> None:
        pieces = PieceSet.initial()
        assert pieces.piece_at(5, 4) is None
        assert pieces.id_at(5, 4) is None
        assert not pieces.is_occupied(5, 4)

    def test_off_board_is_empty(self) -> None:
        pieces = PieceSet.initial()
        assert not pieces.is_occupied(0, 0)
        assert not pieces.is_occupied(9, 1)


class TestHandles:
    def test_remove_and_restore_keep_handle_and_order(self) -> None:
        pieces = PieceSet.initial()
        before = pieces.snapshot()
        victim_id = pieces.ids()[3]

        victim = pieces.remove(victim_id)
        assert victim_id not in pieces
        assert len(pieces) == 31

        pieces.restore(victim_id, victim)
        assert pieces.snapshot() == before
        assert pieces.get(victim_id) is victim

    def test_other_handles_unaffected_by_removal(self) -> None:
        pieces = PieceSet.initial()
        ids = pieces.ids()
        later = pieces.get(ids[10])
        pieces.remove(ids[2])
        assert pieces.get(ids[10]) is later

    def test_handles_not_reused(self) -> None:
        pieces = PieceSet.from_placement("4k3/8/8/8/8/8/8/4K3")
        removed = pieces.ids()[0]
        pieces.remove(removed)
        new_id = pieces.add(Piece(Color.BLACK, PieceType.QUEEN, 4, 8))
        assert new_id != removed

    def test_restore_live_handle_raises(self) -> None:
        pieces = PieceSet.initial()
        piece_id = pieces.ids()[0]
        piece = pieces.get(piece_id)
        assert piece is not None
        with pytest.raises(ValueError, match="already live"):
            pieces.restore(piece_id, piece)

    def test_remove_unknown_raises(self) -> None:
        pieces = PieceSet()
        with pytest.raises(KeyError):
            pieces.remove(99)

    def test_id_of(self) -> None:
        pieces = PieceSet.initial()
        piece_id = pieces.ids()[5]
        piece = pieces.get(piece_id)
        assert piece is not None
        assert pieces.id_of(piece) == piece_id
        assert pieces.id_of(Piece(Color.WHITE, PieceType.PAWN, 1, 2)) is None


class TestPlacement:
    def test_two_kings(self) -> None:
        pieces = PieceSet.from_placement("4k3/8/8/8/8/8/8/4K3")
        assert len(pieces) == 2
        black_king = pieces.king(Color.BLACK)
        assert black_king is not None and black_king.square == parse_square("e8")

    def test_starting_placement_matches_initial(self) -> None:
        parsed = PieceSet.from_placement("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR")
        initial = PieceSet.initial()
        for sq in all_squares():
            a = parsed.piece_at(sq.file, sq.rank)
            b = initial.piece_at(sq.file, sq.rank)
            assert (a is None) == (b is None)
            if a is not None and b is not None:
                assert a.char == b.char

    @pytest.mark.parametrize(
        "placement",
        [
            "8/8/8",
            "9/8/8/8/8/8/8/8",
            "4k4/8/8/8/8/8/8/8",
            "4k2/8/8/8/8/8/8/8",
            "4x3/8/8/8/8/8/8/8",
        ],
    )
    def test_malformed_raises(self, placement: str) -> None:
        with pytest.raises(ValueError):
            PieceSet.from_placement(placement)


class TestCopyAndRepr:
    def test_copy_independence(self) -> None:
        pieces = PieceSet.initial()
        clone = pieces.copy()
        assert clone.snapshot() == pieces.snapshot()

        king = clone.king(Color.WHITE)
        assert king is not None
        king.move_to(5, 3)
        assert clone.snapshot() != pieces.snapshot()
        original_king = pieces.king(Color.WHITE)
        assert original_king is not None and original_king.square == Square(5, 1)

    def test_copy_keeps_handles_fresh(self) -> None:
        pieces = PieceSet.initial()
        clone = pieces.copy()
        new_id = clone.add(Piece(Color.WHITE, PieceType.QUEEN, 4, 4))
        assert new_id not in pieces.ids()

    def test_clear(self) -> None:
        pieces = PieceSet.initial()
        pieces.clear()
        assert len(pieces) == 0

    def test_repr_not_empty(self) -> None:
        text = repr(PieceSet.initial())
        assert "K" in text
        assert "a b c d e f g h" in text
        assert text.splitlines()[0].startswith("8 r n b q k")


class TestPiece:
    def test_identity_is_fixed(self) -> None:
        piece = Piece(Color.BLACK, PieceType.KNIGHT, 2, 8)
        piece.move_to(3, 6)
        assert piece.color == Color.BLACK
        assert piece.piece_type == PieceType.KNIGHT
        assert piece.square == Square(3, 6)

    def test_color_is_read_only(self) -> None:
        piece = Piece(Color.WHITE, PieceType.PAWN, 1, 2)
        with pytest.raises(AttributeError):
            piece.color = Color.BLACK  # type: ignore[misc]

    def test_pieces_compare_by_identity(self) -> None:
        a = Piece(Color.WHITE, PieceType.PAWN, 1, 2)
        b = Piece(Color.WHITE, PieceType.PAWN, 1, 2)
        assert a != b

    def test_from_char(self) -> None:
        piece = Piece.from_char("n", 7, 8)
        assert piece.color == Color.BLACK
        assert piece.piece_type == PieceType.KNIGHT
        assert piece.symbol == "♞"

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x", 1, 1)


class TestSquare:
    def test_parse(self) -> None:
        assert parse_square("e4") == Square(5, 4)
        assert parse_square("a1") == Square(1, 1)
        assert parse_square("h8") == Square(8, 8)

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "e44"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)

    def test_name(self) -> None:
        assert Square(5, 4).name == "e4"
        assert str(Square(1, 8)) == "a8"

    def test_on_board(self) -> None:
        assert Square(1, 1).on_board
        assert not Square(0, 0).on_board
        assert not Square(9, 4).on_board

    def test_all_squares(self) -> None:
        squares = all_squares()
        assert len(squares) == 64
        assert len(set(squares)) == 64
