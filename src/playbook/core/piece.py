"""Piece model: fixed identity, mutable board position."""

from __future__ import annotations

from playbook.core.enums import Color, PieceType
from playbook.core.types import Square, square_name

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


class Piece:
    """A single chess piece.

    Color and type are fixed at creation; the position changes as the piece
    moves. Pieces compare by identity, so two white pawns are never equal.
    """

    __slots__ = ("_color", "_piece_type", "file", "rank")

    def __init__(self, color: Color, piece_type: PieceType, file: int, rank: int) -> None:
        self._color = color
        self._piece_type = piece_type
        self.file = file
        self.rank = rank

    @property
    def color(self) -> Color:
        return self._color

    @property
    def piece_type(self) -> PieceType:
        return self._piece_type

    @property
    def square(self) -> Square:
        return Square(self.file, self.rank)

    def move_to(self, file: int, rank: int) -> None:
        self.file = file
        self.rank = rank

    def is_at(self, file: int, rank: int) -> bool:
        return self.file == file and self.rank == rank

    # ── Serialisation ────────────────────────────────────────────────────

    @property
    def char(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self._color, self._piece_type)]

    @classmethod
    def from_char(cls, char: str, file: int, rank: int) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype, file, rank)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self._color, self._piece_type)]

    def __repr__(self) -> str:
        return f"Piece({self.char}@{square_name(self.file, self.rank)})"
