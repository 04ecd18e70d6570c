"""PieceSet - the live pieces, keyed by stable handles, plus occupancy queries."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import count
from typing import TypeAlias

from playbook.core.enums import Color, PieceType
from playbook.core.piece import Piece
from playbook.core.types import BOARD_SIZE, FILE_LETTERS

PieceId: TypeAlias = int

PieceRecord: TypeAlias = tuple[PieceId, Color, PieceType, int, int]

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class PieceSet:
    """Arena of live pieces.

    Every piece gets a handle when added; handles are never reused, so a
    piece removed during a simulated capture can be restored under the same
    handle without disturbing any other handle. Iteration follows handle
    order, which is also insertion order.
    """

    __slots__ = ("_pieces", "_ids")

    def __init__(self) -> None:
        self._pieces: dict[PieceId, Piece] = {}
        self._ids = count()

    # -- Membership ---------------------------------------------------------

    def add(self, piece: Piece) -> PieceId:
        piece_id = next(self._ids)
        self._pieces[piece_id] = piece
        return piece_id

    def remove(self, piece_id: PieceId) -> Piece:
        """Take a piece out of play and return it."""
        return self._pieces.pop(piece_id)

    def restore(self, piece_id: PieceId, piece: Piece) -> None:
        """Put a previously removed piece back under its original handle."""
        if piece_id in self._pieces:
            raise ValueError(f"Piece handle already live: {piece_id!r}")
        self._pieces[piece_id] = piece
        self._pieces = dict(sorted(self._pieces.items()))

    def get(self, piece_id: PieceId) -> Piece | None:
        return self._pieces.get(piece_id)

    def id_of(self, piece: Piece) -> PieceId | None:
        for piece_id, candidate in self._pieces.items():
            if candidate is piece:
                return piece_id
        return None

    def items(self) -> list[tuple[PieceId, Piece]]:
        return list(self._pieces.items())

    def ids(self) -> list[PieceId]:
        return list(self._pieces)

    def __iter__(self) -> Iterator[Piece]:
        return iter(list(self._pieces.values()))

    def __len__(self) -> int:
        return len(self._pieces)

    def __contains__(self, piece_id: object) -> bool:
        return piece_id in self._pieces

    # -- Occupancy queries --------------------------------------------------

    def id_at(self, file: int, rank: int) -> PieceId | None:
        for piece_id, piece in self._pieces.items():
            if piece.is_at(file, rank):
                return piece_id
        return None

    def piece_at(self, file: int, rank: int) -> Piece | None:
        piece_id = self.id_at(file, rank)
        return None if piece_id is None else self._pieces[piece_id]

    def is_occupied(self, file: int, rank: int) -> bool:
        return self.id_at(file, rank) is not None

    def pieces(self, color: Color) -> list[Piece]:
        """All of *color*'s live pieces."""
        return [p for p in self._pieces.values() if p.color == color]

    def king(self, color: Color) -> Piece | None:
        """First king of *color*, or None if it has left the board."""
        for piece in self._pieces.values():
            if piece.piece_type == PieceType.KING and piece.color == color:
                return piece
        return None

    # -- Copying / comparison -----------------------------------------------

    def snapshot(self) -> tuple[PieceRecord, ...]:
        """Ordered membership and placement, for before/after comparisons."""
        return tuple(
            (pid, p.color, p.piece_type, p.file, p.rank)
            for pid, p in self._pieces.items()
        )

    def copy(self) -> PieceSet:
        """Deep copy; handles are preserved."""
        clone = PieceSet()
        clone._pieces = {
            pid: Piece(p.color, p.piece_type, p.file, p.rank)
            for pid, p in self._pieces.items()
        }
        next_id = max(self._pieces, default=-1) + 1
        clone._ids = count(next_id)
        return clone

    def clear(self) -> None:
        self._pieces.clear()

    # -- Factories ----------------------------------------------------------

    @classmethod
    def initial(cls) -> PieceSet:
        """Standard 32-piece starting arrangement."""
        pieces = cls()
        for file in range(1, BOARD_SIZE + 1):
            pieces.add(Piece(Color.WHITE, PieceType.PAWN, file, 2))
            pieces.add(Piece(Color.BLACK, PieceType.PAWN, file, 7))
        for file, ptype in enumerate(_BACK_RANK, start=1):
            pieces.add(Piece(Color.WHITE, ptype, file, 1))
            pieces.add(Piece(Color.BLACK, ptype, file, 8))
        return pieces

    @classmethod
    def from_placement(cls, placement: str) -> PieceSet:
        """Build a set from a FEN piece-placement field.

        Ranks are listed from 8 down to 1, e.g. ``"4k3/8/8/8/8/8/8/4K3"``.
        """
        rows = placement.split("/")
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Invalid placement: {placement!r}")

        pieces = cls()
        for row_idx, row in enumerate(rows):
            rank = BOARD_SIZE - row_idx
            file = 1
            for char in row:
                if char.isdigit():
                    file += int(char)
                    continue
                if file > BOARD_SIZE:
                    raise ValueError(f"Invalid placement: {placement!r}")
                pieces.add(Piece.from_char(char, file, rank))
                file += 1
            if file != BOARD_SIZE + 1:
                raise ValueError(f"Invalid placement: {placement!r}")
        return pieces

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE, 0, -1):
            row = []
            for file in range(1, BOARD_SIZE + 1):
                p = self.piece_at(file, rank)
                row.append(p.char if p else ".")
            rows.append(f"{rank} {' '.join(row)}")
        rows.append("  " + " ".join(FILE_LETTERS))
        return "\n".join(rows)
