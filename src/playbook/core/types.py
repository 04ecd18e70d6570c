"""Square value type and coordinate helpers.

Coordinates are 1-based: file 1 is the a-file, rank 1 is White's back rank.
An absent square (no highlight, no selection) is simply ``None``.
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8
FILE_LETTERS = "abcdefgh"


class Square(NamedTuple):
    """A board square, ``Square(5, 4)`` is e4."""

    file: int
    rank: int

    @property
    def on_board(self) -> bool:
        return is_on_board(self.file, self.rank)

    @property
    def name(self) -> str:
        return square_name(self.file, self.rank)

    def __str__(self) -> str:
        return self.name


def is_on_board(file: int, rank: int) -> bool:
    """Whether (*file*, *rank*) lies on the 8x8 board."""
    return 1 <= file <= BOARD_SIZE and 1 <= rank <= BOARD_SIZE


def file_letter(file: int) -> str:
    """File letter, e.g. 1 → 'a'."""
    return FILE_LETTERS[file - 1]


def square_name(file: int, rank: int) -> str:
    """Human-readable name, e.g. (5, 4) → 'e4'."""
    return file_letter(file) + str(rank)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(5, 4)."""
    if len(name) != 2 or name[0] not in FILE_LETTERS or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(FILE_LETTERS.index(name[0]) + 1, int(name[1]))


def all_squares() -> list[Square]:
    """Every square on the board, file by file."""
    return [
        Square(file, rank)
        for file in range(1, BOARD_SIZE + 1)
        for rank in range(1, BOARD_SIZE + 1)
    ]
