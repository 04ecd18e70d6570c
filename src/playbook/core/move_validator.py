"""Move legality by piece geometry and occupancy, ignoring king safety."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from playbook.core.enums import PieceType
from playbook.core.types import Square, all_squares, is_on_board

if TYPE_CHECKING:
    from playbook.core.board import PieceSet
    from playbook.core.piece import Piece

# (piece, dest_file, dest_rank, df, dr, pieces) -> bool
GeometryCheck = Callable[["Piece", int, int, int, int, "PieceSet"], bool]


def _sign(x: int) -> int:
    return (x > 0) - (x < 0)


def is_path_clear(
    file: int, rank: int, dest_file: int, dest_rank: int, pieces: PieceSet
) -> bool:
    """Whether every square strictly between origin and destination is empty.

    The destination itself is never inspected.
    """
    df = dest_file - file
    dr = dest_rank - rank
    step_f = _sign(df)
    step_r = _sign(dr)

    steps = max(abs(df), abs(dr))
    for i in range(1, steps):
        if pieces.is_occupied(file + step_f * i, rank + step_r * i):
            return False
    return True


# -- Per-type geometry ------------------------------------------------------


def _pawn_move(
    piece: Piece, dest_file: int, dest_rank: int, df: int, dr: int, pieces: PieceSet
) -> bool:
    direction = piece.color.forward

    if df == 0 and dr == direction:
        return not pieces.is_occupied(dest_file, dest_rank)

    if df == 0 and dr == 2 * direction:
        return (
            piece.rank == piece.color.pawn_start_rank
            and not pieces.is_occupied(piece.file, piece.rank + direction)
            and not pieces.is_occupied(dest_file, dest_rank)
        )

    if abs(df) == 1 and dr == direction:
        target = pieces.piece_at(dest_file, dest_rank)
        return target is not None and target.color != piece.color

    return False


def _knight_move(
    piece: Piece, dest_file: int, dest_rank: int, df: int, dr: int, pieces: PieceSet
) -> bool:
    return (abs(df), abs(dr)) in ((2, 1), (1, 2))


def _bishop_move(
    piece: Piece, dest_file: int, dest_rank: int, df: int, dr: int, pieces: PieceSet
) -> bool:
    return (
        abs(df) == abs(dr) != 0
        and is_path_clear(piece.file, piece.rank, dest_file, dest_rank, pieces)
    )


def _rook_move(
    piece: Piece, dest_file: int, dest_rank: int, df: int, dr: int, pieces: PieceSet
) -> bool:
    return (df == 0) != (dr == 0) and is_path_clear(
        piece.file, piece.rank, dest_file, dest_rank, pieces
    )


def _queen_move(
    piece: Piece, dest_file: int, dest_rank: int, df: int, dr: int, pieces: PieceSet
) -> bool:
    return _bishop_move(piece, dest_file, dest_rank, df, dr, pieces) or _rook_move(
        piece, dest_file, dest_rank, df, dr, pieces
    )


def _king_move(
    piece: Piece, dest_file: int, dest_rank: int, df: int, dr: int, pieces: PieceSet
) -> bool:
    return abs(df) <= 1 and abs(dr) <= 1


GEOMETRY: dict[PieceType, GeometryCheck] = {
    PieceType.PAWN: _pawn_move,
    PieceType.KNIGHT: _knight_move,
    PieceType.BISHOP: _bishop_move,
    PieceType.ROOK: _rook_move,
    PieceType.QUEEN: _queen_move,
    PieceType.KING: _king_move,
}


# -- Public API -------------------------------------------------------------


def is_valid_move(piece: Piece, dest_file: int, dest_rank: int, pieces: PieceSet) -> bool:
    """Whether *piece* may move to (*dest_file*, *dest_rank*).

    Covers board bounds, same-color occupancy and per-type geometry. Whether
    the move exposes the mover's own king is decided elsewhere.
    """
    if not is_on_board(dest_file, dest_rank):
        return False

    if piece.is_at(dest_file, dest_rank):
        return False

    occupant = pieces.piece_at(dest_file, dest_rank)
    if occupant is not None and occupant.color == piece.color:
        return False

    df = dest_file - piece.file
    dr = dest_rank - piece.rank
    return GEOMETRY[piece.piece_type](piece, dest_file, dest_rank, df, dr, pieces)


def valid_destinations(piece: Piece, pieces: PieceSet) -> list[Square]:
    """Every square *piece* could move to, file by file."""
    return [
        sq for sq in all_squares() if is_valid_move(piece, sq.file, sq.rank, pieces)
    ]
