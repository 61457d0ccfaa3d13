"""Attack detection: is a square hit by any piece of a given side?"""

from __future__ import annotations

from kingside.core.board import Board
from kingside.core.enums import Color, PieceType
from kingside.core.types import Square, is_valid_square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}


def occupied_squares(board: Board) -> set[Square]:
    """Squares holding a non-captured piece."""
    return {piece.square for piece in board if piece.is_alive}


def _ray_hits(
    origin: Square,
    target: Square,
    direction: tuple[int, int],
    occupied: set[Square],
) -> bool:
    df, dr = direction
    f, r = origin.file + df, origin.rank + dr
    while is_valid_square(f, r):
        sq = Square(f, r)
        if sq == target:
            return True
        if sq in occupied:
            return False
        f += df
        r += dr
    return False


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any non-captured piece of *by_color*?

    Raw movement only: whose turn it is, pins and checks are ignored.
    Recomputed from scratch on every call.
    """
    occupied: set[Square] | None = None

    for piece in board:
        if not piece.is_alive or piece.color != by_color:
            continue
        origin = piece.square
        df = sq.file - origin.file
        dr = sq.rank - origin.rank
        ptype = piece.piece_type

        if ptype == PieceType.PAWN:
            if dr == by_color.forward and abs(df) == 1:
                return True
        elif ptype == PieceType.KNIGHT:
            if (df, dr) in KNIGHT_OFFSETS:
                return True
        elif ptype == PieceType.KING:
            if (df, dr) in KING_OFFSETS:
                return True
        else:
            if occupied is None:
                occupied = occupied_squares(board)
            for direction in SLIDER_DIRS[ptype]:
                if _ray_hits(origin, sq, direction, occupied):
                    return True

    return False
