"""Square value type and coordinate helpers.

Coordinates are zero-based: file 0-7 maps to a-h, rank 0-7 maps to 1-8.
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8


class Square(NamedTuple):
    """A (file, rank) pair; only 0-7 on both axes lies on the board."""

    file: int
    rank: int

    def offset(self, df: int, dr: int) -> Square:
        return Square(self.file + df, self.rank + dr)

    @property
    def is_valid(self) -> bool:
        return is_valid_square(self.file, self.rank)

    def __str__(self) -> str:
        return square_name(self)


# Captured pieces park here so index-based references stay stable.
OFF_BOARD = Square(-999, -999)


def is_valid_square(file: int, rank: int) -> bool:
    """Check whether (file, rank) lies on the 8x8 board."""
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. Square(4, 1) -> 'e2'.

    Off-board squares render as '-'.
    """
    if not sq.is_valid:
        return "-"
    return chr(ord("a") + sq.file) + str(sq.rank + 1)


def all_squares() -> tuple[Square, ...]:
    """Every board square, a1 first, rank by rank."""
    return tuple(
        Square(file, rank) for rank in range(BOARD_SIZE) for file in range(BOARD_SIZE)
    )


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(f, 7) for f in range(8))
