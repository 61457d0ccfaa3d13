"""Square coordinate notation and the standard-layout index convention."""

from __future__ import annotations

from kingside.core.types import BOARD_SIZE, Square, square_name

_STANDARD_PIECE_COUNT = 4 * BOARD_SIZE

# Rank occupied by each block of eight indices in Board.initial().
_STANDARD_RANKS: tuple[int, ...] = (0, 1, 6, 7)


def square_from_algebraic(text: str) -> Square:
    """Parse a coordinate such as 'e4' into a square.

    Anything that is not a file letter a-h followed by a rank digit 1-8
    yields ``Square(0, 0)`` instead of raising.
    """
    if len(text) != 2 or text[0] not in "abcdefgh" or text[1] not in "12345678":
        return Square(0, 0)
    return Square(ord(text[0]) - ord("a"), int(text[1]) - 1)


def square_to_algebraic(sq: Square) -> str:
    """Inverse of :func:`square_from_algebraic` for on-board squares."""
    return square_name(sq)


def standard_square_for_piece_index(index: int) -> Square:
    """Starting square of *index* in the standard layout.

    Indices outside 0-31 yield ``Square(0, 0)``.
    """
    if not 0 <= index < _STANDARD_PIECE_COUNT:
        return Square(0, 0)
    block, file = divmod(index, BOARD_SIZE)
    return Square(file, _STANDARD_RANKS[block])


def piece_index_for_standard_square(sq: Square) -> int | None:
    """Index that starts on *sq* in the standard layout, if any.

    This follows the fixed ordering of ``Board.initial()`` and says nothing
    about what currently stands on *sq*.
    """
    if not sq.is_valid or sq.rank not in _STANDARD_RANKS:
        return None
    return _STANDARD_RANKS.index(sq.rank) * BOARD_SIZE + sq.file
