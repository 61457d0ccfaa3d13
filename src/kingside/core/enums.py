"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank delta of a pawn step: white advances up, black down."""
        return 1 if self == Color.WHITE else -1

    @property
    def home_rank(self) -> int:
        return 0 if self == Color.WHITE else 7

    @property
    def promotion_rank(self) -> int:
        return 7 if self == Color.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """The six kinds of chess piece."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class PieceState(IntEnum):
    """Whether a piece is still in play."""

    ALIVE = 0
    CAPTURED = 1


class GameStatus(IntEnum):
    """Derived classification of a position for one side."""

    IN_PROGRESS = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE)
