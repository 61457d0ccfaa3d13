"""Explicit game state threaded through every engine call."""

from __future__ import annotations

from dataclasses import dataclass, field

from kingside.core.board import Board
from kingside.core.enums import Color
from kingside.core.types import Square


@dataclass(frozen=True, slots=True)
class EnPassantWindow:
    """One-ply en-passant opportunity.

    ``target`` is the square the double-stepping pawn passed over;
    ``victim_index`` is that pawn's board index.
    """

    target: Square
    victim_index: int


@dataclass(slots=True)
class GameState:
    """Board plus the metadata the rules need between moves.

    Set by a commit, consumed by the next move generation, and cleared
    (or replaced) by the next commit.
    """

    board: Board = field(default_factory=Board.initial)
    en_passant: EnPassantWindow | None = None
    side_to_move: Color = Color.WHITE

    def copy(self) -> GameState:
        return GameState(self.board.copy(), self.en_passant, self.side_to_move)


def setup_standard_game() -> GameState:
    """Fresh game: standard 32-piece layout, white to move, no en passant."""
    return GameState(Board.initial())
