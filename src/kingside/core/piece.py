"""Piece entity."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from kingside.core.enums import Color, PieceState, PieceType
from kingside.core.types import OFF_BOARD, Square

# FEN character <-> (Color, PieceType)
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

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(slots=True)
class Piece:
    """A piece with stable identity for the whole game.

    Captured pieces are never removed from the board's collection; they are
    tagged ``CAPTURED`` and parked on :data:`OFF_BOARD`.  ``handle`` belongs
    to the rendering layer and is never inspected here.
    """

    piece_type: PieceType
    color: Color
    square: Square
    has_moved: bool = False
    state: PieceState = PieceState.ALIVE
    handle: object = field(default=None, compare=False, repr=False)

    @property
    def is_alive(self) -> bool:
        return self.state == PieceState.ALIVE

    def mark_captured(self) -> None:
        self.state = PieceState.CAPTURED
        self.square = OFF_BOARD

    def copy(self) -> Piece:
        return replace(self)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, square: Square) -> Piece:
        """Create a piece from a FEN character, e.g. 'N' -> white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(ptype, color, square)
