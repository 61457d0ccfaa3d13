"""Rule options chosen by the front end."""

from __future__ import annotations

from dataclasses import dataclass

from kingside.core.enums import PieceType


@dataclass
class RulesConfig:
    """All configurable rule behaviour."""

    # Castling: also reject when the king's landing square is attacked
    # before the move. Off by default to match the classic game loop.
    castling_checks_destination: bool = False

    # Pawns reaching the last rank turn into this piece, no choice offered.
    auto_promote_to: PieceType = PieceType.QUEEN

    def __post_init__(self) -> None:
        if self.auto_promote_to in (PieceType.PAWN, PieceType.KING):
            raise ValueError(
                f"Invalid promotion piece: {self.auto_promote_to.name.lower()!r}"
            )
