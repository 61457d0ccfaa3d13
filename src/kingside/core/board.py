"""Board - the ordered piece collection of one game."""

from __future__ import annotations

from collections.abc import Iterator

from kingside.core.enums import Color, PieceType
from kingside.core.piece import Piece
from kingside.core.types import BOARD_SIZE, Square

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _is_home_square(color: Color, piece_type: PieceType, sq: Square) -> bool:
    if piece_type == PieceType.PAWN:
        return sq.rank == color.home_rank + color.forward
    return sq.rank == color.home_rank and BACK_RANK[sq.file] == piece_type


class Board:
    """Insertion-ordered pieces; indices are stable for the lifetime of a game.

    Pieces are mutated in place and never removed.  The board holds no
    move legality logic.
    """

    __slots__ = ("_pieces",)

    def __init__(self, pieces: list[Piece] | None = None) -> None:
        self._pieces: list[Piece] = pieces if pieces is not None else []

    # -- Element access -----------------------------------------------------

    def __len__(self) -> int:
        return len(self._pieces)

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._pieces)

    def __getitem__(self, index: int) -> Piece:
        return self._pieces[index]

    def get(self, index: int) -> Piece | None:
        """Piece at *index*, or None when the index is out of range."""
        if 0 <= index < len(self._pieces):
            return self._pieces[index]
        return None

    def add(self, piece: Piece) -> int:
        """Append *piece* and return its index (setup only)."""
        self._pieces.append(piece)
        return len(self._pieces) - 1

    # -- Query helpers ------------------------------------------------------

    def piece_at(self, sq: Square) -> int | None:
        """Index of the non-captured piece on *sq*."""
        for idx, piece in enumerate(self._pieces):
            if piece.is_alive and piece.square == sq:
                return idx
        return None

    def occupant(self, sq: Square) -> Piece | None:
        idx = self.piece_at(sq)
        return None if idx is None else self._pieces[idx]

    def is_empty(self, sq: Square) -> bool:
        return self.piece_at(sq) is None

    def indices(self, color: Color) -> list[int]:
        """Indices of all non-captured pieces of *color*, in board order."""
        return [
            idx
            for idx, piece in enumerate(self._pieces)
            if piece.is_alive and piece.color == color
        ]

    def king_index(self, color: Color) -> int | None:
        """Index of *color*'s king, or None if it is not on the board."""
        for idx, piece in enumerate(self._pieces):
            if (
                piece.is_alive
                and piece.color == color
                and piece.piece_type == PieceType.KING
            ):
                return idx
        return None

    def find_piece(
        self, color: Color, piece_type: PieceType, sq: Square
    ) -> int | None:
        """Index of the live *color* *piece_type* standing on *sq*."""
        idx = self.piece_at(sq)
        if idx is None:
            return None
        piece = self._pieces[idx]
        if piece.color == color and piece.piece_type == piece_type:
            return idx
        return None

    # -- Mutation / copying -------------------------------------------------

    def capture(self, index: int) -> None:
        """Take the piece at *index* out of play; out-of-range is a no-op."""
        piece = self.get(index)
        if piece is not None:
            piece.mark_captured()

    def copy(self) -> Board:
        """Independent copy; rendering handles are shared, not duplicated."""
        return Board([piece.copy() for piece in self._pieces])

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard 32-piece layout.

        Index order: white back rank a-h (0-7), white pawns a-h (8-15),
        black pawns a-h (16-23), black back rank a-h (24-31).
        """
        b = cls()
        for f, pt in enumerate(BACK_RANK):
            b.add(Piece(pt, Color.WHITE, Square(f, 0)))
        for f in range(BOARD_SIZE):
            b.add(Piece(PieceType.PAWN, Color.WHITE, Square(f, 1)))
        for f in range(BOARD_SIZE):
            b.add(Piece(PieceType.PAWN, Color.BLACK, Square(f, 6)))
        for f, pt in enumerate(BACK_RANK):
            b.add(Piece(pt, Color.BLACK, Square(f, 7)))
        return b

    @classmethod
    def from_placement(cls, placement: str) -> Board:
        """Build a board from the piece-placement field of a FEN string.

        Pieces are indexed in reading order (rank 8 first, a-file first).
        Pieces standing on their standard home square start unmoved.
        """
        ranks = placement.split(" ")[0].split("/")
        if len(ranks) != BOARD_SIZE:
            raise ValueError(
                f"Invalid placement (must contain 8 ranks): {placement!r}"
            )
        b = cls()
        for rank_idx, rank_text in enumerate(ranks):
            rank = BOARD_SIZE - 1 - rank_idx
            file = 0
            for ch in rank_text:
                if ch.isdigit():
                    step = int(ch)
                    if not (1 <= step <= BOARD_SIZE):
                        raise ValueError(
                            f"Invalid placement digit {ch!r}: {placement!r}"
                        )
                    file += step
                else:
                    if file >= BOARD_SIZE:
                        raise ValueError(
                            f"Invalid placement rank width: {placement!r}"
                        )
                    sq = Square(file, rank)
                    piece = Piece.from_char(ch, sq)
                    piece.has_moved = not _is_home_square(
                        piece.color, piece.piece_type, sq
                    )
                    b.add(piece)
                    file += 1
                if file > BOARD_SIZE:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
            if file != BOARD_SIZE:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pieces == other._pieces

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for file in range(BOARD_SIZE):
                p = self.occupant(Square(file, rank))
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
