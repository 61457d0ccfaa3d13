"""Pseudo-legal move generation for a single piece."""

from __future__ import annotations

from collections.abc import Iterator

from kingside.core.attacks import KING_OFFSETS, KNIGHT_OFFSETS, SLIDER_DIRS
from kingside.core.board import Board
from kingside.core.enums import Color, PieceType
from kingside.core.piece import Piece
from kingside.core.state import EnPassantWindow
from kingside.core.types import BOARD_SIZE, Square, is_valid_square

KINGSIDE_ROOK_FILE = BOARD_SIZE - 1
QUEENSIDE_ROOK_FILE = 0


def castling_rook_files(king_from: Square, king_to: Square) -> tuple[int, int]:
    """(rook start file, rook end file) for a two-square king step."""
    if king_to.file > king_from.file:
        return KINGSIDE_ROOK_FILE, king_to.file - 1
    return QUEENSIDE_ROOK_FILE, king_to.file + 1


def is_castling_step(piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    return piece.piece_type == PieceType.KING and abs(to_sq.file - from_sq.file) == 2


class MoveGenerator:
    """Produces destination squares from each piece's raw movement rule.

    Whether the mover's own king is left attacked is not considered here;
    see :mod:`kingside.core.legality`.  The board is only read.
    """

    __slots__ = ("_board", "_en_passant")

    def __init__(
        self, board: Board, en_passant: EnPassantWindow | None = None
    ) -> None:
        self._board = board
        self._en_passant = en_passant

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(self, index: int) -> list[Square]:
        """Destination squares for the piece at *index* (empty if invalid)."""
        return list(self.iter_pseudo_legal_moves(index))

    def iter_pseudo_legal_moves(self, index: int) -> Iterator[Square]:
        """Lazily yield destination squares for the piece at *index*."""
        piece = self._board.get(index)
        if piece is None or not piece.is_alive:
            return
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            yield from self._gen_pawn(piece)
        elif ptype == PieceType.KNIGHT:
            yield from self._gen_steps(piece, KNIGHT_OFFSETS)
        elif ptype == PieceType.KING:
            yield from self._gen_steps(piece, KING_OFFSETS)
            yield from self._gen_castling(piece)
        else:
            yield from self._gen_sliding(piece, SLIDER_DIRS[ptype])

    # -- Piece-specific generators (private) -------------------------------

    def _color_at(self, sq: Square) -> Color | None:
        occupant = self._board.occupant(sq)
        return None if occupant is None else occupant.color

    def _gen_pawn(self, piece: Piece) -> Iterator[Square]:
        board = self._board
        origin = piece.square
        forward = piece.color.forward

        one_step = origin.offset(0, forward)
        if one_step.is_valid and board.is_empty(one_step):
            yield one_step
            if not piece.has_moved:
                two_step = origin.offset(0, 2 * forward)
                if two_step.is_valid and board.is_empty(two_step):
                    yield two_step

        for df in (-1, 1):
            cap_sq = origin.offset(df, forward)
            if not cap_sq.is_valid:
                continue
            target_color = self._color_at(cap_sq)
            if target_color is not None and target_color != piece.color:
                yield cap_sq
            elif target_color is None and self._is_en_passant_target(piece, cap_sq):
                yield cap_sq

    def _is_en_passant_target(self, piece: Piece, sq: Square) -> bool:
        window = self._en_passant
        if window is None or window.target != sq:
            return False
        victim = self._board.get(window.victim_index)
        return (
            victim is not None
            and victim.is_alive
            and victim.color != piece.color
            and victim.piece_type == PieceType.PAWN
        )

    def _gen_steps(
        self, piece: Piece, offsets: tuple[tuple[int, int], ...]
    ) -> Iterator[Square]:
        origin = piece.square
        for df, dr in offsets:
            if not is_valid_square(origin.file + df, origin.rank + dr):
                continue
            to_sq = origin.offset(df, dr)
            if self._color_at(to_sq) != piece.color:
                yield to_sq

    def _gen_sliding(
        self, piece: Piece, directions: tuple[tuple[int, int], ...]
    ) -> Iterator[Square]:
        origin = piece.square
        for df, dr in directions:
            f, r = origin.file + df, origin.rank + dr
            while is_valid_square(f, r):
                to_sq = Square(f, r)
                target_color = self._color_at(to_sq)
                if target_color is None:
                    yield to_sq
                else:
                    if target_color != piece.color:
                        yield to_sq
                    break
                f += df
                r += dr

    def _gen_castling(self, king: Piece) -> Iterator[Square]:
        # Attack safety is enforced by the legality filter, not here.
        if king.has_moved:
            return
        board = self._board
        origin = king.square
        for step, rook_file in ((1, KINGSIDE_ROOK_FILE), (-1, QUEENSIDE_ROOK_FILE)):
            to_sq = origin.offset(2 * step, 0)
            if not to_sq.is_valid:
                continue
            rook_idx = board.find_piece(
                king.color, PieceType.ROOK, Square(rook_file, origin.rank)
            )
            if rook_idx is None or board[rook_idx].has_moved:
                continue
            low, high = sorted((origin.file, rook_file))
            between = range(low + 1, high)
            if all(board.is_empty(Square(f, origin.rank)) for f in between):
                yield to_sq


def pseudo_legal_moves(
    board: Board, index: int, en_passant: EnPassantWindow | None = None
) -> list[Square]:
    """Pseudo-legal destinations of the piece at *index*."""
    return MoveGenerator(board, en_passant).pseudo_legal_moves(index)
