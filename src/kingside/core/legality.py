"""Legality filter: simulate a move on a private copy, then test king safety."""

from __future__ import annotations

from kingside.core.attacks import is_square_attacked
from kingside.core.board import Board
from kingside.core.enums import PieceType
from kingside.core.move_generator import (
    MoveGenerator,
    castling_rook_files,
    is_castling_step,
)
from kingside.core.piece import Piece
from kingside.core.state import EnPassantWindow
from kingside.core.types import Square


def en_passant_victim_square(mover: Piece, to_sq: Square) -> Square:
    """Square of the pawn taken when *mover* lands on an en-passant target."""
    return to_sq.offset(0, -mover.color.forward)


def _captured_index(
    board: Board,
    mover: Piece,
    to_sq: Square,
    en_passant: EnPassantWindow | None,
) -> int | None:
    idx = board.piece_at(to_sq)
    if idx is not None and board[idx].color != mover.color:
        return idx
    if (
        mover.piece_type == PieceType.PAWN
        and en_passant is not None
        and to_sq == en_passant.target
    ):
        return board.find_piece(
            mover.color.opposite,
            PieceType.PAWN,
            en_passant_victim_square(mover, to_sq),
        )
    return None


def _is_safe_after(
    board: Board,
    mover_index: int,
    from_sq: Square,
    to_sq: Square,
    en_passant: EnPassantWindow | None,
    castling_checks_destination: bool,
) -> bool:
    mover = board[mover_index]
    side = mover.color
    opponent = side.opposite

    sim = board.copy()
    captured = _captured_index(sim, mover, to_sq, en_passant)
    if captured is not None:
        sim.capture(captured)

    if is_castling_step(mover, from_sq, to_sq):
        # Checked on the unmodified board, before anything moves.
        if is_square_attacked(board, from_sq, opponent):
            return False
        step = 1 if to_sq.file > from_sq.file else -1
        if is_square_attacked(board, from_sq.offset(step, 0), opponent):
            return False
        if castling_checks_destination and is_square_attacked(board, to_sq, opponent):
            return False
        rook_from, rook_to = castling_rook_files(from_sq, to_sq)
        rook_idx = sim.find_piece(side, PieceType.ROOK, Square(rook_from, from_sq.rank))
        if rook_idx is not None:
            sim[rook_idx].square = Square(rook_to, from_sq.rank)

    sim[mover_index].square = to_sq

    king_idx = sim.king_index(side)
    if king_idx is None:
        return False
    return not is_square_attacked(sim, sim[king_idx].square, opponent)


def would_be_legal_move(
    board: Board,
    mover_index: int,
    from_sq: Square,
    to_sq: Square,
    en_passant: EnPassantWindow | None = None,
    *,
    castling_checks_destination: bool = False,
) -> bool:
    """Would moving the piece at *mover_index* to *to_sq* be legal?

    The pseudo-legal set is re-derived from *board* rather than trusted
    from the caller.  For castling, the king's start square and the square
    it passes over must not be attacked; the destination square is only
    tested up front when *castling_checks_destination* is set.  In every
    case the move is legal exactly when the mover's king is not attacked in
    the simulated position.  *board* itself is never modified.
    """
    mover = board.get(mover_index)
    if mover is None or not mover.is_alive or mover.square != from_sq:
        return False
    gen = MoveGenerator(board, en_passant)
    if to_sq not in gen.iter_pseudo_legal_moves(mover_index):
        return False
    return _is_safe_after(
        board, mover_index, from_sq, to_sq, en_passant, castling_checks_destination
    )


def legal_moves(
    board: Board,
    index: int,
    en_passant: EnPassantWindow | None = None,
    *,
    castling_checks_destination: bool = False,
) -> list[Square]:
    """Pseudo-legal moves of the piece at *index* that keep its king safe."""
    piece = board.get(index)
    if piece is None or not piece.is_alive:
        return []
    from_sq = piece.square
    gen = MoveGenerator(board, en_passant)
    return [
        to_sq
        for to_sq in gen.iter_pseudo_legal_moves(index)
        if _is_safe_after(
            board, index, from_sq, to_sq, en_passant, castling_checks_destination
        )
    ]
