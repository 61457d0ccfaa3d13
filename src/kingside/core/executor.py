"""Move executor: commits an already-validated move to the live board."""

from __future__ import annotations

from dataclasses import dataclass

from kingside.core.board import Board
from kingside.core.enums import PieceType
from kingside.core.legality import en_passant_victim_square
from kingside.core.move_generator import castling_rook_files, is_castling_step
from kingside.core.state import EnPassantWindow
from kingside.core.types import Square


@dataclass(frozen=True, slots=True)
class CommitResult:
    """What a commit did, plus the en-passant window for the next ply."""

    board: Board
    en_passant: EnPassantWindow | None
    captured_index: int | None = None
    rook_index: int | None = None
    promoted: bool = False


def commit_move(
    board: Board,
    mover_index: int,
    from_sq: Square,
    to_sq: Square,
    en_passant: EnPassantWindow | None = None,
    *,
    promote_to: PieceType = PieceType.QUEEN,
) -> CommitResult:
    """Apply the move in place and return the resulting state.

    No legality checks happen here; committing an illegal move leaves the
    board inconsistent.  An out-of-range *mover_index* changes nothing.
    """
    mover = board.get(mover_index)
    if mover is None:
        return CommitResult(board, en_passant)
    side = mover.color

    captured: int | None = None
    target_idx = board.piece_at(to_sq)
    if target_idx is not None and board[target_idx].color != side:
        board.capture(target_idx)
        captured = target_idx

    rook_idx: int | None = None
    if is_castling_step(mover, from_sq, to_sq):
        rook_from, rook_to = castling_rook_files(from_sq, to_sq)
        rook_idx = board.find_piece(
            side, PieceType.ROOK, Square(rook_from, from_sq.rank)
        )
        if rook_idx is not None:
            rook = board[rook_idx]
            rook.square = Square(rook_to, from_sq.rank)
            rook.has_moved = True

    if (
        mover.piece_type == PieceType.PAWN
        and en_passant is not None
        and to_sq == en_passant.target
    ):
        victim_idx = board.find_piece(
            side.opposite, PieceType.PAWN, en_passant_victim_square(mover, to_sq)
        )
        if victim_idx is not None:
            board.capture(victim_idx)
            captured = victim_idx

    mover.square = to_sq
    mover.has_moved = True

    promoted = False
    if mover.piece_type == PieceType.PAWN and to_sq.rank == side.promotion_rank:
        mover.piece_type = promote_to
        promoted = True

    next_window: EnPassantWindow | None = None
    if mover.piece_type == PieceType.PAWN and abs(to_sq.rank - from_sq.rank) == 2:
        passed = Square(from_sq.file, (from_sq.rank + to_sq.rank) // 2)
        next_window = EnPassantWindow(passed, mover_index)

    return CommitResult(board, next_window, captured, rook_idx, promoted)
