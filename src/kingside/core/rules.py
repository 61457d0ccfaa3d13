"""High-level rules: check, checkmate, stalemate."""

from __future__ import annotations

from kingside.core.attacks import is_square_attacked
from kingside.core.board import Board
from kingside.core.enums import Color, GameStatus
from kingside.core.legality import legal_moves
from kingside.core.state import EnPassantWindow
from kingside.core.types import Square


class Rules:
    """Static predicates recomputed from the board on every call."""

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        # A missing king reads as "not in check".
        king_idx = board.king_index(color)
        if king_idx is None:
            return False
        return is_square_attacked(board, board[king_idx].square, color.opposite)

    @staticmethod
    def legal_move_union(
        board: Board,
        color: Color,
        en_passant: EnPassantWindow | None = None,
        *,
        castling_checks_destination: bool = False,
    ) -> dict[int, list[Square]]:
        """Legal destinations keyed by piece index, for every live *color* piece.

        Pieces without a legal move are omitted, so an empty dict means
        *color* cannot move.
        """
        union: dict[int, list[Square]] = {}
        for idx in board.indices(color):
            moves = legal_moves(
                board,
                idx,
                en_passant,
                castling_checks_destination=castling_checks_destination,
            )
            if moves:
                union[idx] = moves
        return union

    @staticmethod
    def has_legal_move(
        board: Board,
        color: Color,
        en_passant: EnPassantWindow | None = None,
        *,
        castling_checks_destination: bool = False,
    ) -> bool:
        return any(
            legal_moves(
                board,
                idx,
                en_passant,
                castling_checks_destination=castling_checks_destination,
            )
            for idx in board.indices(color)
        )

    @staticmethod
    def is_checkmate(
        board: Board,
        color: Color,
        en_passant: EnPassantWindow | None = None,
        *,
        castling_checks_destination: bool = False,
    ) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return not Rules.has_legal_move(
            board,
            color,
            en_passant,
            castling_checks_destination=castling_checks_destination,
        )

    @staticmethod
    def is_stalemate(
        board: Board,
        color: Color,
        en_passant: EnPassantWindow | None = None,
        *,
        castling_checks_destination: bool = False,
    ) -> bool:
        if Rules.is_in_check(board, color):
            return False
        return not Rules.has_legal_move(
            board,
            color,
            en_passant,
            castling_checks_destination=castling_checks_destination,
        )

    @staticmethod
    def status(
        board: Board,
        color: Color,
        en_passant: EnPassantWindow | None = None,
        *,
        castling_checks_destination: bool = False,
    ) -> GameStatus:
        """Classify the position from *color*'s point of view."""
        in_check = Rules.is_in_check(board, color)
        can_move = Rules.has_legal_move(
            board,
            color,
            en_passant,
            castling_checks_destination=castling_checks_destination,
        )
        if not can_move:
            return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        return GameStatus.CHECK if in_check else GameStatus.IN_PROGRESS
