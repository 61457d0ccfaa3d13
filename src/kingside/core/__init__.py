"""Core rules engine - pure chess logic with zero external dependencies.

Quick start::

    from kingside.core import Board, legal_moves, square_from_algebraic

    board = Board.initial()
    e2 = square_from_algebraic("e2")
    print(legal_moves(board, board.piece_at(e2)))
"""

from kingside.core.attacks import is_square_attacked
from kingside.core.board import Board
from kingside.core.enums import Color, GameStatus, PieceState, PieceType
from kingside.core.executor import CommitResult, commit_move
from kingside.core.legality import legal_moves, would_be_legal_move
from kingside.core.move_generator import MoveGenerator, pseudo_legal_moves
from kingside.core.notation import (
    piece_index_for_standard_square,
    square_from_algebraic,
    square_to_algebraic,
    standard_square_for_piece_index,
)
from kingside.core.piece import Piece
from kingside.core.rules import Rules
from kingside.core.state import EnPassantWindow, GameState, setup_standard_game
from kingside.core.types import OFF_BOARD, Square, is_valid_square, square_name

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceState",
    "PieceType",
    # Types / helpers
    "OFF_BOARD",
    "Square",
    "is_valid_square",
    "square_name",
    # Domain objects
    "Board",
    "CommitResult",
    "EnPassantWindow",
    "GameState",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Operations
    "commit_move",
    "is_square_attacked",
    "legal_moves",
    "pseudo_legal_moves",
    "setup_standard_game",
    "would_be_legal_move",
    # Notation
    "piece_index_for_standard_square",
    "square_from_algebraic",
    "square_to_algebraic",
    "standard_square_for_piece_index",
]
