"""Tests for committing moves."""

from kingside.core.board import Board
from kingside.core.enums import PieceState, PieceType
from kingside.core.executor import commit_move
from kingside.core.legality import legal_moves
from kingside.core.move_generator import pseudo_legal_moves
from kingside.core.state import EnPassantWindow
from kingside.core.types import (
    A1,
    A2,
    A7,
    A8,
    B8,
    C1,
    C8,
    D1,
    D5,
    D6,
    D7,
    D8,
    E1,
    E2,
    E4,
    E5,
    E6,
    E7,
    E8,
    F1,
    G1,
    OFF_BOARD,
    Square,
)


class TestSimpleMoves:
    def test_double_step_opens_window(self) -> None:
        board = Board.initial()
        result = commit_move(board, 12, E2, E4)
        assert board[12].square == E4
        assert board[12].has_moved
        assert result.board is board
        assert result.en_passant == EnPassantWindow(Square(4, 2), 12)
        assert result.captured_index is None

    def test_single_step_clears_window(self) -> None:
        board = Board.initial()
        window = commit_move(board, 12, E2, E4).en_passant
        result = commit_move(board, 20, E7, E6, window)
        assert result.en_passant is None

    def test_unused_window_cleared_by_any_move(self) -> None:
        board = Board.initial()
        window = commit_move(board, 12, E2, E4).en_passant
        result = commit_move(board, 30, Square(6, 7), Square(5, 5), window)
        assert result.en_passant is None

    def test_invalid_index_changes_nothing(self) -> None:
        board = Board.initial()
        result = commit_move(board, 50, E2, E4)
        assert board == Board.initial()
        assert result.en_passant is None


class TestCapture:
    def test_enemy_marked_captured(self) -> None:
        board = Board.from_placement("4k3/8/8/3p4/4P3/8/8/4K3")
        victim = board.piece_at(D5)
        mover = board.piece_at(E4)
        result = commit_move(board, mover, E4, D5)
        assert result.captured_index == victim
        assert board[victim].state == PieceState.CAPTURED
        assert board[victim].square == OFF_BOARD
        assert board.piece_at(D5) == mover


class TestCastling:
    CASTLE_READY = "r3k2r/8/8/8/8/8/8/R3K2R"

    def test_white_kingside(self) -> None:
        board = Board.from_placement(self.CASTLE_READY)
        result = commit_move(board, 4, E1, G1)
        assert board[4].square == G1
        assert board[5].square == F1
        assert board[5].has_moved
        assert result.rook_index == 5

    def test_white_queenside(self) -> None:
        board = Board.from_placement(self.CASTLE_READY)
        result = commit_move(board, 4, E1, C1)
        assert board[4].square == C1
        assert board[3].square == D1
        assert result.rook_index == 3

    def test_black_queenside(self) -> None:
        board = Board.from_placement(self.CASTLE_READY)
        commit_move(board, 1, E8, C8)
        assert board[1].square == C8
        assert board[0].square == D8
        assert board[0].has_moved

    def test_ordinary_king_step_leaves_rooks(self) -> None:
        board = Board.from_placement(self.CASTLE_READY)
        result = commit_move(board, 4, E1, F1)
        assert result.rook_index is None
        assert board[5].square == Square(7, 0)
        assert not board[5].has_moved


class TestEnPassant:
    def test_victim_removed(self) -> None:
        board = Board.from_placement("4k3/3p4/8/4P3/8/8/8/4K3")
        black_pawn = board.piece_at(D7)
        white_pawn = board.piece_at(E5)
        window = commit_move(board, black_pawn, D7, D5).en_passant
        assert window == EnPassantWindow(D6, black_pawn)

        result = commit_move(board, white_pawn, E5, D6, window)
        assert result.captured_index == black_pawn
        assert not board[black_pawn].is_alive
        assert board[white_pawn].square == D6
        assert result.en_passant is None

    def test_eligibility_expires(self) -> None:
        board = Board.from_placement("4k3/3p4/8/4P3/8/8/8/4K3")
        white_pawn = board.piece_at(E5)
        window = commit_move(board, board.piece_at(D7), D7, D5).en_passant
        assert D6 in pseudo_legal_moves(board, white_pawn, window)

        window = commit_move(board, board.piece_at(E1), E1, E2, window).en_passant
        window = commit_move(board, board.piece_at(E8), E8, E7, window).en_passant
        assert D6 not in pseudo_legal_moves(board, white_pawn, window)


class TestPromotion:
    def test_white_auto_queen(self) -> None:
        board = Board.from_placement("4k3/P7/8/8/8/8/8/4K3")
        pawn = board.piece_at(A7)
        result = commit_move(board, pawn, A7, A8)
        assert result.promoted
        assert board[pawn].piece_type == PieceType.QUEEN

    def test_promoted_piece_moves_like_queen(self) -> None:
        board = Board.from_placement("4k3/P7/8/8/8/8/8/4K3")
        pawn = board.piece_at(A7)
        commit_move(board, pawn, A7, A8)
        expected = {B8, C8, D8, E8}
        expected |= {Square(0, r) for r in range(7)}
        expected |= {Square(i, 7 - i) for i in range(1, 8)}
        assert set(legal_moves(board, pawn)) == expected

    def test_black_auto_queen(self) -> None:
        board = Board.from_placement("4k3/8/8/8/8/8/p7/4K3")
        pawn = board.piece_at(A2)
        commit_move(board, pawn, A2, A1)
        assert board[pawn].piece_type == PieceType.QUEEN

    def test_configured_piece(self) -> None:
        board = Board.from_placement("4k3/P7/8/8/8/8/8/4K3")
        pawn = board.piece_at(A7)
        commit_move(board, pawn, A7, A8, promote_to=PieceType.ROOK)
        assert board[pawn].piece_type == PieceType.ROOK

    def test_no_promotion_short_of_last_rank(self) -> None:
        board = Board.initial()
        result = commit_move(board, 12, E2, E4)
        assert not result.promoted
        assert board[12].piece_type == PieceType.PAWN
