"""GameSession - the in-process facade a front end drives.

Owns one :class:`GameState`, tracks whose turn it is, validates moves
before committing them, and notifies listeners via simple callbacks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from kingside.core.board import Board
from kingside.core.enums import Color, GameStatus
from kingside.core.executor import CommitResult, commit_move
from kingside.core.legality import legal_moves, would_be_legal_move
from kingside.core.move_generator import pseudo_legal_moves
from kingside.core.notation import piece_index_for_standard_square
from kingside.core.rules import Rules
from kingside.core.state import EnPassantWindow, GameState, setup_standard_game
from kingside.core.types import Square, square_name
from kingside.game.config import RulesConfig

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[int, Square, Square, CommitResult], None]  # index, from, to
CheckCallback = Callable[[Color, bool], None]  # color, in check
GameOverCallback = Callable[[GameStatus, Color | None], None]  # status, winner
ResetCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_check_changed: list[CheckCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """One two-player game.

    Every query is recomputed from the current state; nothing is cached
    except the last reported check flags and status, which exist only to
    detect transitions worth announcing.
    """

    __slots__ = (
        "_config",
        "_state",
        "_status",
        "_in_check",
        "_last_selection",
        "events",
    )

    def __init__(self, config: RulesConfig | None = None) -> None:
        self._config = config if config is not None else RulesConfig()
        self._state = setup_standard_game()
        self._status = GameStatus.IN_PROGRESS
        self._in_check: dict[Color, bool] = {Color.WHITE: False, Color.BLACK: False}
        self._last_selection: dict[Color, int] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def config(self) -> RulesConfig:
        return self._config

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    @property
    def en_passant(self) -> EnPassantWindow | None:
        return self._state.en_passant

    @property
    def status(self) -> GameStatus:
        """Status of the side to move after the last commit."""
        return self._status

    @property
    def is_game_over(self) -> bool:
        return self._status.is_terminal

    @property
    def winner(self) -> Color | None:
        if self._status == GameStatus.CHECKMATE:
            return self.side_to_move.opposite
        return None

    # ── Setup ────────────────────────────────────────────────────────────

    def new_game(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        en_passant: EnPassantWindow | None = None,
    ) -> None:
        """Reset to the standard layout, or to *board* when given."""
        if board is None:
            board = Board.initial()
        self._state = GameState(board, en_passant, side_to_move)
        self._last_selection = {}
        self._in_check = {
            color: Rules.is_in_check(self.board, color) for color in Color
        }
        self._status = self.status_of(self.side_to_move)
        _LOGGER.info(
            "New game: %d pieces, %s to move", len(self.board), self.side_to_move
        )
        for cb in self.events.on_reset:
            cb()
        if self._status.is_terminal:
            self._announce_game_over()

    # ── Queries ──────────────────────────────────────────────────────────

    def pseudo_legal_moves(self, index: int) -> list[Square]:
        return pseudo_legal_moves(self.board, index, self.en_passant)

    def legal_moves(self, index: int) -> list[Square]:
        return legal_moves(
            self.board,
            index,
            self.en_passant,
            castling_checks_destination=self._config.castling_checks_destination,
        )

    def is_legal(self, index: int, from_sq: Square, to_sq: Square) -> bool:
        return would_be_legal_move(
            self.board,
            index,
            from_sq,
            to_sq,
            self.en_passant,
            castling_checks_destination=self._config.castling_checks_destination,
        )

    def is_in_check(self, color: Color) -> bool:
        return Rules.is_in_check(self.board, color)

    def is_checkmate(self, color: Color) -> bool:
        return Rules.is_checkmate(
            self.board,
            color,
            self.en_passant,
            castling_checks_destination=self._config.castling_checks_destination,
        )

    def is_stalemate(self, color: Color) -> bool:
        return Rules.is_stalemate(
            self.board,
            color,
            self.en_passant,
            castling_checks_destination=self._config.castling_checks_destination,
        )

    def status_of(self, color: Color) -> GameStatus:
        return Rules.status(
            self.board,
            color,
            self.en_passant,
            castling_checks_destination=self._config.castling_checks_destination,
        )

    def piece_at(self, sq: Square) -> int | None:
        return self.board.piece_at(sq)

    def default_selection(self, color: Color) -> int | None:
        """Piece to highlight when *color*'s turn begins.

        The last piece *color* moved if it is still in play, otherwise the
        standard-layout a-file pawn of that side.
        """
        last = self._last_selection.get(color)
        if last is not None:
            piece = self.board.get(last)
            if piece is not None and piece.is_alive:
                return last
        pawn_rank = color.home_rank + color.forward
        return piece_index_for_standard_square(Square(0, pawn_rank))

    # ── Commands ─────────────────────────────────────────────────────────

    def submit_move(self, index: int, from_sq: Square, to_sq: Square) -> bool:
        """Validate and commit a move. Returns True if legal and applied."""
        reason = self.rejection_reason(index, from_sq, to_sq)
        if reason is not None:
            _LOGGER.debug(
                "Rejected move of piece %d %s-%s: %s",
                index,
                square_name(from_sq),
                square_name(to_sq),
                reason,
            )
            return False
        self.commit_move(index, from_sq, to_sq)
        return True

    def rejection_reason(
        self, index: int, from_sq: Square, to_sq: Square
    ) -> str | None:
        """Why :meth:`submit_move` would refuse this move, or None if it would not."""
        if self.is_game_over:
            return "game is over"
        piece = self.board.get(index)
        if piece is None:
            return "no such piece"
        if not piece.is_alive:
            return "piece has been captured"
        if piece.color != self.side_to_move:
            return f"not {piece.color.name.lower()}'s turn"
        if piece.square != from_sq:
            return "piece is not on the start square"
        if not self.is_legal(index, from_sq, to_sq):
            return "illegal move"
        return None

    def commit_move(self, index: int, from_sq: Square, to_sq: Square) -> CommitResult:
        """Commit without validation, then hand the turn to the opponent.

        The caller is responsible for legality; see :meth:`submit_move`.
        """
        state = self._state
        result = commit_move(
            state.board,
            index,
            from_sq,
            to_sq,
            state.en_passant,
            promote_to=self._config.auto_promote_to,
        )
        state.en_passant = result.en_passant

        mover = state.board.get(index)
        if mover is None:
            return result

        state.side_to_move = mover.color.opposite
        self._last_selection[mover.color] = index

        _LOGGER.info(
            "%s %s %s-%s",
            mover.color,
            mover.piece_type.name.lower(),
            square_name(from_sq),
            square_name(to_sq),
        )
        if result.promoted:
            _LOGGER.info(
                "Pawn promoted to %s on %s",
                mover.piece_type.name.lower(),
                square_name(to_sq),
            )

        for cb in self.events.on_move:
            cb(index, from_sq, to_sq, result)

        self._refresh_status()
        return result

    # ── Internals ────────────────────────────────────────────────────────

    def _refresh_status(self) -> None:
        for color in Color:
            in_check = self.is_in_check(color)
            if in_check == self._in_check[color]:
                continue
            self._in_check[color] = in_check
            if in_check:
                _LOGGER.info("%s king is now in check", str(color).capitalize())
            else:
                _LOGGER.info("%s king is no longer in check", str(color).capitalize())
            for cb in self.events.on_check_changed:
                cb(color, in_check)

        self._status = self.status_of(self.side_to_move)
        if self._status.is_terminal:
            self._announce_game_over()

    def _announce_game_over(self) -> None:
        winner = self.winner
        if winner is not None:
            _LOGGER.info("Checkmate: %s wins", winner)
        else:
            _LOGGER.info("Stalemate: %s has no legal move", self.side_to_move)
        for cb in self.events.on_game_over:
            cb(self._status, winner)
