"""Qt bridge exposing a GameSession through signals and slots."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from kingside.core.enums import Color, GameStatus
from kingside.core.executor import CommitResult
from kingside.core.notation import square_from_algebraic, square_to_algebraic
from kingside.core.types import Square
from kingside.game.session import GameSession


class GameBridge(QObject):
    """Main-thread adapter between a rendering/input layer and the engine.

    The front end polls :attr:`session` for drawing and calls the slots to
    act; it never writes engine state directly.
    """

    move_committed = pyqtSignal(int, object, object)
    move_rejected = pyqtSignal(int, str)
    check_changed = pyqtSignal(int, bool)
    game_over = pyqtSignal(int, object)
    board_reset = pyqtSignal()

    def __init__(
        self,
        session: GameSession | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._session = session if session is not None else GameSession()
        events = self._session.events
        events.on_move.append(self._on_move)
        events.on_check_changed.append(self._on_check_changed)
        events.on_game_over.append(self._on_game_over)
        events.on_reset.append(self.board_reset.emit)

    @property
    def session(self) -> GameSession:
        return self._session

    @pyqtSlot()
    def new_game(self) -> None:
        """Reset to the standard starting layout."""
        self._session.new_game()

    @pyqtSlot(int, str, str, result=bool)
    def submit_move(self, index: int, from_text: str, to_text: str) -> bool:
        """Try a move given in square coordinates, e.g. (12, "e2", "e4")."""
        from_sq = square_from_algebraic(from_text)
        to_sq = square_from_algebraic(to_text)
        reason = self._session.rejection_reason(index, from_sq, to_sq)
        if reason is not None:
            self.move_rejected.emit(index, reason)
            return False
        self._session.commit_move(index, from_sq, to_sq)
        return True

    @pyqtSlot(int, result=list)
    def legal_targets(self, index: int) -> list[str]:
        """Legal destinations of piece *index*, for move highlighting."""
        return [square_to_algebraic(sq) for sq in self._session.legal_moves(index)]

    # -- Session callbacks --------------------------------------------------

    def _on_move(
        self, index: int, from_sq: Square, to_sq: Square, result: CommitResult
    ) -> None:
        self.move_committed.emit(index, from_sq, to_sq)

    def _on_check_changed(self, color: Color, in_check: bool) -> None:
        self.check_changed.emit(int(color), in_check)

    def _on_game_over(self, status: GameStatus, winner: Color | None) -> None:
        self.game_over.emit(int(status), winner)
