"""Tests for the Qt game bridge."""

from __future__ import annotations

import pytest
from PyQt6.QtTest import QSignalSpy

from kingside.core.board import Board
from kingside.core.enums import Color, GameStatus
from kingside.core.types import E2, E4
from kingside.game.session import GameSession
from kingside.qt.bridge import GameBridge


@pytest.fixture
def bridge(qapp: object) -> GameBridge:
    del qapp
    return GameBridge()


class TestGameBridge:
    def test_submit_legal_move(self, bridge: GameBridge) -> None:
        committed = QSignalSpy(bridge.move_committed)
        rejected = QSignalSpy(bridge.move_rejected)

        assert bridge.submit_move(12, "e2", "e4")

        assert len(committed) == 1
        assert committed[0][0] == 12
        assert committed[0][1] == E2
        assert committed[0][2] == E4
        assert len(rejected) == 0
        assert bridge.session.side_to_move == Color.BLACK

    def test_submit_out_of_turn(self, bridge: GameBridge) -> None:
        committed = QSignalSpy(bridge.move_committed)
        rejected = QSignalSpy(bridge.move_rejected)

        assert not bridge.submit_move(20, "e7", "e5")

        assert len(committed) == 0
        assert len(rejected) == 1
        assert rejected[0][0] == 20
        assert rejected[0][1] == "not black's turn"

    def test_submit_illegal_move(self, bridge: GameBridge) -> None:
        rejected = QSignalSpy(bridge.move_rejected)
        assert not bridge.submit_move(12, "e2", "e5")
        assert rejected[0][1] == "illegal move"

    def test_legal_targets(self, bridge: GameBridge) -> None:
        assert bridge.legal_targets(12) == ["e3", "e4"]
        assert sorted(bridge.legal_targets(1)) == ["a3", "c3"]
        assert bridge.legal_targets(99) == []

    def test_new_game_resets(self, bridge: GameBridge) -> None:
        reset = QSignalSpy(bridge.board_reset)
        bridge.submit_move(12, "e2", "e4")

        bridge.new_game()

        assert len(reset) == 1
        assert bridge.session.board == Board.initial()
        assert bridge.session.side_to_move == Color.WHITE

    def test_fools_mate_signals(self, bridge: GameBridge) -> None:
        checks = QSignalSpy(bridge.check_changed)
        over = QSignalSpy(bridge.game_over)

        for idx, frm, to in (
            (13, "f2", "f3"),
            (20, "e7", "e5"),
            (14, "g2", "g4"),
            (27, "d8", "h4"),
        ):
            assert bridge.submit_move(idx, frm, to)

        assert len(checks) == 1
        assert checks[0][0] == int(Color.WHITE)
        assert checks[0][1] is True
        assert len(over) == 1
        assert over[0][0] == int(GameStatus.CHECKMATE)
        assert over[0][1] == Color.BLACK

    def test_wraps_existing_session(self, qapp: object) -> None:
        del qapp
        session = GameSession()
        bridge = GameBridge(session)
        committed = QSignalSpy(bridge.move_committed)

        session.submit_move(12, E2, E4)

        assert bridge.session is session
        assert len(committed) == 1
