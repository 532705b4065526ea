"""Tests for the Qt controller signals.

Only QtCore objects are exercised, so no display is needed.
"""

import pytest

QtCore = pytest.importorskip("PySide6.QtCore")

from tictactoe.controller import GameController
from tictactoe.game_logic import GameEngine, CellValue, VictoryLine


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(scope="module")
def qt_app():
    app = QtCore.QCoreApplication.instance()
    if app is None:
        app = QtCore.QCoreApplication([])
    return app


@pytest.fixture
def controller(qt_app) -> GameController:
    ctrl = GameController()
    yield ctrl
    ctrl.detach()


# =============================================================================
# GameController
# =============================================================================


class TestGameController:
    """Slots drive the engine, the signal carries the state."""

    def test_tap_cell_emits_state(self, controller: GameController):
        received = []
        controller.state_changed.connect(received.append)

        controller.tap_cell(5)

        assert len(received) == 1
        assert received[0] is controller.state
        assert controller.board[5] is CellValue.CIRCLE

    def test_ignored_tap_emits_nothing(self, controller: GameController):
        controller.tap_cell(5)
        received = []
        controller.state_changed.connect(received.append)

        controller.tap_cell(5)

        assert received == []

    def test_play_again_resets_board(self, controller: GameController):
        for pos in (1, 4, 2, 5, 3):
            controller.tap_cell(pos)
        assert controller.state.victory_line is VictoryLine.ROW1

        controller.play_again()

        assert controller.state.current_turn is CellValue.CIRCLE
        assert controller.state.circle_wins == 1
        assert all(v is CellValue.EMPTY for v in controller.board.values())

    def test_wraps_given_engine(self, qt_app):
        engine = GameEngine()
        ctrl = GameController(engine)
        ctrl.tap_cell(1)

        assert engine.cell(1) is CellValue.CIRCLE
        ctrl.detach()

    def test_detach_stops_signal(self, controller: GameController):
        received = []
        controller.state_changed.connect(received.append)
        controller.detach()

        controller.tap_cell(1)

        assert received == []
        assert controller.board[1] is CellValue.CIRCLE
