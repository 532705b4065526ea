import logging

from PySide6.QtCore import QObject, Signal, Slot

from .game_logic import GameEngine, CellTapped, ResetRequested

logger = logging.getLogger(__name__)


class GameController(QObject):
    """
    qt front for a GameEngine: slots in, state_changed out
    """
    state_changed = Signal(object)     # emits the new GameState

    def __init__(self, engine=None, parent=None):
        super().__init__(parent)
        self.engine = engine if engine is not None else GameEngine()
        self._unsubscribe = self.engine.subscribe(self.state_changed.emit)

    @property
    def state(self):
        return self.engine.state

    @property
    def board(self):
        return self.engine.board

    @Slot(int)
    def tap_cell(self, position):
        # clicks come from the board widget, always 1..9
        self.engine.dispatch(CellTapped(position))

    @Slot()
    def play_again(self):
        self.engine.dispatch(ResetRequested())

    def detach(self):
        """
        stop forwarding engine updates
        """
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
            logger.debug("controller detached from engine")
