"""
Tic-tac-toe rules engine with a PySide6 front end.

The engine in game_logic has no Qt dependency; controller and ui wrap it.
"""

from .game_logic import (
    GameEngine,
    GameState,
    CellValue,
    VictoryLine,
    CellTapped,
    ResetRequested,
    InvalidCellError,
)

__version__ = "0.1.0"
__all__ = [
    "GameEngine",
    "GameState",
    "CellValue",
    "VictoryLine",
    "CellTapped",
    "ResetRequested",
    "InvalidCellError",
]
