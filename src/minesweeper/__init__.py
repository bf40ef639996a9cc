"""
Minesweeper game module.

Provides the board engine, the console game loop and a Gymnasium
environment over the board.
"""
from .cell import CellState, CellValue
from .board import (
    Board,
    BoardConfig,
    BoardView,
    FlagResult,
    InvalidConfigurationError,
    PlacementExhaustedError,
    UncoverResult,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
)
from .console import Console, format_grid
from .game import EndGameState, GameResult, GameSession, Operation
from .environment import MinesweeperEnv

__all__ = [
    "CellState",
    "CellValue",
    "Board",
    "BoardConfig",
    "BoardView",
    "FlagResult",
    "InvalidConfigurationError",
    "PlacementExhaustedError",
    "UncoverResult",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "Console",
    "format_grid",
    "EndGameState",
    "GameResult",
    "GameSession",
    "Operation",
    "MinesweeperEnv",
]
