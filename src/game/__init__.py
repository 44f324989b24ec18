"""
Minesweeper game module.

Provides the core rules: grid and cell state, mine placement,
the reveal engine, game modes and the game session state machine.
"""
from .cell import Cell
from .grid import Grid, RandomSource
from .modes import (
    BoardConfig,
    GameMode,
    ModeId,
    EASY,
    MEDIUM,
    HARD,
    clamp_custom_config,
    max_custom_mines,
)
from .reveal import check_win, flood_reveal, reveal_all_mines
from .session import GameResult, GameSession, GameStatus, GameRecorder

__all__ = [
    "Cell",
    "Grid",
    "RandomSource",
    "BoardConfig",
    "GameMode",
    "ModeId",
    "EASY",
    "MEDIUM",
    "HARD",
    "clamp_custom_config",
    "max_custom_mines",
    "check_win",
    "flood_reveal",
    "reveal_all_mines",
    "GameResult",
    "GameSession",
    "GameStatus",
    "GameRecorder",
]
