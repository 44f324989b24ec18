"""
Game modes for Minesweeper.

Defines the fixed difficulty presets, the caller-configured custom mode,
and the stable identifiers used as statistics keys.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

CUSTOM_MIN_ROWS = 8
CUSTOM_MAX_ROWS = 24
CUSTOM_MIN_COLS = 8
CUSTOM_MAX_COLS = 30
CUSTOM_MIN_MINES = 10
CUSTOM_MAX_MINE_PERCENT = 30


class ModeId(str, Enum):
    """Stable mode identifiers, also the keys of the stats file."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    CUSTOM = "custom"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class BoardConfig:
    """
    Board dimensions for a mode.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mines: Total mines to place.
    """

    rows: int
    cols: int
    mines: int


# ============================================================================
# Game Mode
# ============================================================================

@dataclass(frozen=True)
class GameMode:
    """
    A named board configuration and the stats bucket it maps to.

    Use the module-level ``EASY``, ``MEDIUM`` and ``HARD`` presets, or
    ``GameMode.custom`` for caller-chosen dimensions.
    """

    mode_id: ModeId
    config: BoardConfig

    @classmethod
    def custom(cls, rows: int, cols: int, mines: int) -> "GameMode":
        """
        Build a custom mode.

        The custom mine bound is not checked here; use
        ``clamp_custom_config`` on user input first.
        """
        return cls(ModeId.CUSTOM, BoardConfig(rows, cols, mines))

    @classmethod
    def from_id(cls, mode_id: ModeId, custom: Optional[BoardConfig] = None) -> "GameMode":
        """Look up a preset by id; ``custom`` supplies the custom dimensions."""
        mode_id = ModeId(mode_id)
        if mode_id is ModeId.CUSTOM:
            config = custom or DEFAULT_CUSTOM_CONFIG
            return cls(ModeId.CUSTOM, config)
        return PRESETS[mode_id]

    @property
    def title(self) -> str:
        return self.mode_id.display_name


# Preset difficulty levels
EASY = GameMode(ModeId.EASY, BoardConfig(9, 9, 10))
MEDIUM = GameMode(ModeId.MEDIUM, BoardConfig(16, 16, 40))
HARD = GameMode(ModeId.HARD, BoardConfig(16, 30, 99))

PRESETS = {mode.mode_id: mode for mode in (EASY, MEDIUM, HARD)}

DEFAULT_CUSTOM_CONFIG = BoardConfig(12, 18, 40)


# ============================================================================
# Custom Bounds
# ============================================================================

def max_custom_mines(rows: int, cols: int) -> int:
    """Upper mine bound for a custom board: 30% of the cells, at least 10."""
    return max(CUSTOM_MIN_MINES, rows * cols * CUSTOM_MAX_MINE_PERCENT // 100)


def clamp_custom_config(rows: int, cols: int, mines: int) -> BoardConfig:
    """
    Clamp user-entered custom settings into the supported ranges.

    Rows are kept within 8-24, columns within 8-30, and mines within
    10 to ``max_custom_mines(rows, cols)`` of the clamped shape.
    """
    rows = min(max(rows, CUSTOM_MIN_ROWS), CUSTOM_MAX_ROWS)
    cols = min(max(cols, CUSTOM_MIN_COLS), CUSTOM_MAX_COLS)
    mines = min(max(mines, CUSTOM_MIN_MINES), max_custom_mines(rows, cols))
    return BoardConfig(rows, cols, mines)
