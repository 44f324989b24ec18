"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their flat index,
content (mine/number) and visibility flags (revealed/flagged).
"""
from dataclasses import dataclass


# ============================================================================
# Observation Codes
# ============================================================================

HIDDEN_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        index: Flat row-major position of the cell.
        is_mine: Whether this cell contains a mine.
        is_revealed: Whether the cell has been uncovered.
        is_flagged: Whether the player marked the cell as a suspected mine.
        adjacent_mines: Count of mines in neighboring cells (0-8). Only
            meaningful once the owning grid has placed its mines.
    """

    index: int
    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    adjacent_mines: int = 0

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return not self.is_revealed and not self.is_flagged

    def to_observation(self) -> int:
        """
        Convert cell to an integer code for numeric consumers.

        Returns:
            -1: Hidden cell
            -2: Flagged cell (not revealed)
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.is_revealed:
            return MINE_CODE if self.is_mine else self.adjacent_mines
        if self.is_flagged:
            return FLAGGED_CODE
        return HIDDEN_CODE
