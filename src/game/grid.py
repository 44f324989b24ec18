"""
Grid module for Minesweeper game.

Implements the rectangular cell grid with neighbor geometry, one-shot
mine placement around a safe origin, and adjacency counting.
"""
import random
from typing import List, Optional, Protocol, Sequence, Tuple

import numpy as np

from .cell import Cell


# ============================================================================
# Random Source
# ============================================================================

class RandomSource(Protocol):
    """Anything that can sample without replacement, e.g. random.Random."""

    def sample(self, population: Sequence[int], k: int) -> List[int]:
        ...


# ============================================================================
# Grid Class
# ============================================================================

class Grid:
    """
    Minesweeper cell grid.

    Cells are stored in a flat row-major list, so ``index = row * cols + col``.
    Shape and mine count are fixed at construction; only cell contents and
    ``has_placed_mines`` change afterwards.
    """

    def __init__(self, rows: int, cols: int, mine_count: int) -> None:
        """
        Create an empty grid with no mines placed yet.

        Args:
            rows: Number of rows (at least 1).
            cols: Number of columns (at least 1).
            mine_count: Mines to place on first reveal, strictly between
                zero and the number of cells.

        Raises:
            ValueError: If the shape or mine count is invalid.
        """
        if rows < 1 or cols < 1:
            raise ValueError("Grid dimensions must be positive")
        if mine_count < 1:
            raise ValueError("Mine count must be at least 1")
        if mine_count >= rows * cols:
            raise ValueError(f"Too many mines (max {rows * cols - 1})")

        self._rows = rows
        self._cols = cols
        self._mine_count = mine_count
        self.cells: List[Cell] = [Cell(index) for index in range(rows * cols)]
        self.has_placed_mines = False

    def __repr__(self) -> str:
        return (
            f"Grid(rows={self._rows}, cols={self._cols}, "
            f"mine_count={self._mine_count}, "
            f"has_placed_mines={self.has_placed_mines})"
        )

    # ========================================================================
    # Shape (Low-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def mine_count(self) -> int:
        return self._mine_count

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self._rows * self._cols

    def index(self, row: int, col: int) -> int:
        """Convert (row, col) to a flat index."""
        return row * self._cols + col

    def row_col(self, index: int) -> Tuple[int, int]:
        """Convert a flat index to (row, col)."""
        return index // self._cols, index % self._cols

    def contains(self, index: int) -> bool:
        """Check if index addresses a cell of this grid."""
        return 0 <= index < self.size

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, index: int) -> List[int]:
        """
        Get indices of the cells surrounding ``index``.

        Returns between 3 and 8 indices depending on how close the cell is
        to the grid edges (fewer on degenerate 1-wide grids).
        """
        row, col = self.row_col(index)
        result = []
        for neighbor_row in range(max(0, row - 1), min(self._rows, row + 2)):
            for neighbor_col in range(max(0, col - 1), min(self._cols, col + 2)):
                if neighbor_row == row and neighbor_col == col:
                    continue
                result.append(self.index(neighbor_row, neighbor_col))
        return result

    def count_adjacent_mines(self, index: int) -> int:
        """Count mines in the neighbor set of ``index``."""
        return sum(1 for neighbor in self.neighbors(index) if self.cells[neighbor].is_mine)

    # ========================================================================
    # Mine Placement (Mid-level)
    # ========================================================================

    def place_mines(self, safe_index: int, rng: Optional[RandomSource] = None) -> None:
        """
        Seed mines uniformly at random, keeping ``safe_index`` mine-free.

        May only run once per grid.

        Args:
            safe_index: Cell guaranteed not to receive a mine.
            rng: Random source; defaults to a fresh ``random.Random``.

        Raises:
            RuntimeError: If mines were already placed on this grid.
        """
        if self.has_placed_mines:
            raise RuntimeError("Mines have already been placed on this grid")

        rng = rng or random.Random()
        candidates = [index for index in range(self.size) if index != safe_index]
        count = min(self._mine_count, len(candidates))
        for index in rng.sample(candidates, count):
            self.cells[index].is_mine = True

        self._calculate_adjacent_mines()
        self.has_placed_mines = True

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for cell in self.cells:
            cell.adjacent_mines = self.count_adjacent_mines(cell.index)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def mine_indices(self) -> List[int]:
        """Indices of every mine on the grid."""
        return [cell.index for cell in self.cells if cell.is_mine]

    def mine_mask(self) -> np.ndarray:
        """Boolean (rows, cols) array, True where a mine sits."""
        mask = np.array([cell.is_mine for cell in self.cells], dtype=bool)
        return mask.reshape(self._rows, self._cols)

    def get_observation(self) -> np.ndarray:
        """
        Get the visible grid as a numpy array.

        Returns:
            int8 array of shape (rows, cols) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.array([cell.to_observation() for cell in self.cells], dtype=np.int8)
        return obs.reshape(self._rows, self._cols)
