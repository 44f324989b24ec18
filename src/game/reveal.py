"""
Reveal engine for Minesweeper game.

Stateless operations over a Grid: flood reveal of zero-adjacency regions,
exposing every mine after a loss, and the win check.
"""
from typing import List

from .grid import Grid


def flood_reveal(grid: Grid, index: int) -> int:
    """
    Reveal ``index`` and, while empty cells are found, their neighbors.

    Uses an explicit worklist so large open regions do not hit the
    recursion limit. Flagged cells are never revealed.

    Args:
        grid: Grid whose mines have already been placed.
        index: Cell to start from.

    Returns:
        Number of cells newly revealed.
    """
    revealed = 0
    worklist: List[int] = [index]
    while worklist:
        current = grid.cells[worklist.pop()]
        if current.is_revealed or current.is_flagged:
            continue
        current.is_revealed = True
        revealed += 1
        if current.adjacent_mines == 0:
            for neighbor in grid.neighbors(current.index):
                cell = grid.cells[neighbor]
                if not cell.is_revealed and not cell.is_flagged:
                    worklist.append(neighbor)
    return revealed


def reveal_all_mines(grid: Grid) -> None:
    """Reveal every mine, flagged ones included. Non-mine cells are untouched."""
    for cell in grid.cells:
        if cell.is_mine:
            cell.is_revealed = True


def check_win(grid: Grid) -> bool:
    """True when every non-mine cell is revealed; mine state is irrelevant."""
    return all(cell.is_mine or cell.is_revealed for cell in grid.cells)
