"""
Self-playing support for Minesweeper sessions.

A baseline random player used by the command-line demo and tests to drive
whole games through the public session API.
"""
from typing import Optional

import numpy as np

from .cell import HIDDEN_CODE
from .session import GameSession


# ============================================================================
# Random Player
# ============================================================================

class RandomPlayer:
    """
    Player that reveals hidden cells uniformly at random.

    It never flags, so it only stops when the game is won or lost.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Initialize the random player.

        Args:
            seed: Random seed for reproducibility.
        """
        self.rng = np.random.default_rng(seed)

    def select_index(self, observation: np.ndarray) -> Optional[int]:
        """
        Pick a hidden cell.

        Args:
            observation: 2D array of cell codes from ``Grid.get_observation``.

        Returns:
            Flat index of a hidden cell, or None if none are left.
        """
        hidden = np.flatnonzero(observation.ravel() == HIDDEN_CODE)
        if len(hidden) == 0:
            return None
        return int(self.rng.choice(hidden))


def play_game(session: GameSession, player: RandomPlayer) -> int:
    """
    Play the session until it ends, one clock tick per move.

    Args:
        session: A freshly started session.
        player: Chooses each cell to reveal.

    Returns:
        Number of moves made.
    """
    moves = 0
    while session.is_playing:
        index = player.select_index(session.grid.get_observation())
        if index is None:
            break
        session.reveal(index)
        session.tick()
        moves += 1
    return moves
