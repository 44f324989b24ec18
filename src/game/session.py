"""
Game session for Minesweeper.

Owns one grid for the duration of a game and drives the playing/won/lost
state machine, the tick-based elapsed-time clock and result reporting.
"""
import logging
import random
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum, auto
from typing import Callable, List, Optional, Protocol

from .cell import Cell
from .grid import Grid, RandomSource
from .modes import GameMode, ModeId
from .reveal import check_win, flood_reveal, reveal_all_mines

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


WIN_TITLE = "You Win!"
WIN_MESSAGE = "Nice work."
LOSS_TITLE = "Game Over"
LOSS_MESSAGE = "You hit a mine."


def _now() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================================
# Collaborator Interfaces
# ============================================================================

class GameRecorder(Protocol):
    """Receives finished games, e.g. scoreboard.StatsStore."""

    def record_game(self, mode_id: ModeId, did_win: bool, duration_seconds: int) -> None:
        ...


@dataclass(frozen=True)
class GameResult:
    """Outcome of a finished game, handed to result listeners."""

    mode_id: ModeId
    did_win: bool
    duration_seconds: int
    title: str
    message: str


ResultListener = Callable[[GameResult], None]


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    A single game of Minesweeper from first click to win or loss.

    All board mutation goes through ``reveal`` and ``toggle_flag``; callers
    read ``cells``, ``status`` and ``elapsed_seconds`` after each call.
    Invalid requests (finished game, revealed or flagged cell, index off
    the grid) are ignored without raising.
    """

    def __init__(
        self,
        mode: GameMode,
        recorder: GameRecorder,
        rng: Optional[RandomSource] = None,
        clock: Callable[[], datetime] = _now,
    ) -> None:
        """
        Initialize a session in the playing state.

        Args:
            mode: Board configuration and stats bucket.
            recorder: Receives the outcome of every finished game.
            rng: Random source for mine placement, shared across games.
            clock: Returns the current time for start/end timestamps.
        """
        self._recorder = recorder
        self._rng = rng or random.Random()
        self._clock = clock
        self._listeners: List[ResultListener] = []
        self._active = True
        self.mode = mode
        self._reset()

    def _reset(self) -> None:
        config = self.mode.config
        self._grid = Grid(config.rows, config.cols, config.mines)
        self._status = GameStatus.PLAYING
        self._started_at = self._clock()
        self._ended_at: Optional[datetime] = None
        self._elapsed_seconds = 0
        self._has_started = False
        self.show_result = False
        self.result_title = ""
        self.result_message = ""

    def start_new_game(self, mode: Optional[GameMode] = None) -> None:
        """Discard the current board and timer and start over, optionally in a new mode."""
        if mode is not None:
            self.mode = mode
        self._reset()
        logger.debug("Started new %s game", self.mode.mode_id.value)

    def add_result_listener(self, listener: ResultListener) -> None:
        """Register a callback invoked once per finished game."""
        self._listeners.append(listener)

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, index: int) -> None:
        """
        Reveal a cell.

        The first reveal starts the clock and places mines, keeping the
        clicked cell safe. A mine ends the game as lost; otherwise the
        surrounding empty region is opened and the win condition checked.
        """
        if not self._can_reveal(index):
            return

        if not self._has_started:
            self._has_started = True
            self._started_at = self._clock()

        if not self._grid.has_placed_mines:
            self._grid.place_mines(index, self._rng)

        if self._grid.cells[index].is_mine:
            reveal_all_mines(self._grid)
            self._end_game(did_win=False)
            return

        flood_reveal(self._grid, index)
        if self.check_win():
            self._end_game(did_win=True)

    def _can_reveal(self, index: int) -> bool:
        if self._status != GameStatus.PLAYING:
            return False
        if not self._grid.contains(index):
            return False
        cell = self._grid.cells[index]
        return not cell.is_revealed and not cell.is_flagged

    def toggle_flag(self, index: int) -> None:
        """Flag or unflag a hidden cell. Never places mines or ends the game."""
        if self._status != GameStatus.PLAYING:
            return
        if not self._grid.contains(index):
            return
        cell = self._grid.cells[index]
        if cell.is_revealed:
            return
        cell.is_flagged = not cell.is_flagged

    def check_win(self) -> bool:
        """Check if all non-mine cells are revealed."""
        return check_win(self._grid)

    def _end_game(self, did_win: bool) -> None:
        self._status = GameStatus.WON if did_win else GameStatus.LOST
        self._ended_at = self._clock()
        duration = max(1, self._elapsed_seconds)

        if did_win:
            self.result_title = WIN_TITLE
            self.result_message = WIN_MESSAGE
        else:
            self.result_title = LOSS_TITLE
            self.result_message = LOSS_MESSAGE
        self.show_result = True

        self._recorder.record_game(self.mode.mode_id, did_win, duration)

        logger.info(
            "%s game %s after %ds",
            self.mode.mode_id.value,
            "won" if did_win else "lost",
            duration,
        )

        result = GameResult(
            mode_id=self.mode.mode_id,
            did_win=did_win,
            duration_seconds=duration,
            title=self.result_title,
            message=self.result_message,
        )
        for listener in self._listeners:
            listener(result)

    # ========================================================================
    # Clock
    # ========================================================================

    def set_active(self, active: bool) -> None:
        """
        Signal whether the host application is in the foreground.

        The clock only counts while the game is playing, has started and
        the session is active. Time spent inactive is not credited back.
        """
        self._active = active

    def tick(self) -> None:
        """Advance elapsed time by one second if the clock is running."""
        if self.is_clock_running:
            self._elapsed_seconds += 1

    @property
    def is_clock_running(self) -> bool:
        return (
            self._status == GameStatus.PLAYING
            and self._has_started
            and self._active
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_playing(self) -> bool:
        return self._status == GameStatus.PLAYING

    @property
    def is_won(self) -> bool:
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        return self._status == GameStatus.LOST

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def has_started(self) -> bool:
        return self._has_started

    @property
    def started_at(self) -> datetime:
        return self._started_at

    @property
    def ended_at(self) -> Optional[datetime]:
        return self._ended_at

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed_seconds

    @property
    def mode_title(self) -> str:
        return self.mode.title

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def cells(self) -> List[Cell]:
        return self._grid.cells
