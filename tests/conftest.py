"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Sequence

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from game import EASY, GameMode, GameSession, Grid, ModeId
from scoreboard import StatsStore


# ============================================================================
# Test Doubles
# ============================================================================

class FixedMines:
    """Random source that always picks the given indices."""

    def __init__(self, mines: Sequence[int]) -> None:
        self.mines = list(mines)
        self.calls = 0

    def sample(self, population: Sequence[int], k: int) -> List[int]:
        self.calls += 1
        chosen = [index for index in self.mines if index in population]
        return chosen[:k]


class RecordingRecorder:
    """Collects record_game calls instead of persisting them."""

    def __init__(self) -> None:
        self.games = []

    def record_game(self, mode_id: ModeId, did_win: bool, duration_seconds: int) -> None:
        self.games.append((mode_id, did_win, duration_seconds))


class SteppingClock:
    """Clock that advances by a fixed step every time it is read."""

    def __init__(self, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now += self.step
        return current


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def easy_grid() -> Grid:
    """Create an empty 9x9 grid with 10 mines."""
    return Grid(9, 9, 10)


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def recorder() -> RecordingRecorder:
    return RecordingRecorder()


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def easy_session(recorder: RecordingRecorder, seeded_rng: random.Random) -> GameSession:
    """Easy session reporting into a recording double."""
    return GameSession(EASY, recorder, rng=seeded_rng)


@pytest.fixture
def corner_mine_session(recorder: RecordingRecorder, clock: SteppingClock) -> GameSession:
    """
    3x3 custom session whose single mine lands in the top-left corner.

    Layout after placement (M = mine):
        M 1 0
        1 1 0
        0 0 0
    """
    mode = GameMode.custom(3, 3, 1)
    return GameSession(mode, recorder, rng=FixedMines([0]), clock=clock)


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def stats_path(tmp_path: Path) -> Path:
    return tmp_path / "stats" / "stats.json"


@pytest.fixture
def store(stats_path: Path, clock: SteppingClock) -> StatsStore:
    """Stats store writing into a temporary directory."""
    return StatsStore(stats_path, clock=clock)
