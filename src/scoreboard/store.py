"""
Stats store for Minesweeper.

Keeps per-mode and overall aggregates in memory, loads them once on
start-up and writes the full snapshot after every recorded game.
Persistence problems are logged and never reach the caller.
"""
import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from game.modes import ModeId

from .config import StatsConfig
from .models import ModeStats, StatsDecodeError, StatsSnapshot

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class StatsStore:
    """
    Durable statistics for every mode plus an overall aggregate.

    Accessors return immutable ModeStats values, so a reader never sees a
    half-applied update.
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        clock: Callable[[], datetime] = _now,
    ) -> None:
        """
        Initialize the store and load any existing stats file.

        Args:
            path: Stats file location; defaults to ``StatsConfig.from_env()``.
            clock: Returns the time stamped on recorded games.
        """
        self.path = Path(path) if path is not None else StatsConfig.from_env().stats_path
        self._clock = clock
        self._mode_stats: Dict[ModeId, ModeStats] = {}
        self._unknown_mode_stats: Dict[str, ModeStats] = {}
        self._overall = ModeStats()

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            logger.warning("Could not create stats directory %s: %s", self.path.parent, error)

        self._load()

    # ========================================================================
    # Persistence
    # ========================================================================

    def _load(self) -> None:
        """Load the snapshot, falling back to zeroed stats when unusable."""
        snapshot = self._read_snapshot()
        if snapshot is None:
            self._mode_stats = {mode_id: ModeStats() for mode_id in ModeId}
            self._overall = ModeStats()
            return

        self._mode_stats = {
            mode_id: snapshot.mode_stats.get(mode_id.value, ModeStats())
            for mode_id in ModeId
        }
        # Modes from newer versions are kept so the next save does not drop them.
        known = {mode_id.value for mode_id in ModeId}
        self._unknown_mode_stats = {
            key: stats for key, stats in snapshot.mode_stats.items() if key not in known
        }
        self._overall = snapshot.overall

    def _read_snapshot(self) -> Optional[StatsSnapshot]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.debug("No stats file at %s, starting fresh", self.path)
            return None
        except (OSError, ValueError, RecursionError) as error:
            logger.warning("Could not read stats file %s: %s", self.path, error)
            return None

        try:
            return StatsSnapshot.from_dict(data)
        except StatsDecodeError as error:
            logger.warning("Ignoring malformed stats file %s: %s", self.path, error)
            return None

    def _save(self) -> None:
        """Write the full snapshot atomically; failures are logged only."""
        data = self.snapshot().to_dict()
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_path = f.name
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as error:
            logger.warning("Could not write stats file %s: %s", self.path, error)
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    pass

    # ========================================================================
    # Recording
    # ========================================================================

    def record_game(
        self, mode_id: Union[ModeId, str], did_win: bool, duration_seconds: int
    ) -> None:
        """
        Add a finished game to its mode and to the overall stats, then save.

        Args:
            mode_id: Mode the game was played in.
            did_win: Whether the game was won.
            duration_seconds: Game length in whole seconds.
        """
        mode_id = ModeId(mode_id)
        played_at = self._clock()
        self._mode_stats[mode_id] = self.stats(mode_id).recorded(
            did_win, duration_seconds, played_at
        )
        self._overall = self._overall.recorded(did_win, duration_seconds, played_at)
        self._save()

    # ========================================================================
    # Accessors
    # ========================================================================

    def stats(self, mode_id: Union[ModeId, str]) -> ModeStats:
        """Current stats for one mode."""
        return self._mode_stats.get(ModeId(mode_id), ModeStats())

    @property
    def overall_stats(self) -> ModeStats:
        """Current stats across all modes."""
        return self._overall

    def snapshot(self) -> StatsSnapshot:
        """The complete document as it would be written to disk."""
        mode_stats = dict(self._unknown_mode_stats)
        mode_stats.update(
            (mode_id.value, stats) for mode_id, stats in self._mode_stats.items()
        )
        return StatsSnapshot(
            mode_stats=mode_stats,
            overall=self._overall,
        )
