"""
Configuration for the stats store.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path


STATS_DIR_ENV = "MINESWEEPER_STATS_DIR"
DEFAULT_FILE_NAME = "stats.json"


def default_stats_dir() -> Path:
    """Per-user data directory, honouring XDG_DATA_HOME."""
    base = os.environ.get("XDG_DATA_HOME")
    root = Path(base) if base else Path.home() / ".local" / "share"
    return root / "minesweeper"


@dataclass
class StatsConfig:
    """
    Where statistics are stored.

    Attributes:
        stats_dir: Directory holding the stats file.
        file_name: Name of the stats file inside ``stats_dir``.
    """

    stats_dir: Path = field(default_factory=default_stats_dir)
    file_name: str = DEFAULT_FILE_NAME

    @classmethod
    def from_env(cls) -> "StatsConfig":
        """Build a config, letting MINESWEEPER_STATS_DIR override the directory."""
        override = os.environ.get(STATS_DIR_ENV)
        if override:
            return cls(stats_dir=Path(override).expanduser())
        return cls()

    @property
    def stats_path(self) -> Path:
        return Path(self.stats_dir) / self.file_name
