"""
Statistics models for Minesweeper.

Immutable per-mode aggregates and the snapshot document that is
written to disk.
"""
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, Optional


SCHEMA_VERSION = 1


class StatsDecodeError(ValueError):
    """Raised when a stats document cannot be decoded."""


# ============================================================================
# Field Decoding
# ============================================================================

def _read_count(data: Dict[str, Any], key: str, default: int = 0) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise StatsDecodeError(f"{key} must be a non-negative integer, got {value!r}")
    return value


def _read_optional_count(data: Dict[str, Any], key: str) -> Optional[int]:
    if data.get(key) is None:
        return None
    return _read_count(data, key)


def _read_timestamp(data: Dict[str, Any], key: str) -> Optional[datetime]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        raise StatsDecodeError(f"{key} must be a timestamp, got {value!r}")
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as error:
            raise StatsDecodeError(f"{key} is out of range: {value!r}") from error
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError as error:
            raise StatsDecodeError(f"{key} is not an ISO-8601 timestamp: {value!r}") from error
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    raise StatsDecodeError(f"{key} must be a timestamp, got {value!r}")


def _read_mapping(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise StatsDecodeError(f"{what} must be an object, got {type(data).__name__}")
    return data


# ============================================================================
# Mode Statistics
# ============================================================================

@dataclass(frozen=True)
class ModeStats:
    """
    Aggregate results for one mode (or across all modes).

    Attributes:
        games_played: Finished games, won or lost.
        games_won: Finished games that were won.
        total_time_seconds: Sum of all game durations.
        best_time_seconds: Shortest game duration, None before any game.
        last_played_at: When the latest game finished.
    """

    games_played: int = 0
    games_won: int = 0
    total_time_seconds: int = 0
    best_time_seconds: Optional[int] = None
    last_played_at: Optional[datetime] = None

    @property
    def success_rate(self) -> float:
        """Fraction of games won."""
        if self.games_played == 0:
            return 0.0
        return self.games_won / self.games_played

    @property
    def average_time_seconds(self) -> float:
        """Mean game duration."""
        if self.games_played == 0:
            return 0.0
        return self.total_time_seconds / self.games_played

    def recorded(self, did_win: bool, duration_seconds: int, played_at: datetime) -> "ModeStats":
        """Return these stats updated with one more finished game."""
        if self.best_time_seconds is None:
            best = duration_seconds
        else:
            best = min(self.best_time_seconds, duration_seconds)
        return replace(
            self,
            games_played=self.games_played + 1,
            games_won=self.games_won + (1 if did_win else 0),
            total_time_seconds=self.total_time_seconds + duration_seconds,
            best_time_seconds=best,
            last_played_at=played_at,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "gamesPlayed": self.games_played,
            "gamesWon": self.games_won,
            "totalTimeSeconds": self.total_time_seconds,
            "bestTimeSeconds": self.best_time_seconds,
            "lastPlayedAt": (
                self.last_played_at.isoformat() if self.last_played_at else None
            ),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "ModeStats":
        """
        Build from a decoded JSON object.

        Unknown keys are ignored and missing keys default to zero/None.

        Raises:
            StatsDecodeError: If a field has the wrong type.
        """
        data = _read_mapping(data, "mode stats")
        return cls(
            games_played=_read_count(data, "gamesPlayed"),
            games_won=_read_count(data, "gamesWon"),
            total_time_seconds=_read_count(data, "totalTimeSeconds"),
            best_time_seconds=_read_optional_count(data, "bestTimeSeconds"),
            last_played_at=_read_timestamp(data, "lastPlayedAt"),
        )


# ============================================================================
# Snapshot
# ============================================================================

@dataclass(frozen=True)
class StatsSnapshot:
    """The complete stats document: every mode plus the overall aggregate."""

    mode_stats: Dict[str, ModeStats] = field(default_factory=dict)
    overall: ModeStats = field(default_factory=ModeStats)
    schema_version: int = SCHEMA_VERSION

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "modeStats": {
                mode_id: stats.to_dict() for mode_id, stats in self.mode_stats.items()
            },
            "overall": self.overall.to_dict(),
            "schemaVersion": self.schema_version,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "StatsSnapshot":
        """
        Build from a decoded JSON document.

        Raises:
            StatsDecodeError: If the document is not shaped like a snapshot.
        """
        data = _read_mapping(data, "stats document")
        modes = _read_mapping(data.get("modeStats", {}), "modeStats")
        return cls(
            mode_stats={
                str(mode_id): ModeStats.from_dict(stats) for mode_id, stats in modes.items()
            },
            overall=ModeStats.from_dict(data.get("overall", {})),
            schema_version=_read_count(data, "schemaVersion", SCHEMA_VERSION),
        )
