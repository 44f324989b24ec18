"""
Unit tests for ModeStats and StatsSnapshot.
"""
from datetime import datetime, timezone

import pytest
from scoreboard import SCHEMA_VERSION, ModeStats, StatsDecodeError, StatsSnapshot


PLAYED_AT = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


# ============================================================================
# Derived Value Tests
# ============================================================================

class TestDerivedValues:
    """Test success rate and average time."""

    def test_empty_stats_are_zero(self) -> None:
        stats = ModeStats()
        assert stats.success_rate == 0.0
        assert stats.average_time_seconds == 0.0
        assert stats.best_time_seconds is None
        assert stats.last_played_at is None

    def test_success_rate(self) -> None:
        stats = ModeStats(games_played=4, games_won=1)
        assert stats.success_rate == 0.25

    def test_average_time(self) -> None:
        stats = ModeStats(games_played=4, total_time_seconds=100)
        assert stats.average_time_seconds == 25.0


# ============================================================================
# Update Rule Tests
# ============================================================================

class TestRecorded:
    """Test the per-game update rule."""

    def test_first_game_sets_best_time(self) -> None:
        stats = ModeStats().recorded(True, 42, PLAYED_AT)
        assert stats == ModeStats(1, 1, 42, 42, PLAYED_AT)

    def test_best_time_keeps_minimum(self) -> None:
        stats = ModeStats().recorded(False, 30, PLAYED_AT)
        stats = stats.recorded(True, 50, PLAYED_AT)
        stats = stats.recorded(True, 20, PLAYED_AT)
        assert stats.best_time_seconds == 20

    def test_loss_does_not_count_as_win(self) -> None:
        stats = ModeStats().recorded(False, 10, PLAYED_AT)
        assert stats.games_played == 1
        assert stats.games_won == 0

    def test_original_is_not_modified(self) -> None:
        original = ModeStats()
        original.recorded(True, 5, PLAYED_AT)
        assert original == ModeStats()


# ============================================================================
# Serialization Tests
# ============================================================================

class TestSerialization:
    """Test JSON-shaped encoding and decoding."""

    def test_mode_stats_keys(self) -> None:
        data = ModeStats(3, 2, 90, 20, PLAYED_AT).to_dict()
        assert data == {
            "gamesPlayed": 3,
            "gamesWon": 2,
            "totalTimeSeconds": 90,
            "bestTimeSeconds": 20,
            "lastPlayedAt": "2024-05-01T12:30:00+00:00",
        }

    def test_snapshot_round_trip(self) -> None:
        snapshot = StatsSnapshot(
            mode_stats={"easy": ModeStats(3, 2, 90, 20, PLAYED_AT), "hard": ModeStats()},
            overall=ModeStats(3, 2, 90, 20, PLAYED_AT),
        )
        assert StatsSnapshot.from_dict(snapshot.to_dict()) == snapshot

    def test_snapshot_carries_schema_version(self) -> None:
        assert StatsSnapshot().to_dict()["schemaVersion"] == SCHEMA_VERSION == 1

    def test_missing_fields_default(self) -> None:
        stats = ModeStats.from_dict({"gamesPlayed": 2})
        assert stats == ModeStats(games_played=2)

    def test_unknown_fields_ignored(self) -> None:
        stats = ModeStats.from_dict({"gamesPlayed": 1, "streak": 7})
        assert stats.games_played == 1

    def test_null_optional_fields(self) -> None:
        stats = ModeStats.from_dict({"bestTimeSeconds": None, "lastPlayedAt": None})
        assert stats.best_time_seconds is None
        assert stats.last_played_at is None

    def test_numeric_timestamp_read_as_posix(self) -> None:
        stats = ModeStats.from_dict({"lastPlayedAt": 0})
        assert stats.last_played_at == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_naive_timestamp_assumed_utc(self) -> None:
        stats = ModeStats.from_dict({"lastPlayedAt": "2024-05-01T12:30:00"})
        assert stats.last_played_at == PLAYED_AT

    def test_missing_schema_version_defaults_to_current(self) -> None:
        assert StatsSnapshot.from_dict({}).schema_version == SCHEMA_VERSION

    @pytest.mark.parametrize(
        "data",
        [
            {"gamesPlayed": "three"},
            {"gamesWon": -1},
            {"totalTimeSeconds": True},
            {"bestTimeSeconds": 1.5},
            {"lastPlayedAt": "yesterday"},
            {"lastPlayedAt": []},
            [],
        ],
    )
    def test_wrong_types_raise(self, data) -> None:
        with pytest.raises(StatsDecodeError):
            ModeStats.from_dict(data)

    def test_snapshot_with_bad_mode_map_raises(self) -> None:
        with pytest.raises(StatsDecodeError):
            StatsSnapshot.from_dict({"modeStats": [1, 2], "overall": {}})
