"""
Minesweeper statistics module.

Provides per-mode aggregates and their durable JSON store.
"""
from .config import StatsConfig
from .models import ModeStats, StatsSnapshot, StatsDecodeError, SCHEMA_VERSION
from .store import StatsStore

__all__ = [
    "StatsConfig",
    "ModeStats",
    "StatsSnapshot",
    "StatsDecodeError",
    "SCHEMA_VERSION",
    "StatsStore",
]
