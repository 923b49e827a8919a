"""
Storage adapters for GoToU hexagonal architecture.

This module contains the SQLite key-value store and the
university selection built on top of it.
"""

from .sqlite_kv import SQLiteKVStore
from .selection import SelectionStore, UnknownUniversityError

__all__ = ["SQLiteKVStore", "SelectionStore", "UnknownUniversityError"]
