"""
Adapters for GoToU hexagonal architecture.

This module contains the concrete implementations of port interfaces
that handle external I/O and infrastructure concerns.
"""

from .storage import SQLiteKVStore, SelectionStore
from .hko.client import HKOWarningClient
from .clock.worldtime import WorldTimeClock

__all__ = ["SQLiteKVStore", "SelectionStore", "HKOWarningClient", "WorldTimeClock"]
