"""
Port interfaces for GoToU hexagonal architecture.

This module defines the port interfaces (Protocols) that define
the contracts between the core domain and external adapters.
"""

from .feed import WarningFeedPort
from .clock import ClockPort
from .kvstore import KVStorePort

__all__ = ["WarningFeedPort", "ClockPort", "KVStorePort"]
