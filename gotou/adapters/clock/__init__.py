"""
Clock adapters for GoToU.
"""

from .worldtime import WorldTimeClock

__all__ = ["WorldTimeClock"]
