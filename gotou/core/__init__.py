"""
Core domain models and pure functions for GoToU.

This module contains the domain models and the decision engine
that are independent of external I/O and infrastructure concerns.
"""

from .models import (
    WarningCategory, WarningAction, WarningRecord, WarningSnapshot,
    CriticalityRule, Checkpoints, Schedule, GLOBAL_SCHEDULE,
    Tier, Classification, DecisionResult, HKT, to_hkt,
)
from .rules import DEFAULT_RULES
from .classifier import classify, is_critical
from .evaluator import evaluate, trigger_moment, checkpoint_reached
from .normalize import to_snapshot, FeedFormatError

__all__ = [
    "WarningCategory", "WarningAction", "WarningRecord", "WarningSnapshot",
    "CriticalityRule", "Checkpoints", "Schedule", "GLOBAL_SCHEDULE",
    "Tier", "Classification", "DecisionResult", "HKT", "to_hkt", "DEFAULT_RULES",
    "classify", "is_critical", "evaluate", "trigger_moment", "checkpoint_reached",
    "to_snapshot", "FeedFormatError",
]
