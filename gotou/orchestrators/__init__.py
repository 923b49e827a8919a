"""
Orchestrators for GoToU.

This module wires the clock, warning feed and selection adapters
to the decision engine.
"""

from .poller import StatusPoller

__all__ = ["StatusPoller"]
