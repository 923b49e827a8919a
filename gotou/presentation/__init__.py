"""
Presentation helpers for GoToU.
"""

from .status import StatusView, render_status, warning_display_name

__all__ = ["StatusView", "render_status", "warning_display_name"]
