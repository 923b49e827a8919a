"""
Hong Kong Observatory adapters for GoToU.
"""

from .client import HKOWarningClient

__all__ = ["HKOWarningClient"]
