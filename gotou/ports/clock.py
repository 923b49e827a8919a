"""
Clock port interface.

This module defines the protocol for resolving the current local time.
"""

from datetime import datetime
from typing import Protocol

class ClockPort(Protocol):
    """시각 포트 인터페이스"""

    async def now(self) -> datetime:
        """
        현재 홍콩 현지 시각을 반환합니다. 실패하지 않습니다.
        """
        ...
