"""
Warning feed port interface.

This module defines the protocol for fetching warning snapshots.
"""

from typing import Optional, Protocol
from gotou.core.models import WarningSnapshot

class WarningFeedPort(Protocol):
    """경보 피드 포트 인터페이스"""

    async def fetch_snapshot(self) -> Optional[WarningSnapshot]:
        """
        현재 경보 스냅샷을 가져옵니다.

        Returns:
            경보 스냅샷, 조회/파싱 실패 시 None
        """
        ...
