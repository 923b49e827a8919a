"""
Network clock adapter for GoToU.

Resolves the current Hong Kong time from worldtimeapi.org and falls
back to the system clock converted to Hong Kong time on any failure.
"""

import asyncio
from datetime import datetime
from typing import Callable, Optional

import aiohttp
from dateutil import parser as date_parser, tz

from gotou.observability import metrics
from gotou.observability.logging_setup import get_logger

log = get_logger("gotou.clock")

class WorldTimeClock:
    """worldtimeapi 기반 시각 조회 (시스템 시각 폴백)"""

    def __init__(self,
                 url: str = "http://worldtimeapi.org/api/timezone/Asia/Hong_Kong",
                 *,
                 timeout: float = 5.0,
                 timezone: str = "Asia/Hong_Kong",
                 system_now: Optional[Callable[[], datetime]] = None):
        self.url = url
        self.timeout = timeout
        self.tz = tz.gettz(timezone)
        self._system_now = system_now or (lambda: datetime.now(tz=self.tz))

    def fallback_now(self) -> datetime:
        """시스템 시각을 현지 시각으로 반환합니다."""
        return self._system_now().astimezone(self.tz)

    async def now(self) -> datetime:
        """
        현재 현지 시각을 반환합니다.

        Returns:
            현지 시각 (API 실패 시 시스템 시각)
        """
        try:
            async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout)) as session:
                async with session.get(self.url) as response:
                    response.raise_for_status()
                    data = await response.json(content_type=None)
            return date_parser.isoparse(data["datetime"]).astimezone(self.tz)
        except (aiohttp.ClientError, asyncio.TimeoutError, KeyError, TypeError, ValueError) as e:
            metrics.clock_fallbacks.inc()
            log.warning(f"시각 API 조회 실패, 시스템 시각 사용 error:{e!r}")
            return self.fallback_now()
