"""
Hong Kong Observatory warning feed client for GoToU.

This module fetches the HKO warning summary (``warnsum``) and
normalizes it into a ``WarningSnapshot``. Any fetch or parse failure
is reported as ``None`` so callers treat it as "status unknown".
"""

import asyncio
import json
import time
from pathlib import Path
from typing import Any, Dict, Optional

import aiohttp

from gotou.common.retry import retry_with_backoff
from gotou.core.models import WarningSnapshot
from gotou.core.normalize import FeedFormatError, to_snapshot
from gotou.observability import metrics
from gotou.observability.logging_setup import get_logger

log = get_logger("gotou.hko")

class HKOWarningClient:
    """HKO 경보 요약 API 클라이언트"""

    def __init__(self,
                 url: str = "https://data.weather.gov.hk/weatherAPI/opendata/weather.php",
                 *,
                 data_type: str = "warnsum",
                 lang: str = "en",
                 timeout: float = 10.0,
                 max_retries: int = 2,
                 backoff_initial: float = 0.5,
                 backoff_max: float = 5.0,
                 test_mode: bool = False,
                 test_data_path: Optional[str] = None):
        """
        초기화합니다.

        Args:
            url: HKO open data API URL
            data_type: 데이터 종류 (warnsum)
            lang: 응답 언어 (en, tc, sc)
            timeout: 요청 타임아웃 (초)
            max_retries: 최대 재시도 횟수
            backoff_initial: 초기 백오프 (초)
            backoff_max: 최대 백오프 (초)
            test_mode: True면 로컬 JSON 파일 사용
            test_data_path: 테스트 데이터 경로
        """
        self.url = url
        self.params = {"dataType": data_type, "lang": lang}
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff_initial = backoff_initial
        self.backoff_max = backoff_max
        self.test_mode = test_mode
        self.test_data_path = test_data_path
        self.session: Optional[aiohttp.ClientSession] = None

        log.info(f"HKO 경보 클라이언트 초기화됨 test_mode:{test_mode}")

    async def __aenter__(self):
        """비동기 컨텍스트 매니저 진입"""
        self.session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout))
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """비동기 컨텍스트 매니저 종료"""
        if self.session:
            await self.session.close()
            self.session = None

    async def _request_json(self, session: aiohttp.ClientSession) -> Any:
        async def _request():
            async with session.get(self.url, params=self.params) as response:
                response.raise_for_status()
                # HKO는 content-type을 text/html로 줄 때가 있음
                return await response.json(content_type=None)

        return await retry_with_backoff(
            _request,
            max_retries=self.max_retries,
            base_delay=self.backoff_initial,
            max_delay=self.backoff_max,
            retry_on=(aiohttp.ClientError, asyncio.TimeoutError),
        )

    async def fetch_raw(self) -> Dict[str, Any]:
        """
        원본 warnsum 응답을 가져옵니다.

        Raises:
            aiohttp.ClientError, asyncio.TimeoutError, OSError, ValueError
        """
        if self.test_mode:
            path = Path(self.test_data_path or "test-warnings.json")
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
            data = json.loads(text)
            log.info(f"테스트 데이터 사용: {path}")
            return data

        if self.session:
            return await self._request_json(self.session)
        async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout)) as session:
            return await self._request_json(session)

    async def fetch_snapshot(self) -> Optional[WarningSnapshot]:
        """
        경보 스냅샷을 가져옵니다.

        Returns:
            경보 스냅샷, 실패 시 None
        """
        start = time.perf_counter()
        try:
            raw = await self.fetch_raw()
            snapshot = to_snapshot(raw)
        except FeedFormatError as e:
            metrics.feed_fetches.labels(result="invalid").inc()
            log.error(f"경보 피드 형식 오류 error:{e}")
            return None
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError, ValueError) as e:
            metrics.feed_fetches.labels(result="error").inc()
            log.error(f"경보 피드 조회 실패 error:{e!r}")
            return None
        finally:
            metrics.feed_fetch_seconds.observe(time.perf_counter() - start)

        metrics.feed_fetches.labels(result="ok").inc()
        log.info(f"경보 피드 조회 성공 records:{len(snapshot.records)}")
        return snapshot
