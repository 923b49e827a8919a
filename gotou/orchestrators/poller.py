"""
Status poller for GoToU.

Fetches the current time and the warning snapshot, runs the decision
engine and renders the status. ``start`` repeats this on a fixed
refresh interval; the HTTP surface calls ``check`` on demand.
"""

import asyncio
import time
from typing import Optional, Tuple

from gotou.adapters.storage.selection import SelectionStore
from gotou.core.evaluator import evaluate
from gotou.core.models import DecisionResult, Tier
from gotou.core.rules import DEFAULT_RULES
from gotou.observability import metrics
from gotou.observability.logging_setup import get_logger
from gotou.ports.clock import ClockPort
from gotou.ports.feed import WarningFeedPort
from gotou.presentation.status import StatusView, render_status

log = get_logger("gotou.poller")

class StatusPoller:
    """휴강 상태 조회 및 주기적 갱신"""

    def __init__(self,
                 clock: ClockPort,
                 feed: WarningFeedPort,
                 selection: SelectionStore,
                 *,
                 refresh_interval_sec: float = 300.0,
                 university: Optional[str] = None,
                 rules=DEFAULT_RULES):
        """
        초기화합니다.

        Args:
            clock: 시각 포트
            feed: 경보 피드 포트
            selection: 대학 선택 저장소
            refresh_interval_sec: 갱신 주기 (초)
            university: 주기 갱신에 사용할 대학 (None이면 저장된 선택)
            rules: 휴강 유발 규칙
        """
        self.clock = clock
        self.feed = feed
        self.selection = selection
        self.refresh_interval = refresh_interval_sec
        self.university = university
        self.rules = rules
        self.last_tier: Optional[Tier] = None
        self.start_time = time.time()

    async def check(self, university: Optional[str] = None) -> Tuple[Optional[DecisionResult], StatusView]:
        """
        현재 휴강 상태를 판정합니다.

        Args:
            university: 대학 키 (None이면 저장된 선택)

        Returns:
            (판정 결과 또는 None, 표시용 상태)
        """
        schedule = await self.selection.schedule(university)
        now, snapshot = await asyncio.gather(self.clock.now(), self.feed.fetch_snapshot())

        if snapshot is None:
            log.warning("경보 피드 없음, 상태 판정 불가")
            return None, render_status(None, snapshot_available=False, schedule=schedule)

        with metrics.evaluate_seconds.time():
            result = evaluate(now, snapshot, self.rules, schedule)

        metrics.evaluations.labels(tier=result.tier.value).inc()
        metrics.current_tier.labels(university=schedule.key).set(result.tier.rank)
        metrics.pending.labels(university=schedule.key).set(1 if result.pending else 0)

        log.info(f"판정 완료 university:{schedule.key} now:{now:%H:%M} tier:{result.tier.value} "
                 f"pending:{result.pending} reason:{result.reason}")
        return result, render_status(result, schedule=schedule)

    async def run_once(self) -> StatusView:
        """한 번 갱신하고 단계 변화를 기록합니다."""
        result, view = await self.check(self.university)
        tier = result.tier if result else None
        if tier != self.last_tier:
            log.info(f"휴강 단계 변경: {self.last_tier} -> {tier} ({view.text})")
            self.last_tier = tier
        metrics.uptime_seconds.set(time.time() - self.start_time)
        return view

    async def start(self) -> None:
        """갱신 루프를 실행합니다. 한 주기의 오류는 루프를 멈추지 않습니다."""
        log.info(f"상태 폴러 시작 interval:{self.refresh_interval}s")
        while True:
            try:
                await self.run_once()
            except asyncio.CancelledError:
                raise
            except Exception as e:
                log.exception(f"상태 갱신 실패: {e}")
            await asyncio.sleep(self.refresh_interval)
