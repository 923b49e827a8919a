"""
상태 폴러 단위 테스트

이 모듈은 시각/피드/선택 조합과 주기 갱신 루프를 테스트합니다.
"""

import asyncio
import pytest
from datetime import datetime
from unittest.mock import AsyncMock, patch
from dateutil import tz

from gotou.core.models import (
    GLOBAL_SCHEDULE, Tier, WarningAction, WarningCategory, WarningRecord, WarningSnapshot,
)
from gotou.core.schedules import get_schedule
from gotou.orchestrators.poller import StatusPoller

HKT = tz.gettz("Asia/Hong_Kong")


def signal8(hour, minute):
    return WarningSnapshot(records=[WarningRecord(
        category=WarningCategory.TROPICAL_CYCLONE, code="TC8", action=WarningAction.ISSUED,
        issued_at=datetime(2025, 7, 20, hour, minute, tzinfo=HKT),
    )])


@pytest.fixture
def selection():
    mock = AsyncMock()
    mock.schedule.side_effect = lambda key=None: get_schedule(key)
    return mock


class TestStatusPoller:
    """상태 폴러 테스트"""

    @pytest.mark.asyncio
    async def test_check_morning(self, mock_clock, mock_feed, selection, morning_now):
        """오전 휴강 판정"""
        mock_clock.now.return_value = morning_now
        mock_feed.fetch_snapshot.return_value = signal8(6, 30)
        poller = StatusPoller(mock_clock, mock_feed, selection)

        result, view = await poller.check()

        assert result.tier == Tier.MORNING
        assert view.status_class == "cancelled"
        assert view.university == GLOBAL_SCHEDULE.key

    @pytest.mark.asyncio
    async def test_check_uses_university_schedule(self, mock_clock, mock_feed, selection):
        """대학별 결정 시각 적용 (HKU 06:31)"""
        mock_clock.now.return_value = datetime(2025, 7, 20, 6, 45, tzinfo=HKT)
        mock_feed.fetch_snapshot.return_value = signal8(6, 0)
        poller = StatusPoller(mock_clock, mock_feed, selection)

        hku, _ = await poller.check("hku")
        default, _ = await poller.check()

        assert hku.tier == Tier.MORNING
        assert default.tier == Tier.NONE
        assert default.pending is True

    @pytest.mark.asyncio
    async def test_check_feed_unavailable(self, mock_clock, mock_feed, selection, morning_now):
        """피드 실패 시 판정 불가"""
        mock_clock.now.return_value = morning_now
        mock_feed.fetch_snapshot.return_value = None
        poller = StatusPoller(mock_clock, mock_feed, selection)

        result, view = await poller.check()

        assert result is None
        assert view.status_class == "unavailable"

    @pytest.mark.asyncio
    async def test_run_once_tracks_tier(self, mock_clock, mock_feed, selection, morning_now):
        """갱신 시 마지막 단계 기록"""
        mock_clock.now.return_value = morning_now
        mock_feed.fetch_snapshot.return_value = signal8(6, 30)
        poller = StatusPoller(mock_clock, mock_feed, selection, university="cuhk")

        view = await poller.run_once()

        assert poller.last_tier == Tier.MORNING
        assert view.university == "cuhk"
        selection.schedule.assert_awaited_with("cuhk")

    @pytest.mark.asyncio
    async def test_start_survives_cycle_errors(self, mock_clock, mock_feed, selection):
        """한 주기 오류가 루프를 멈추지 않음"""
        poller = StatusPoller(mock_clock, mock_feed, selection, refresh_interval_sec=0)
        calls = 0

        async def flaky():
            nonlocal calls
            calls += 1
            if calls == 1:
                raise RuntimeError("boom")
            if calls >= 3:
                raise asyncio.CancelledError()

        with patch.object(poller, "run_once", side_effect=flaky):
            with pytest.raises(asyncio.CancelledError):
                await poller.start()

        assert calls == 3
