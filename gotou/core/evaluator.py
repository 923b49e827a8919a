"""
Decision evaluation functions for GoToU.

This module contains the pure decision engine: given the current time,
a warning snapshot and a schedule, it decides which block of classes is
cancelled. Checkpoints are compared on Hong Kong clock time
(hours:minutes) only.
"""

from datetime import datetime, time
from typing import Iterable, List, Optional, Tuple

from .classifier import SnapshotInput, classify
from .models import (
    CriticalityRule, DecisionResult, GLOBAL_SCHEDULE, Schedule, Tier,
    WarningAction, WarningRecord, to_hkt,
)
from .rules import DEFAULT_RULES


def _minute_of_day(value) -> int:
    # 시각은 홍콩 현지 시각 기준으로 비교
    if isinstance(value, datetime):
        value = to_hkt(value)
    return value.hour * 60 + value.minute


def trigger_moment(record: WarningRecord) -> Optional[datetime]:
    """
    레코드의 판정 기준 시각을 계산합니다.

    발령 중: 갱신 시각이 발령 시각보다 늦으면 갱신 시각, 아니면 발령 시각.
    해제됨: 갱신(해제) 시각.

    Returns:
        기준 시각 또는 None (시각 정보가 없으면 판정에서 제외)
    """
    if record.action == WarningAction.ISSUED:
        if record.updated_at and record.issued_at and record.updated_at > record.issued_at:
            return record.updated_at
        return record.issued_at
    return record.updated_at


def checkpoint_reached(trigger: datetime, now: datetime, checkpoint: time) -> bool:
    """기준 시각이 결정 시각 이전이고 현재 시각이 결정 시각 이후인지 확인합니다."""
    cp = _minute_of_day(checkpoint)
    return _minute_of_day(trigger) < cp and _minute_of_day(now) >= cp


def _earliest_trigger(records: List[WarningRecord]) -> Optional[datetime]:
    candidates = [t for t in (trigger_moment(r) for r in records) if t is not None]
    if not candidates:
        return None
    return min(candidates)


def _reached_tier(trigger: datetime, now: datetime, schedule: Schedule) -> Tuple[Tier, Optional[time]]:
    tier, at = Tier.NONE, None
    # 오전 -> 오후 -> 전체 순서로 덮어쓰므로 마지막으로 도달한 단계가 남음
    for candidate, checkpoint in schedule.checkpoints.ordered():
        if checkpoint_reached(trigger, now, checkpoint):
            tier, at = candidate, checkpoint
    return tier, at


def evaluate(
    now: datetime,
    snapshot: SnapshotInput,
    rules: Iterable[CriticalityRule] = DEFAULT_RULES,
    schedule: Schedule = GLOBAL_SCHEDULE,
) -> DecisionResult:
    """
    휴강 단계를 판정합니다.

    Args:
        now: 현재 시각 (홍콩 시각으로 변환, naive 값은 홍콩 시각으로 간주)
        snapshot: 경보 스냅샷 (None이면 경보 없음)
        rules: 휴강 유발 규칙
        schedule: 결정 시각 스케줄

    Returns:
        판정 결과
    """
    now = to_hkt(now)
    classification = classify(snapshot, rules)
    records = classification.critical_records
    active = classification.is_critical_active

    if not records:
        return DecisionResult()

    trigger = _earliest_trigger(records)
    if trigger is None:
        return DecisionResult(
            pending=True,
            records=records,
            is_critical_active=active,
            reason="critical warning without issue/update time",
        )

    tier, at = _reached_tier(trigger, now, schedule)
    if tier == Tier.NONE:
        return DecisionResult(
            pending=True,
            records=records,
            is_critical_active=active,
            trigger_at=trigger,
            reason=f"trigger({trigger:%H:%M}) has not crossed a checkpoint by now({now:%H:%M})",
        )

    return DecisionResult(
        tier=tier,
        records=records,
        is_critical_active=active,
        trigger_at=trigger,
        reason=f"trigger({trigger:%H:%M}) < checkpoint({at:%H:%M}) <= now({now:%H:%M})",
    )
