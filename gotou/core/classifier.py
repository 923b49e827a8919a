"""
Warning classification for GoToU.

This module contains pure functions that decide which warnings
are critical and whether a critical warning is currently in force.
"""

from typing import Any, Iterable, Mapping, Optional, Union
from pydantic import ValidationError

from .models import Classification, CriticalityRule, WarningAction, WarningRecord, WarningSnapshot
from .rules import DEFAULT_RULES
from gotou.observability.logging_setup import get_logger

log = get_logger("gotou.classifier")

SnapshotInput = Union[WarningSnapshot, Mapping[str, Any], None]


def is_critical(record: WarningRecord, rules: Iterable[CriticalityRule] = DEFAULT_RULES) -> bool:
    """레코드가 휴강 유발 규칙에 해당하는지 확인합니다 (발령/해제 무관)."""
    return any(rule.matches(record) for rule in rules)


def _coerce_snapshot(snapshot: SnapshotInput) -> Optional[WarningSnapshot]:
    if snapshot is None:
        return None
    if isinstance(snapshot, WarningSnapshot):
        return snapshot
    try:
        return WarningSnapshot.model_validate(snapshot)
    except ValidationError as e:
        # 데이터 없음 = 경보 없음
        log.warning(f"잘못된 경보 스냅샷, 경보 없음으로 처리: {e.error_count()}개 오류")
        return None


def classify(snapshot: SnapshotInput, rules: Iterable[CriticalityRule] = DEFAULT_RULES) -> Classification:
    """
    경보 스냅샷을 분류합니다.

    Args:
        snapshot: 경보 스냅샷 (None 또는 잘못된 형식이면 경보 없음으로 처리)
        rules: 휴강 유발 규칙

    Returns:
        분류 결과 (발령 중인 치명 경보 여부, 해제 포함 치명 경보 목록)
    """
    snap = _coerce_snapshot(snapshot)
    if snap is None:
        return Classification()

    rules = tuple(rules)
    critical = [r for r in snap.records if is_critical(r, rules)]
    active = any(r.action == WarningAction.ISSUED for r in critical)

    return Classification(is_critical_active=active, critical_records=critical)
