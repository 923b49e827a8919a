"""
Normalization functions for GoToU.

This module converts the raw HKO warning summary payload (``warnsum``)
into the internal ``WarningSnapshot`` model.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from dateutil import parser as date_parser
from jsonschema import validate
from jsonschema.exceptions import ValidationError

from .models import WarningAction, WarningCategory, WarningRecord, WarningSnapshot, to_hkt
from gotou.observability.logging_setup import get_logger

log = get_logger("gotou.normalize")

SCHEMA = json.loads((Path(__file__).parent / "warnsum_schema.json").read_text(encoding="utf-8"))

# 경보 종류 키 -> 계열
CATEGORY_MAP = {
    "WTCSGNL": WarningCategory.TROPICAL_CYCLONE,
    "WRAIN": WarningCategory.RAINSTORM,
}

# HKO actionCode -> 상태 (해제 외에는 모두 발효 중)
ACTION_MAP = {
    "ISSUE": WarningAction.ISSUED,
    "REISSUE": WarningAction.ISSUED,
    "EXTEND": WarningAction.ISSUED,
    "UPDATE": WarningAction.ISSUED,
    "CANCEL": WarningAction.CANCELLED,
}


class FeedFormatError(ValueError):
    """경보 피드 구조 오류"""


def parse_time(value: Any) -> Optional[datetime]:
    """ISO-8601 시각을 홍콩 시각으로 변환합니다. 파싱 실패 시 None."""
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = date_parser.isoparse(value)
    except (ValueError, OverflowError):
        log.warning(f"시각 파싱 실패: {value}")
        return None
    # 오프셋이 없으면 홍콩 현지 시각으로 간주
    return to_hkt(parsed)


def _to_record(warning_type: str, entry: Dict[str, Any]) -> Optional[WarningRecord]:
    code = entry.get("code")
    action = ACTION_MAP.get(str(entry.get("actionCode", "")).upper())
    if not code or action is None:
        log.warning(f"경보 항목 무시됨 type:{warning_type} code:{code} actionCode:{entry.get('actionCode')}")
        return None

    return WarningRecord(
        category=CATEGORY_MAP.get(warning_type, WarningCategory.OTHER),
        code=str(code),
        action=action,
        issued_at=parse_time(entry.get("issueTime")),
        updated_at=parse_time(entry.get("updateTime")),
        warning_type=warning_type,
        name=entry.get("name"),
    )


def to_snapshot(raw: Any) -> WarningSnapshot:
    """
    HKO warnsum 응답을 경보 스냅샷으로 변환합니다.

    Args:
        raw: 파싱된 JSON (경보 종류 키 -> 경보 객체), bytes 또는 str

    Returns:
        경보 스냅샷 (빈 객체면 발효 중인 경보 없음)

    Raises:
        FeedFormatError: 최상위 구조가 잘못된 경우
    """
    if isinstance(raw, (bytes, str)):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise FeedFormatError(f"warnsum JSON 디코딩 실패: {e}") from e

    if not isinstance(raw, dict):
        raise FeedFormatError(f"warnsum 응답은 객체여야 합니다: {type(raw).__name__}")

    try:
        validate(instance=raw, schema=SCHEMA)
    except ValidationError as e:
        log.error(f"warnsum 스키마 검증 실패: {e.message}")
        raise FeedFormatError(f"warnsum schema validation failed: {e.message}") from e

    records: List[WarningRecord] = []
    for warning_type, entry in raw.items():
        record = _to_record(warning_type, entry)
        if record is not None:
            records.append(record)

    log.debug(f"경보 {len(records)}건 정규화됨")
    return WarningSnapshot(records=records)
