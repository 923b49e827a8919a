"""
University schedule catalogue for GoToU.

Schedules are static configuration: loaded once from the bundled
``universities.json`` and looked up by key.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from .models import GLOBAL_SCHEDULE, Schedule
from gotou.observability.logging_setup import get_logger

log = get_logger("gotou.schedules")

CATALOGUE_PATH = Path(__file__).resolve().parent.parent / "data" / "universities.json"


@lru_cache(maxsize=None)
def load_schedules(path: Optional[str] = None) -> Dict[str, Schedule]:
    """
    대학 스케줄 목록을 로드합니다.

    Args:
        path: 카탈로그 JSON 경로 (None이면 기본 카탈로그)

    Returns:
        키 -> 스케줄 (기본 스케줄 포함)
    """
    catalogue = Path(path) if path else CATALOGUE_PATH
    data = json.loads(catalogue.read_text(encoding="utf-8"))

    schedules = {GLOBAL_SCHEDULE.key: GLOBAL_SCHEDULE}
    for item in data:
        schedule = Schedule.model_validate(item)
        schedules[schedule.key] = schedule

    log.info(f"대학 스케줄 {len(schedules) - 1}개 로드됨 path:{catalogue}")
    return schedules


def get_schedule(key: Optional[str], path: Optional[str] = None) -> Schedule:
    """키로 스케줄을 조회합니다. 없거나 모르는 키면 기본 스케줄."""
    if not key:
        return GLOBAL_SCHEDULE
    schedule = load_schedules(path).get(key)
    if schedule is None:
        log.warning(f"알 수 없는 대학 키, 기본 스케줄 사용: {key}")
        return GLOBAL_SCHEDULE
    return schedule
