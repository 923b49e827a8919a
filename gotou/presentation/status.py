"""
Status presentation for GoToU.

Maps a ``DecisionResult`` to the copy text and status class shown to
students. This is display logic only; decisions are made in
``gotou.core.evaluator``.
"""

from typing import List, Optional
from pydantic import BaseModel

from gotou.core.models import (
    DecisionResult, GLOBAL_SCHEDULE, Schedule, Tier, WarningAction, WarningRecord,
)

class StatusView(BaseModel):
    """화면 표시용 상태 모델"""
    text: str
    status_class: str          # safe | cancelled | pending | unavailable
    warning_info: str = ""
    tier: Tier = Tier.NONE
    pending: bool = False
    university: str = GLOBAL_SCHEDULE.key

def warning_display_name(record: WarningRecord) -> str:
    """경보 코드를 표시 이름으로 변환합니다."""
    code = record.code
    if code.startswith("TC8"):
        name = "Typhoon Signal No. 8"
    elif code.startswith("TC"):
        name = f"Typhoon Signal No. {code[2:]}"
    elif code == "WRAINB":
        name = "Black Rainstorm Warning"
    else:
        name = record.name or code
    if record.action == WarningAction.CANCELLED:
        name = f"{name} (cancelled)"
    return name

def describe_warnings(records: List[WarningRecord]) -> str:
    # 발령 중인 경보 우선
    active = [r for r in records if r.action == WarningAction.ISSUED]
    shown = active or records
    return ", ".join(warning_display_name(r) for r in shown)

def render_status(result: Optional[DecisionResult],
                  snapshot_available: bool = True,
                  schedule: Schedule = GLOBAL_SCHEDULE) -> StatusView:
    """
    판정 결과를 표시 문구로 변환합니다.

    Args:
        result: 판정 결과 (None이면 판정 불가)
        snapshot_available: 경보 피드 조회 성공 여부
        schedule: 선택된 대학 스케줄 (수업 시간대 문구)

    Returns:
        표시용 상태
    """
    if result is None or not snapshot_available:
        return StatusView(
            text="Unable to fetch weather warnings. Please try again later.",
            status_class="unavailable",
            university=schedule.key,
        )

    warning_text = describe_warnings(result.records)

    if result.tier == Tier.MORNING:
        text = f"Morning classes ({schedule.morning_window}) cancelled due to {warning_text}."
    elif result.tier == Tier.AFTERNOON:
        text = f"Afternoon classes ({schedule.afternoon_window}) cancelled due to {warning_text}."
    elif result.tier == Tier.ALL:
        window = f" ({schedule.all_window})" if schedule.all_window else ""
        text = f"All remaining classes{window} cancelled due to {warning_text}."
    elif result.pending:
        return StatusView(
            text=f"{warning_text or 'Critical warning'} but decision time not reached yet. Check back later.",
            status_class="pending",
            warning_info=warning_text,
            pending=True,
            university=schedule.key,
        )
    else:
        return StatusView(
            text="No critical warning active. You need to attend university as usual.",
            status_class="safe",
            university=schedule.key,
        )

    return StatusView(
        text=text,
        status_class="cancelled",
        warning_info=warning_text,
        tier=result.tier,
        university=schedule.key,
    )
