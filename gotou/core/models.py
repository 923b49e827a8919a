"""
Core domain models for GoToU.

This module defines the warning snapshot, schedule and decision models
using Pydantic v2 for type safety and validation.
"""

from datetime import datetime, time
from enum import Enum
from typing import FrozenSet, List, Optional
from dateutil import tz
from pydantic import BaseModel, ConfigDict, Field, field_validator

HKT = tz.gettz("Asia/Hong_Kong")


def to_hkt(value: datetime) -> datetime:
    """시각을 홍콩 현지 시각으로 맞춥니다 (naive 값은 홍콩 시각으로 간주)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=HKT)
    return value.astimezone(HKT)


class WarningCategory(str, Enum):
    """경보 계열"""
    TROPICAL_CYCLONE = "TROPICAL_CYCLONE"
    RAINSTORM = "RAINSTORM"
    OTHER = "OTHER"


class WarningAction(str, Enum):
    """경보 상태 (발령/해제)"""
    ISSUED = "ISSUED"
    CANCELLED = "CANCELLED"


class Tier(str, Enum):
    """휴강 단계"""
    NONE = "NONE"
    MORNING = "MORNING"
    AFTERNOON = "AFTERNOON"
    ALL = "ALL"

    @property
    def rank(self) -> int:
        return TIER_ORDER[self]


# 휴강 단계 순서 (낮음 -> 높음)
TIER_ORDER = {
    Tier.NONE: 0,
    Tier.MORNING: 1,
    Tier.AFTERNOON: 2,
    Tier.ALL: 3,
}


class WarningRecord(BaseModel):
    """단일 경보 레코드 모델"""
    model_config = ConfigDict(frozen=True)

    category: WarningCategory
    code: str
    action: WarningAction
    issued_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    warning_type: Optional[str] = None
    name: Optional[str] = None

    @field_validator("issued_at", "updated_at")
    @classmethod
    def _localize(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_hkt(value) if value is not None else None


class WarningSnapshot(BaseModel):
    """특정 시점의 경보 스냅샷 모델"""
    model_config = ConfigDict(frozen=True)

    records: List[WarningRecord] = Field(default_factory=list)


class CriticalityRule(BaseModel):
    """휴강을 유발하는 (계열, 코드) 조합"""
    model_config = ConfigDict(frozen=True)

    category: WarningCategory
    codes: FrozenSet[str]

    def matches(self, record: WarningRecord) -> bool:
        return record.category == self.category and record.code in self.codes


class Checkpoints(BaseModel):
    """휴강 결정 시각 (시:분)"""
    model_config = ConfigDict(frozen=True)

    morning: time = time(7, 1)
    afternoon: time = time(12, 1)
    all: time = time(16, 1)

    def ordered(self) -> List[tuple]:
        """(단계, 결정 시각) 목록을 오름차순으로 반환합니다."""
        return [
            (Tier.MORNING, self.morning),
            (Tier.AFTERNOON, self.afternoon),
            (Tier.ALL, self.all),
        ]


class Schedule(BaseModel):
    """대학별 결정 시각과 수업 시간대 모델"""
    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    checkpoints: Checkpoints = Field(default_factory=Checkpoints)
    morning_window: str = "before 2 PM"
    afternoon_window: str = "2 PM - 6:30 PM"
    all_window: str = ""


GLOBAL_SCHEDULE = Schedule(key="default", name="All universities (default)")


class Classification(BaseModel):
    """경보 분류 결과 모델"""
    model_config = ConfigDict(frozen=True)

    is_critical_active: bool = False
    critical_records: List[WarningRecord] = Field(default_factory=list)


class DecisionResult(BaseModel):
    """휴강 판정 결과 모델"""
    model_config = ConfigDict(frozen=True)

    tier: Tier = Tier.NONE
    records: List[WarningRecord] = Field(default_factory=list)
    pending: bool = False
    is_critical_active: bool = False
    trigger_at: Optional[datetime] = None
    reason: str = "no critical warning"
