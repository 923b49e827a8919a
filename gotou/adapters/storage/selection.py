"""
Persisted university selection for GoToU.
"""

from typing import Optional

from gotou.core.models import GLOBAL_SCHEDULE, Schedule
from gotou.core.schedules import get_schedule, load_schedules
from gotou.ports.kvstore import KVStorePort
from gotou.observability.logging_setup import get_logger

log = get_logger("gotou.selection")

class UnknownUniversityError(KeyError):
    """카탈로그에 없는 대학 키"""

class SelectionStore:
    """선택한 대학을 키-값 저장소에 보관합니다."""

    def __init__(self, kv: KVStorePort, key: str = "selectedUniversity"):
        self.kv = kv
        self.key = key

    async def get(self) -> Optional[str]:
        """저장된 대학 키를 반환합니다. 없으면 None."""
        return await self.kv.get(self.key)

    async def select(self, university: Optional[str]) -> Schedule:
        """
        대학을 선택합니다. 빈 값이면 선택을 지웁니다.

        Raises:
            UnknownUniversityError: 카탈로그에 없는 키
        """
        if not university:
            await self.kv.delete(self.key)
            log.info("대학 선택 해제됨")
            return GLOBAL_SCHEDULE
        if university not in load_schedules():
            raise UnknownUniversityError(university)
        await self.kv.set(self.key, university)
        log.info(f"대학 선택됨: {university}")
        return get_schedule(university)

    async def schedule(self, override: Optional[str] = None) -> Schedule:
        """요청 값 또는 저장된 선택에 해당하는 스케줄을 반환합니다."""
        return get_schedule(override or await self.get())
