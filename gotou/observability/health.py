"""
HTTP endpoints for GoToU.

This module implements the status, university selection, health,
readiness, metrics and info endpoints.
"""

from typing import Optional
from fastapi import FastAPI, HTTPException, Body, Query
from fastapi.responses import Response, JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
import time
from gotou.settings import Settings
from gotou.core.schedules import load_schedules
from gotou.adapters.storage.selection import UnknownUniversityError
from gotou.orchestrators.poller import StatusPoller
from gotou.observability.logging_setup import get_logger

log = get_logger("gotou.http")

def create_app(settings: Settings, poller: StatusPoller) -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title=settings.observability.service_name,
        version=settings.observability.build_version,
        description="Hong Kong severe weather class suspension status"
    )

    start_time = time.time()

    @app.get("/health")
    async def health():
        """헬스 체크 엔드포인트"""
        return JSONResponse({
            "status": "ok",
            "service": settings.observability.service_name,
            "timestamp": time.time()
        })

    @app.get("/ready")
    async def ready():
        """레디니스 체크 엔드포인트 (스케줄 카탈로그 로드 여부)"""
        try:
            count = len(load_schedules())
        except (OSError, ValueError) as e:
            log.error(f"스케줄 카탈로그 로드 실패: {e}")
            raise HTTPException(status_code=503, detail="Schedule catalogue unavailable")
        return JSONResponse({
            "status": "ready",
            "service": settings.observability.service_name,
            "schedules": count,
            "timestamp": time.time()
        })

    @app.get("/metrics")
    async def metrics():
        """Prometheus 메트릭 엔드포인트"""
        if not settings.observability.metrics_enabled:
            raise HTTPException(status_code=503, detail="Metrics disabled")
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.get("/info")
    async def info():
        """서비스 정보 엔드포인트"""
        uptime = time.time() - start_time
        return JSONResponse({
            "service": settings.observability.service_name,
            "version": settings.observability.build_version,
            "build_date": settings.observability.build_date,
            "uptime_seconds": int(uptime),
            "metrics_enabled": settings.observability.metrics_enabled,
            "log_level": settings.observability.log_level,
            "test_mode": settings.feed.test_mode,
            "refresh_interval_sec": settings.poller.refresh_interval_sec
        })

    @app.get("/universities")
    async def universities():
        """대학 목록 엔드포인트"""
        return [s.model_dump(mode="json") for s in load_schedules().values()]

    @app.get("/selection")
    async def get_selection():
        """저장된 대학 선택 조회"""
        return {"university": await poller.selection.get()}

    @app.put("/selection")
    async def put_selection(payload: dict = Body(default={})):
        """대학 선택 저장 (빈 값이면 해제)"""
        university = payload.get("university")
        try:
            schedule = await poller.selection.select(university)
        except UnknownUniversityError:
            raise HTTPException(status_code=404, detail=f"Unknown university: {university}")
        return {"university": university or None, "schedule": schedule.model_dump(mode="json")}

    @app.get("/status")
    async def status(university: Optional[str] = Query(default=None)):
        """휴강 상태 엔드포인트"""
        result, view = await poller.check(university)
        return {
            "status": view.model_dump(mode="json"),
            "decision": result.model_dump(mode="json") if result else None,
        }

    @app.get("/")
    async def root():
        """루트 엔드포인트"""
        return JSONResponse({
            "service": settings.observability.service_name,
            "version": settings.observability.build_version,
            "endpoints": {
                "status": "/status",
                "universities": "/universities",
                "selection": "/selection",
                "health": "/health",
                "ready": "/ready",
                "metrics": "/metrics",
                "info": "/info"
            }
        })

    return app
