# gotou/main.py
import os, asyncio, signal
from typing import Optional
import uvicorn
from gotou.settings import Settings
from gotou.observability.health import create_app
from gotou.observability.logging_setup import setup_logging, get_logger
from gotou.adapters.hko.client import HKOWarningClient
from gotou.adapters.clock.worldtime import WorldTimeClock
from gotou.adapters.storage.sqlite_kv import SQLiteKVStore
from gotou.adapters.storage.selection import SelectionStore
from gotou.core.schedules import load_schedules
from gotou.orchestrators.poller import StatusPoller

def _b(name, default=False): return os.getenv(name, str(default)).lower() in ("1","true","yes","on")

def build_settings() -> Settings:
    s = Settings()

    # 경보 피드
    s.feed.url = os.getenv("HKO_WARNSUM_URL", s.feed.url)
    s.feed.lang = os.getenv("HKO_LANG", s.feed.lang)
    s.feed.timeout_sec = float(os.getenv("HKO_TIMEOUT_SEC", s.feed.timeout_sec))
    s.feed.max_retries = int(os.getenv("HKO_MAX_RETRIES", s.feed.max_retries))
    s.feed.test_mode = _b("TEST_MODE", s.feed.test_mode)
    s.feed.test_data_path = os.getenv("TEST_DATA_PATH", s.feed.test_data_path)

    # 시각
    s.clock.url = os.getenv("TIME_API_URL", s.clock.url)

    # 저장소
    s.storage.selection_path = os.getenv("SELECTION_DB_PATH", s.storage.selection_path)

    # 폴러
    s.poller.enabled = _b("POLLER_ENABLED", s.poller.enabled)
    s.poller.refresh_interval_sec = float(os.getenv("REFRESH_INTERVAL_SEC", s.poller.refresh_interval_sec))
    s.poller.university = os.getenv("UNIVERSITY", s.poller.university)

    # 관측성
    s.observability.http_port = int(os.getenv("HTTP_PORT", s.observability.http_port))
    s.observability.metrics_enabled = _b("METRICS_ENABLED", s.observability.metrics_enabled)
    s.observability.log_level = os.getenv("LOG_LEVEL", s.observability.log_level)
    s.observability.json_logs = _b("LOG_JSON", s.observability.json_logs)

    return s

def build_poller(s: Settings) -> StatusPoller:
    feed = HKOWarningClient(
        s.feed.url,
        data_type=s.feed.data_type,
        lang=s.feed.lang,
        timeout=s.feed.timeout_sec,
        max_retries=s.feed.max_retries,
        backoff_initial=s.feed.backoff_initial_sec,
        backoff_max=s.feed.backoff_max_sec,
        test_mode=s.feed.test_mode,
        test_data_path=s.feed.test_data_path,
    )
    clock = WorldTimeClock(s.clock.url, timeout=s.clock.timeout_sec, timezone=s.clock.timezone)
    selection = SelectionStore(SQLiteKVStore(s.storage.selection_path), key=s.storage.selection_key)
    return StatusPoller(
        clock, feed, selection,
        refresh_interval_sec=s.poller.refresh_interval_sec,
        university=s.poller.university,
    )

async def start_http(settings: Settings, poller: StatusPoller) -> asyncio.Task:
    app = create_app(settings, poller)
    return asyncio.create_task(uvicorn.Server(
        uvicorn.Config(app, host=settings.observability.http_host, port=settings.observability.http_port,
                       log_level=settings.observability.log_level.lower())
    ).serve())

async def main():
    s = build_settings()
    setup_logging(s.observability.log_level, json_logs=s.observability.json_logs)
    log = get_logger()
    log.info("설정 로드 완료")

    # 정적 설정은 시작 시 한 번 로드
    load_schedules()

    poller = build_poller(s)
    await poller.selection.kv.init()
    log.info("상태 폴러 생성 완료")

    http_task = await start_http(s, poller)
    log.info(f"HTTP 서버 시작됨 port:{s.observability.http_port}")

    poll_task: Optional[asyncio.Task] = None
    if s.poller.enabled:
        poll_task = asyncio.create_task(poller.start())

    stop = asyncio.Future()
    try:
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGTERM, signal.SIGINT):
            try: loop.add_signal_handler(sig, lambda: (not stop.done()) and stop.set_result(True))
            except NotImplementedError: pass
    except RuntimeError: pass

    await stop
    log.info("종료 중")
    if poll_task: poll_task.cancel()
    http_task.cancel()

def run():
    asyncio.run(main())

if __name__ == "__main__":
    run()
