from __future__ import annotations
import logging
import sys
from loguru import logger

# ---- stdlib logging → loguru 인터셉트 ----
class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())

def _hook_stdlib_logging() -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    # uvicorn, aiohttp 로그도 loguru로 흡수
    for noisy in ("uvicorn", "uvicorn.error", "uvicorn.access", "aiohttp", "asyncio"):
        l = logging.getLogger(noisy)
        l.handlers = [InterceptHandler()]
        l.propagate = False

# ---- 개발 콘솔 포맷(사람 친화, extra 미노출) ----
DEV_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level:<7}</level> | "
    "<cyan>{extra[name]}</cyan> | "
    "<cyan>{file}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

def setup_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """
    loguru 초기화.
    - 개발: 콘솔 컬러 출력
    - 운영(json_logs): 한 줄 JSON 출력
    - stdlib logging 흡수
    """
    logger.remove()  # 기본 sink 제거
    logger.configure(extra={"name": "gotou"})
    if json_logs:
        logger.add(
            sink=sys.stdout,
            serialize=True,
            level=log_level.upper(),
            backtrace=False,
            diagnose=False,
        )
    else:
        logger.add(
            sink=lambda m: print(m, end=""),
            format=DEV_FORMAT,
            colorize=True,
            backtrace=True,   # dev에서만 편의상 True
            diagnose=False,   # 과도한 진단은 끔
            level=log_level.upper(),
            enqueue=False,    # 콘솔은 큐 불필요
        )
    _hook_stdlib_logging()

def get_logger(name: str = "gotou", **ctx):
    """선택적으로 컨텍스트를 바인딩한 logger 반환."""
    return logger.bind(name=name, **ctx)