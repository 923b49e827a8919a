# gotou/settings.py
from __future__ import annotations
from pydantic import BaseModel, Field

class FeedConfig(BaseModel):
    url: str = "https://data.weather.gov.hk/weatherAPI/opendata/weather.php"
    data_type: str = "warnsum"
    lang: str = "en"                          # en | tc | sc
    timeout_sec: float = 10.0
    max_retries: int = 2
    backoff_initial_sec: float = 0.5
    backoff_max_sec: float = 5.0
    test_mode: bool = False                   # True면 로컬 JSON 사용
    test_data_path: str = "test-warnings.json"

class ClockConfig(BaseModel):
    url: str = "http://worldtimeapi.org/api/timezone/Asia/Hong_Kong"
    timeout_sec: float = 5.0
    timezone: str = "Asia/Hong_Kong"

class Storage(BaseModel):
    selection_path: str = "/data/selection.db"
    selection_key: str = "selectedUniversity"

class Poller(BaseModel):
    enabled: bool = True
    refresh_interval_sec: float = 300.0       # 5분 자동 새로고침
    university: str | None = None

class Observability(BaseModel):
    http_host: str = "0.0.0.0"
    http_port: int = 8099
    metrics_enabled: bool = True
    service_name: str = "GoToU"
    build_version: str = "0.1.0"
    build_date: str = "2025-01-01"
    log_level: str = "INFO"
    json_logs: bool = False

class Settings(BaseModel):
    # 하위 섹션 (기본값/팩토리로 누락 방지)
    feed: FeedConfig = Field(default_factory=FeedConfig)
    clock: ClockConfig = Field(default_factory=ClockConfig)
    storage: Storage = Field(default_factory=Storage)
    poller: Poller = Field(default_factory=Poller)
    observability: Observability = Field(default_factory=Observability)
