"""
테스트 설정 및 픽스처

이 모듈은 pytest 설정과 공통 픽스처를 제공합니다.
"""

import pytest
import inspect
import tempfile
import os
from datetime import datetime
from unittest.mock import AsyncMock
from dateutil import tz
from gotou.settings import Settings

HKT = tz.gettz("Asia/Hong_Kong")


@pytest.fixture
def temp_db_path():
    """임시 데이터베이스 파일 경로"""
    with tempfile.NamedTemporaryFile(suffix='.db', delete=False) as f:
        temp_path = f.name
    yield temp_path
    # 테스트 후 파일 정리
    if os.path.exists(temp_path):
        os.unlink(temp_path)


@pytest.fixture
def sample_settings():
    """테스트용 설정"""
    settings = Settings()
    settings.observability.service_name = "test-service"
    settings.observability.build_version = "1.0.0"
    settings.observability.log_level = "INFO"
    settings.observability.http_port = 8080
    return settings


@pytest.fixture
def morning_now():
    """오전 결정 시각 직후 (07:05 HKT)"""
    return datetime(2025, 7, 20, 7, 5, tzinfo=HKT)


@pytest.fixture
def sample_warnsum():
    """테스트용 HKO warnsum 응답"""
    return {
        "WTCSGNL": {
            "name": "Tropical Cyclone Warning Signal",
            "code": "TC8NE",
            "type": "No. 8 Northeast Gale or Storm Signal",
            "actionCode": "ISSUE",
            "issueTime": "2025-07-20T06:30:00+08:00",
            "updateTime": "2025-07-20T06:30:00+08:00"
        },
        "WRAIN": {
            "name": "Rainstorm Warning Signal",
            "code": "WRAINA",
            "actionCode": "ISSUE",
            "issueTime": "2025-07-20T05:10:00+08:00",
            "updateTime": "2025-07-20T05:10:00+08:00"
        },
        "WHOT": {
            "name": "Very Hot Weather Warning",
            "code": "WHOT",
            "actionCode": "CANCEL",
            "issueTime": "2025-07-19T06:45:00+08:00",
            "updateTime": "2025-07-19T18:45:00+08:00"
        }
    }


@pytest.fixture
def mock_clock():
    """테스트용 시각 포트"""
    return AsyncMock()


@pytest.fixture
def mock_feed():
    """테스트용 경보 피드 포트"""
    return AsyncMock()


# pytest 설정
def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line(
        "markers", "asyncio: 비동기 테스트 마커"
    )
    config.addinivalue_line(
        "markers", "integration: 통합 테스트 마커"
    )


def pytest_collection_modifyitems(config, items):
    """테스트 아이템 수정"""
    for item in items:
        # 비동기 테스트에 asyncio 마커 추가
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)

        # 통합 테스트 마커 추가
        if "integration" in item.name:
            item.add_marker(pytest.mark.integration)
