"""
normalize 모듈 테스트

이 모듈은 HKO warnsum 응답을 경보 스냅샷으로 변환하는 함수를 테스트합니다.
"""

import json
import pytest
from datetime import datetime
from dateutil import tz

from gotou.core.models import WarningAction, WarningCategory
from gotou.core.normalize import FeedFormatError, parse_time, to_snapshot

HKT = tz.gettz("Asia/Hong_Kong")


class TestToSnapshot:
    """warnsum 변환 테스트"""

    def test_sample_payload(self, sample_warnsum):
        """대표 응답 변환"""
        snap = to_snapshot(sample_warnsum)
        by_type = {r.warning_type: r for r in snap.records}

        assert set(by_type) == {"WTCSGNL", "WRAIN", "WHOT"}

        signal = by_type["WTCSGNL"]
        assert signal.category == WarningCategory.TROPICAL_CYCLONE
        assert signal.code == "TC8NE"
        assert signal.action == WarningAction.ISSUED
        assert signal.issued_at == datetime(2025, 7, 20, 6, 30, tzinfo=HKT)
        assert signal.name == "Tropical Cyclone Warning Signal"

        assert by_type["WRAIN"].category == WarningCategory.RAINSTORM
        assert by_type["WHOT"].category == WarningCategory.OTHER
        assert by_type["WHOT"].action == WarningAction.CANCELLED

    def test_empty_object_means_no_warnings(self):
        """빈 객체는 경보 없음"""
        assert to_snapshot({}).records == []

    @pytest.mark.parametrize("action_code, expected", [
        ("ISSUE", WarningAction.ISSUED),
        ("REISSUE", WarningAction.ISSUED),
        ("EXTEND", WarningAction.ISSUED),
        ("UPDATE", WarningAction.ISSUED),
        ("CANCEL", WarningAction.CANCELLED),
        ("cancel", WarningAction.CANCELLED),
    ])
    def test_action_codes(self, action_code, expected):
        """actionCode 매핑"""
        snap = to_snapshot({"WRAIN": {"code": "WRAINB", "actionCode": action_code}})
        assert snap.records[0].action == expected

    def test_unknown_action_code_is_dropped(self):
        """알 수 없는 actionCode는 무시"""
        snap = to_snapshot({
            "WRAIN": {"code": "WRAINB", "actionCode": "EXPIRE"},
            "WTCSGNL": {"code": "TC8", "actionCode": "ISSUE"},
        })
        assert [r.code for r in snap.records] == ["TC8"]

    def test_entry_without_code_is_dropped(self):
        """code가 없는 항목은 무시"""
        assert to_snapshot({"WFIRE": {"actionCode": "ISSUE"}}).records == []

    def test_bytes_and_str_input(self, sample_warnsum):
        """bytes/str 입력"""
        raw = json.dumps(sample_warnsum)
        assert to_snapshot(raw) == to_snapshot(raw.encode("utf-8"))

    @pytest.mark.parametrize("raw", [[], "[1, 2]", 42, None, b"not json"])
    def test_non_object_payload_raises(self, raw):
        """객체가 아닌 응답은 FeedFormatError"""
        with pytest.raises(FeedFormatError):
            to_snapshot(raw)

    def test_schema_violation_raises(self):
        """스키마 위반 (항목이 객체가 아님)"""
        with pytest.raises(FeedFormatError):
            to_snapshot({"WRAIN": "WRAINB"})

    def test_feed_format_error_is_value_error(self):
        """FeedFormatError는 ValueError 하위 클래스"""
        assert issubclass(FeedFormatError, ValueError)


class TestParseTime:
    """시각 파싱 테스트"""

    def test_offset_is_converted_to_hkt(self):
        """UTC 시각은 홍콩 시각으로 변환"""
        parsed = parse_time("2025-07-19T22:30:00+00:00")
        assert parsed == datetime(2025, 7, 20, 6, 30, tzinfo=HKT)
        assert (parsed.hour, parsed.minute) == (6, 30)

    def test_naive_is_assumed_hkt(self):
        """오프셋 없는 시각은 홍콩 시각으로 간주"""
        parsed = parse_time("2025-07-20T06:30:00")
        assert parsed.tzinfo is not None
        assert (parsed.hour, parsed.minute) == (6, 30)

    @pytest.mark.parametrize("value", [None, "", "yesterday", 12345])
    def test_invalid_values(self, value):
        """파싱 불가 값은 None"""
        assert parse_time(value) is None
