"""시작 시각 추출 및 합성 시각 정책 테스트."""

from app.core.config import Settings
from app.core.time_slots import (
    TimelineParserConfig,
    build_parser_config,
    extract_start_time,
    format_minutes_to_hhmm,
    parse_time_to_minutes,
    synthetic_start_time,
)


def test_parse_time_to_minutes_handles_meridiem() -> None:
    assert parse_time_to_minutes("9:00 AM") == 540
    assert parse_time_to_minutes("12:00 AM") == 0
    assert parse_time_to_minutes("12:30 PM") == 750
    assert parse_time_to_minutes("2 PM") == 840
    assert parse_time_to_minutes("18:45") == 1125


def test_parse_time_to_minutes_rejects_invalid_values() -> None:
    assert parse_time_to_minutes(None) is None
    assert parse_time_to_minutes("") is None
    assert parse_time_to_minutes("abc") is None
    assert parse_time_to_minutes("25:00") is None
    assert parse_time_to_minutes("10:75") is None


def test_format_minutes_to_hhmm_pads_values() -> None:
    assert format_minutes_to_hhmm(540) == "09:00"
    assert format_minutes_to_hhmm(65) == "01:05"


class TestExtractStartTime:
    """extract_start_time 테스트."""

    def test_clock_time_with_meridiem(self):
        assert extract_start_time("• 9:00 AM - Visit Senso-ji Temple") == "09:00"
        assert extract_start_time("2:30 PM tea at a garden cafe") == "14:30"

    def test_bare_hour_with_meridiem(self):
        assert extract_start_time("Dinner in Pontocho at 7pm") == "19:00"
        assert extract_start_time("Sunrise hike at 5 AM") == "05:00"

    def test_24_hour_clock(self):
        assert extract_start_time("Lunch break around 12:30") == "12:30"

    def test_no_time_present(self):
        assert extract_start_time("Visit 3 amazing temples") is None
        assert extract_start_time("Entry fee (¥500)") is None
        assert extract_start_time("") is None

    def test_skips_invalid_clock_values(self):
        assert extract_start_time("Arrive 25:99 then check out at 10:15") == "10:15"


class TestSyntheticStartTime:
    """synthetic_start_time 테스트."""

    def test_two_hour_spacing_from_nine(self):
        config = TimelineParserConfig()

        assert synthetic_start_time(0, config) == "09:00"
        assert synthetic_start_time(1, config) == "11:00"
        assert synthetic_start_time(6, config) == "21:00"

    def test_capped_at_latest_start_hour(self):
        config = TimelineParserConfig()

        assert synthetic_start_time(7, config) == "23:00"
        assert synthetic_start_time(20, config) == "23:00"


def test_build_parser_config_clamps_settings() -> None:
    settings = Settings(
        TIMELINE_DAY_START="10:30",
        TIMELINE_SLOT_INTERVAL_MINUTES=90,
        TIMELINE_LATEST_START_HOUR=30,
        TIMELINE_MAX_ACTIVITIES_PER_DAY=0,
        TIMELINE_MIN_ACTIVITY_LENGTH=-5,
    )

    config = build_parser_config(settings)

    assert config.day_start_minutes == 630
    assert config.slot_interval_minutes == 90
    assert config.latest_start_hour == 23
    assert config.max_activities_per_day == 1
    assert config.min_activity_length == 0


def test_build_parser_config_falls_back_on_invalid_day_start() -> None:
    config = build_parser_config(Settings(TIMELINE_DAY_START="noon"))

    assert config.day_start_minutes == 540
    assert config == TimelineParserConfig()
