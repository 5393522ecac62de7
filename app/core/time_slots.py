"""활동 시작 시각 추출 및 합성 시각 정책 모듈."""

from __future__ import annotations

import re
from dataclasses import dataclass

from app.core.config import Settings, get_settings

_DEFAULT_DAY_START = "09:00"
_DEFAULT_SLOT_INTERVAL_MINUTES = 120
_DEFAULT_LATEST_START_HOUR = 23
_DEFAULT_MAX_ACTIVITIES_PER_DAY = 10
_DEFAULT_MIN_ACTIVITY_LENGTH = 10
_DEFAULT_MIN_LINE_LENGTH = 5

# HH:MM (선택적 AM/PM) 또는 H AM/PM
_TIME_PATTERN = re.compile(
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2})(?:\s*(?P<meridiem>[AaPp][Mm])\b)?"
    r"|(?P<bare_hour>\d{1,2})\s*(?P<bare_meridiem>[AaPp][Mm])\b"
)


@dataclass(frozen=True, slots=True)
class TimelineParserConfig:
    """타임라인 파서 동작 설정."""

    day_start_minutes: int = 540
    slot_interval_minutes: int = _DEFAULT_SLOT_INTERVAL_MINUTES
    latest_start_hour: int = _DEFAULT_LATEST_START_HOUR
    max_activities_per_day: int = _DEFAULT_MAX_ACTIVITIES_PER_DAY
    min_activity_length: int = _DEFAULT_MIN_ACTIVITY_LENGTH
    min_line_length: int = _DEFAULT_MIN_LINE_LENGTH


def parse_time_to_minutes(value: str | None) -> int | None:
    """`HH:MM` 또는 `H AM/PM` 형식 문자열을 자정 기준 분으로 파싱합니다."""
    if not value:
        return None

    text = str(value).strip().upper()
    if not text:
        return None

    is_pm = "PM" in text
    is_am = "AM" in text
    cleaned = text.replace("AM", "").replace("PM", "").strip().rstrip(":")

    parts = cleaned.split(":")
    try:
        hour = int(parts[0])
        minute = int(parts[1]) if len(parts) > 1 else 0
    except (TypeError, ValueError, IndexError):
        return None

    if is_pm and hour != 12:
        hour += 12
    elif is_am and hour == 12:
        hour = 0

    if not (0 <= hour < 24 and 0 <= minute < 60):
        return None
    return hour * 60 + minute


def format_minutes_to_hhmm(total_minutes: int) -> str:
    """분 단위 시간을 HH:MM으로 포맷합니다."""
    normalized = max(0, int(total_minutes))
    hour = (normalized // 60) % 24
    minute = normalized % 60
    return f"{hour:02d}:{minute:02d}"


def extract_start_time(text: str) -> str | None:
    """텍스트 어디에서든 처음 등장하는 유효한 시각을 `HH:MM`으로 반환합니다.

    `9:00`, `14:30`, `2:30 PM`, `7pm` 형식을 인식합니다. 시각으로 해석할 수
    없는 값(예: `25:00`)은 건너뛰고 다음 후보를 찾습니다.
    """
    for match in _TIME_PATTERN.finditer(text or ""):
        if match.group("hour") is not None:
            raw = f"{match.group('hour')}:{match.group('minute')} {match.group('meridiem') or ''}"
        else:
            raw = f"{match.group('bare_hour')} {match.group('bare_meridiem')}"

        minutes = parse_time_to_minutes(raw)
        if minutes is not None:
            return format_minutes_to_hhmm(minutes)
    return None


def synthetic_start_time(activities_in_day: int, config: TimelineParserConfig) -> str:
    """시각이 없는 활동에 `시작 시각 + 간격 × 기존 활동 수`를 부여합니다.

    결과는 `latest_start_hour` 정각을 넘지 않습니다.
    """
    candidate = config.day_start_minutes + config.slot_interval_minutes * max(0, activities_in_day)
    latest = config.latest_start_hour * 60
    return format_minutes_to_hhmm(min(candidate, latest))


def _parse_day_start(value: str) -> int:
    parsed = parse_time_to_minutes(value)
    if parsed is None:
        parsed = parse_time_to_minutes(_DEFAULT_DAY_START)
    return parsed if parsed is not None else 540


def build_parser_config(settings: Settings | None = None) -> TimelineParserConfig:
    """설정값으로 파서 구성을 만듭니다."""
    resolved_settings = settings or get_settings()

    return TimelineParserConfig(
        day_start_minutes=_parse_day_start(resolved_settings.TIMELINE_DAY_START),
        slot_interval_minutes=max(0, int(resolved_settings.TIMELINE_SLOT_INTERVAL_MINUTES)),
        latest_start_hour=min(23, max(0, int(resolved_settings.TIMELINE_LATEST_START_HOUR))),
        max_activities_per_day=max(1, int(resolved_settings.TIMELINE_MAX_ACTIVITIES_PER_DAY)),
        min_activity_length=max(0, int(resolved_settings.TIMELINE_MIN_ACTIVITY_LENGTH)),
        min_line_length=max(1, int(resolved_settings.TIMELINE_MIN_LINE_LENGTH)),
    )
