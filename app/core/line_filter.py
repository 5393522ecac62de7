"""일정 텍스트의 잡음 줄 판별 모듈."""

from __future__ import annotations

from app.core.time_slots import TimelineParserConfig

# 활동 텍스트에도 다시 검사하는 리터럴 부분 문자열 목록
ADMIN_PHRASES: tuple[str, ...] = (
    "purchase a suica card",
    "purchase suica card",
    "buy a suica card",
    "buy suica card",
    "purchase a pasmo card",
    "purchase pasmo card",
    "buy a pasmo card",
    "buy pasmo card",
    "check into hotel",
    "hotel check-in",
    "check in to hotel",
    "collect luggage",
    "pick up luggage",
    "luggage collection",
    "airport transfer",
    "transfer to hotel",
    "travel to hotel from airport",
    "purchase sim card",
    "buy sim card",
    "activate sim card",
    "rent pocket wifi",
    "get pocket wifi",
    "currency exchange",
    "exchange money",
    "withdraw cash from atm",
    "immigration and customs",
    "clear customs",
    "customs clearance",
    "this itinerary assumes",
    "all costs are estimates",
    "adjust activities based on",
    "jr pass will be cost-effective",
    "purchase in advance",
)

# 원문 줄에만 적용하는 넓은 안내문 문구
PREAMBLE_PHRASES: tuple[str, ...] = (
    "this itinerary",
    "adjust activities",
    "jr pass",
    "all costs are estimates",
    "purchase in advance",
)

_MARKUP_PREFIXES = ("#", "**")


def contains_admin_phrase(text: str) -> bool:
    """안내문/행정 처리 문구가 포함되어 있는지 반환합니다."""
    lowered = " ".join((text or "").lower().split())
    return any(phrase in lowered for phrase in ADMIN_PHRASES)


def contains_preamble_phrase(text: str) -> bool:
    """일정 소개/면책 문구가 포함되어 있는지 반환합니다."""
    lowered = " ".join((text or "").lower().split())
    return any(phrase in lowered for phrase in PREAMBLE_PHRASES)


def should_skip_line(line: str, config: TimelineParserConfig | None = None) -> bool:
    """처리할 필요가 없는 줄이면 True를 반환합니다.

    빈 줄과 너무 짧은 줄, 마크다운 제목/굵은 글씨로 시작하는 줄, 안내문
    문구나 일정 소개 문구를 포함한 줄을 건너뜁니다.
    """
    min_length = config.min_line_length if config is not None else TimelineParserConfig().min_line_length
    trimmed = (line or "").strip()

    if len(trimmed) < min_length:
        return True
    if trimmed.startswith(_MARKUP_PREFIXES):
        return True
    return contains_preamble_phrase(trimmed) or contains_admin_phrase(trimmed)
