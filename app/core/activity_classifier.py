"""활동 텍스트 분류기 모음.

각 분류기는 `(키워드 목록, 결과)` 규칙을 순서대로 검사하고 처음 일치한
규칙의 결과를 반환합니다. 규칙 순서가 곧 우선순위이며, 모든 비교는
소문자 부분 문자열 일치입니다.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Sequence

from app.core.area_catalog import (
    LOCAL_TRANSIT_COST,
    LOCAL_TRANSIT_LINES,
    LOCAL_TRANSIT_MINUTES,
    LOCAL_TRANSIT_MODE,
    areas_for_region,
    family_of_name,
    find_route,
)
from app.schemas.enums import ActivityCategory
from app.schemas.timeline import LocationDescriptor, Region, TransportDescriptor

# 식사 > 이동 > 숙박 > 체험 > 관광지(기본)
CATEGORY_RULES: Sequence[tuple[tuple[str, ...], ActivityCategory]] = (
    (("meal", "dinner", "lunch", "breakfast", "restaurant", "food"), ActivityCategory.MEAL),
    (("transport", "train", "travel", "shinkansen"), ActivityCategory.TRANSPORT),
    (("hotel", "ryokan", "accommodation", "check-in"), ActivityCategory.ACCOMMODATION),
    (("ceremony", "experience", "tour"), ActivityCategory.EXPERIENCE),
)
DEFAULT_CATEGORY = ActivityCategory.ATTRACTION

DURATION_RULES: Sequence[tuple[tuple[str, ...], int]] = (
    (("meal", "dinner", "lunch", "breakfast"), 60),
    (("temple", "shrine", "museum"), 120),
    (("walk", "stroll"), 90),
    (("experience", "ceremony"), 180),
)
DEFAULT_DURATION_MINUTES = 120

COST_RULES: Mapping[ActivityCategory, tuple[Sequence[tuple[tuple[str, ...], int]], int]] = MappingProxyType(
    {
        ActivityCategory.MEAL: (
            (
                (("expensive", "fine dining"), 8000),
                (("cheap", "street food"), 1000),
            ),
            3000,
        ),
        ActivityCategory.TRANSPORT: (
            (
                (("shinkansen",), 8000),
                (("train",), 500),
            ),
            300,
        ),
        ActivityCategory.ACCOMMODATION: (((("luxury", "ryokan"), 15000),), 8000),
        ActivityCategory.EXPERIENCE: ((), 2000),
        ActivityCategory.ATTRACTION: (((("free",), 0),), 1500),
    }
)
DEFAULT_COST = 1000

ICON_RULES: Mapping[ActivityCategory, tuple[Sequence[tuple[tuple[str, ...], str]], str]] = MappingProxyType(
    {
        ActivityCategory.MEAL: (
            (
                (("sushi",), "🍣"),
                (("ramen",), "🍜"),
                (("tempura",), "🍤"),
                (("tea",), "🍵"),
            ),
            "🍽️",
        ),
        ActivityCategory.TRANSPORT: (
            (
                (("shinkansen",), "🚄"),
                (("train",), "🚃"),
            ),
            "🚌",
        ),
        ActivityCategory.ACCOMMODATION: (((("ryokan",), "🏯"),), "🏨"),
        ActivityCategory.EXPERIENCE: (
            (
                (("tea ceremony",), "🍵"),
                (("meditation",), "🧘"),
            ),
            "✨",
        ),
        ActivityCategory.ATTRACTION: (
            (
                (("temple",), "⛩️"),
                (("shrine",), "🏮"),
                (("castle",), "🏯"),
                (("garden",), "🌸"),
                (("mountain", "fuji"), "🗻"),
                (("market",), "🏪"),
                (("museum",), "🏛️"),
            ),
            "📍",
        ),
    }
)
DEFAULT_ICON = "📍"

_YEN_PATTERN = re.compile(
    r"[¥￥]\s*(?P<prefixed>\d[\d,]*)|(?P<suffixed>\d[\d,]*)\s*(?:yen\b|jpy\b|円)",
    re.IGNORECASE,
)


def first_match(text: str, rules: Sequence[tuple[tuple[str, ...], object]], default):
    """규칙 목록에서 처음 일치한 결과를 반환합니다."""
    lowered = (text or "").lower()
    for keywords, result in rules:
        if any(keyword in lowered for keyword in keywords):
            return result
    return default


def classify_category(text: str) -> ActivityCategory:
    """활동 분류를 판별합니다."""
    return first_match(text, CATEGORY_RULES, DEFAULT_CATEGORY)


def estimate_duration(text: str) -> int:
    """활동 소요 시간(분)을 추정합니다."""
    return first_match(text, DURATION_RULES, DEFAULT_DURATION_MINUTES)


def extract_explicit_cost(text: str) -> int | None:
    """텍스트에 명시된 엔화 금액(`¥500`, `1,200 yen`, `500円`)을 반환합니다."""
    match = _YEN_PATTERN.search(text or "")
    if match is None:
        return None
    digits = (match.group("prefixed") or match.group("suffixed") or "").replace(",", "")
    return int(digits) if digits else None


def estimate_cost(text: str, category: ActivityCategory) -> int:
    """활동 비용(엔)을 추정합니다. 명시된 금액이 있으면 그 값을 우선합니다."""
    explicit = extract_explicit_cost(text)
    if explicit is not None:
        return explicit

    rules, category_default = COST_RULES.get(category, ((), DEFAULT_COST))
    return first_match(text, rules, category_default)


def pick_icon(text: str, category: ActivityCategory) -> str:
    """분류와 키워드로 표시 아이콘을 고릅니다."""
    rules, category_default = ICON_RULES.get(category, ((), DEFAULT_ICON))
    return first_match(text, rules, category_default)


def extract_location(text: str, region: Region) -> LocationDescriptor:
    """활동 텍스트에서 구역을 찾고, 없으면 지역명으로 대체합니다."""
    lowered = (text or "").lower()
    for keyword, info in areas_for_region(region.name, region.id).items():
        if keyword in lowered:
            return LocationDescriptor(name=info.area, area=info.area, ward=info.ward, station=info.station)

    return LocationDescriptor(name=region.name, area=region.name, station=f"{region.name} Station")


def format_location_label(location: LocationDescriptor) -> str:
    """`<구역>, <행정구역 또는 장소명>` 형식의 표시 문자열을 만듭니다."""
    return f"{location.area}, {location.ward or location.name}"


def detect_transport(from_area: str, to_area: str) -> TransportDescriptor:
    """두 구역 사이의 이동 정보를 추정합니다.

    서로 다른 광역권이면 해당 쌍의 고정 장거리 노선을, 그 외에는 일반
    근거리 열차 이동을 반환합니다.
    """
    from_family = family_of_name(from_area)
    to_family = family_of_name(to_area)

    route = find_route(from_family, to_family)
    if route is not None:
        return TransportDescriptor(
            mode=route.mode,
            line=route.line,
            duration_minutes=route.duration_minutes,
            cost=route.cost,
            instructions=f"Take {route.line} from {from_area} to {to_area} ({route.duration_label})",
        )

    line = LOCAL_TRANSIT_LINES.get(from_family) if from_family == to_family else None
    return TransportDescriptor(
        mode=LOCAL_TRANSIT_MODE,
        line=line,
        duration_minutes=LOCAL_TRANSIT_MINUTES,
        cost=LOCAL_TRANSIT_COST,
        instructions=f"Take train from {from_area} to {to_area} ({LOCAL_TRANSIT_MINUTES} min)",
    )
