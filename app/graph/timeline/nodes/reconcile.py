"""일차 보정 및 최종 타임라인 합성 노드."""

from __future__ import annotations

from typing import Mapping

from app.core.logger import get_logger
from app.core.region_allocator import resolve_region
from app.graph.timeline.state import TimelineState
from app.schemas.timeline import Day, Timeline, TripParameters

logger = get_logger(__name__)


def reconcile_day_map(days_by_number: Mapping[int, Day], trip: TripParameters) -> list[Day]:
    """1부터 전체 일수까지 정확히 하나씩의 일차를 반환합니다.

    추출된 일차는 그대로 두고, 빠진 일차는 빈 일정으로 채우며, 범위를 벗어난
    일차는 버립니다.
    """
    expected = trip.total_duration

    for day_number in sorted(days_by_number):
        if not 1 <= day_number <= expected:
            logger.warning("Discarding out-of-range day %s (expected 1-%s)", day_number, expected)

    days: list[Day] = []
    for day_number in range(1, expected + 1):
        day = days_by_number.get(day_number)
        if day is None:
            region = resolve_region(day_number, trip.regions)
            day = Day(day_number=day_number, region=region)
            logger.debug("Filled empty day %s for %s", day_number, region.name)
        days.append(day)

    if len(days) != expected:
        logger.error("Day count mismatch: got %d, expected %d", len(days), expected)
    return days


def reconcile_days(state: TimelineState) -> TimelineState:
    """일차 목록을 보정하고 최종 타임라인을 만듭니다."""
    trip = state["trip"]
    days = reconcile_day_map(state.get("days_by_number", {}), trip)

    for day in days:
        logger.info(
            "Day %s: %d activities in %s, cost: ¥%s",
            day.day_number,
            len(day.activities),
            day.region.name,
            day.total_cost,
        )

    timeline = Timeline(
        days=days,
        total_duration=trip.total_duration,
        regions=trip.regions,
        travel_style=trip.travel_style,
        season=trip.season,
    )
    return {"timeline": timeline}
