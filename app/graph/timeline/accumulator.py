"""일차/활동 추출 누산기.

걸러진 줄을 순서대로 하나씩 소비하면서 현재 일차를 추적하고, 활동을
현재 일차에 붙입니다. 호출마다 새 누산기를 만들기 때문에 호출 간 공유
상태가 없습니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from app.core.activity_classifier import (
    classify_category,
    detect_transport,
    estimate_cost,
    estimate_duration,
    extract_location,
    format_location_label,
    pick_icon,
)
from app.core.line_filter import contains_admin_phrase
from app.core.logger import get_logger
from app.core.region_allocator import resolve_region
from app.core.time_slots import TimelineParserConfig, extract_start_time, synthetic_start_time
from app.graph.timeline.utils import (
    build_activity_id,
    clean_activity_text,
    is_activity_candidate,
    match_day_header,
    strip_parenthesized,
)
from app.schemas.timeline import Activity, Day, TripParameters

logger = get_logger(__name__)


@dataclass(slots=True)
class DayAccumulator:
    """줄 단위 추출 상태.

    Attributes:
        trip: 여행 파라미터 (읽기 전용)
        config: 파서 설정
        current_day_number: 활동을 붙일 현재 일차
        days_by_number: 지연 생성되는 일차별 일정
    """

    trip: TripParameters
    config: TimelineParserConfig
    current_day_number: int = 1
    days_by_number: dict[int, Day] = field(default_factory=dict)

    def get_or_create_day(self, day_number: int) -> Day:
        """일차가 없으면 지역 배정에 따라 새로 만듭니다."""
        day = self.days_by_number.get(day_number)
        if day is not None:
            return day

        region = resolve_region(day_number, self.trip.regions)
        day = Day(day_number=day_number, region=region)
        self.days_by_number[day_number] = day
        logger.debug("Created day %s for region %s", day_number, region.name)
        return day

    def consume(self, line: str) -> Activity | None:
        """줄 하나를 처리하고, 활동이 추가되면 그 활동을 반환합니다."""
        trimmed = (line or "").strip()

        header_day = match_day_header(trimmed)
        if header_day is not None:
            self._enter_day(header_day, trimmed)
            return None

        cleaned = clean_activity_text(trimmed)
        if not is_activity_candidate(cleaned):
            logger.debug("Dropped non-activity line: %s", trimmed[:50])
            return None

        if contains_admin_phrase(trimmed) or contains_admin_phrase(cleaned):
            logger.debug("Skipped admin text: %s", cleaned[:50])
            return None

        if len(cleaned) <= self.config.min_activity_length:
            logger.debug("Dropped short activity text: %s", cleaned)
            return None

        return self._append_activity(trimmed, cleaned)

    def _enter_day(self, day_number: int, header: str) -> None:
        if not 1 <= day_number <= self.trip.total_duration:
            logger.warning(
                "Ignored out-of-range day header (expected 1-%s): %s",
                self.trip.total_duration,
                header[:50],
            )
            return

        self.current_day_number = day_number
        self.get_or_create_day(day_number)
        logger.debug("Entered day %s", day_number)

    def _append_activity(self, raw_line: str, cleaned: str) -> Activity:
        day_number = self.current_day_number
        day = self.get_or_create_day(day_number)
        index_in_day = len(day.activities)

        category = classify_category(cleaned)
        start_time = extract_start_time(raw_line)
        if start_time is None:
            start_time = synthetic_start_time(index_in_day, self.config)

        location = extract_location(cleaned, day.region)
        transport = None
        if day.activities:
            previous = day.activities[-1]
            if previous.location is not None:
                transport = detect_transport(previous.location.area, location.area)

        activity = Activity(
            id=build_activity_id(day_number, index_in_day),
            name=strip_parenthesized(cleaned) or cleaned,
            description=cleaned,
            start_time=start_time,
            duration_minutes=estimate_duration(cleaned),
            category=category,
            icon=pick_icon(cleaned, category),
            estimated_cost=estimate_cost(cleaned, category),
            location=location,
            location_label=format_location_label(location),
            transport=transport,
        )

        day.activities.append(activity)
        day.recompute_total_cost()
        logger.debug("Added %s to day %s: %s", activity.id, day_number, activity.name[:50])

        if len(day.activities) >= self.config.max_activities_per_day and day_number < self.trip.total_duration:
            self.current_day_number = day_number + 1
            logger.info("Auto-advanced from day %s to day %s after %s activities", day_number, day_number + 1, len(day.activities))

        return activity
