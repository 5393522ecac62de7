"""일차/활동 추출 노드."""

from __future__ import annotations

from langchain_core.runnables import RunnableConfig

from app.core.logger import get_logger
from app.graph.timeline.accumulator import DayAccumulator
from app.graph.timeline.nodes._config import resolve_parser_config
from app.graph.timeline.state import TimelineState

logger = get_logger(__name__)


def extract_days(state: TimelineState, config: RunnableConfig) -> TimelineState:
    """후보 줄을 순서대로 누산기에 넣어 일차별 일정을 만듭니다."""
    trip = state["trip"]
    accumulator = DayAccumulator(trip=trip, config=resolve_parser_config(config))

    added = 0
    for line in state.get("lines", []):
        if accumulator.consume(line) is not None:
            added += 1

    logger.info(
        "Extracted %d activities across %d days (expected %d)",
        added,
        len(accumulator.days_by_number),
        trip.total_duration,
    )
    return {"days_by_number": accumulator.days_by_number}
