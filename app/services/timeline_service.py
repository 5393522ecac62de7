"""일정 텍스트를 타임라인으로 변환하는 서비스."""

from __future__ import annotations

from app.core.logger import get_logger
from app.core.time_slots import TimelineParserConfig, build_parser_config
from app.graph.timeline.workflow import compiled_timeline_graph
from app.schemas.timeline import Timeline, TripParameters

logger = get_logger(__name__)


def parse(text: str, params: TripParameters, *, config: TimelineParserConfig | None = None) -> Timeline:
    """자유 형식 일정 텍스트를 일차별 타임라인으로 변환합니다.

    입력 텍스트가 어떤 형태든 예외 없이 정확히 `params.total_duration`개의
    일차를 반환합니다. 같은 입력에는 항상 같은 결과를 돌려줍니다.

    Args:
        text: LLM이 생성한 일정 텍스트.
        params: 여행 일수와 지역 배정.
        config: 파서 설정. 없으면 환경 설정값을 사용합니다.

    Returns:
        일차 순으로 정렬된 타임라인.
    """
    parser_config = config or build_parser_config()
    logger.info(
        "Parsing itinerary text: %d chars, %d days, regions=%s",
        len(text or ""),
        params.total_duration,
        [f"{entry.region.name} ({entry.days} days)" for entry in params.regions],
    )

    result = compiled_timeline_graph.invoke(
        {"itinerary_text": text or "", "trip": params},
        config={"configurable": {"parser_config": parser_config}},
    )
    return result["timeline"]
