"""타임라인 파싱 그래프 상태 정의."""

from typing import TypedDict

from app.schemas.timeline import Day, Timeline, TripParameters


class TimelineState(TypedDict, total=False):
    """타임라인 파싱 그래프 상태.

    Keys:
        itinerary_text: LLM이 생성한 원문 텍스트
        trip: 여행 파라미터
        lines: 잡음 줄을 걸러낸 후보 줄 목록
        skipped_lines: 걸러낸 줄 수
        days_by_number: 추출 단계에서 만든 일차별 일정
        timeline: 최종 타임라인
    """

    itinerary_text: str
    trip: TripParameters
    lines: list[str]
    skipped_lines: int
    days_by_number: dict[int, Day]
    timeline: Timeline
