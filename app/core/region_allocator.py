"""일차 번호로 소속 지역을 찾는 유틸리티."""

from __future__ import annotations

from typing import Sequence

from app.core.logger import get_logger
from app.schemas.timeline import Region, RegionAllocationEntry

logger = get_logger(__name__)


def resolve_region(day_number: int, allocation: Sequence[RegionAllocationEntry]) -> Region:
    """누적 배정 일수 범위에 `day_number`가 포함되는 지역을 반환합니다.

    배정 합계를 넘는 일차는 첫 번째 지역으로 대체합니다.

    Raises:
        ValueError: 배정 목록이 비어 있는 경우.
    """
    if not allocation:
        raise ValueError("지역 배정 목록이 비어 있습니다.")

    days_before = 0
    for entry in allocation:
        if day_number <= days_before + entry.days:
            return entry.region
        days_before += entry.days

    logger.warning("Day %s exceeds allocated days (%s); falling back to first region", day_number, days_before)
    return allocation[0].region
