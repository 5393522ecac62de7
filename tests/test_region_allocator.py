"""지역 배정 유틸 테스트."""

import pytest

from app.core.region_allocator import resolve_region
from app.schemas.timeline import Region, RegionAllocationEntry

REGION_A = Region(id="kanto", name="Kanto")
REGION_B = Region(id="kansai", name="Kansai")


def _allocation() -> list[RegionAllocationEntry]:
    return [
        RegionAllocationEntry(region=REGION_A, days=2),
        RegionAllocationEntry(region=REGION_B, days=3),
    ]


@pytest.mark.parametrize(("day_number", "expected"), [(1, REGION_A), (2, REGION_A), (3, REGION_B), (5, REGION_B)])
def test_resolve_region_by_cumulative_range(day_number: int, expected: Region) -> None:
    assert resolve_region(day_number, _allocation()) == expected


def test_resolve_region_falls_back_to_first_region() -> None:
    assert resolve_region(6, _allocation()) == REGION_A
    assert resolve_region(99, _allocation()) == REGION_A


def test_resolve_region_requires_allocation() -> None:
    with pytest.raises(ValueError):
        resolve_region(1, [])
