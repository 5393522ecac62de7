"""광역권별 구역 키워드 테이블과 광역권 간 이동 정보."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from app.schemas.enums import RegionFamily, TransportMode


@dataclass(frozen=True, slots=True)
class AreaInfo:
    """키워드로 찾은 구역 정보."""

    area: str
    station: str
    ward: str
    family: RegionFamily


@dataclass(frozen=True, slots=True)
class RouteInfo:
    """두 광역권 사이의 고정 장거리 이동 정보."""

    mode: TransportMode
    line: str
    duration_minutes: int
    cost: int
    duration_label: str


def _areas(family: RegionFamily, rows: dict[str, tuple[str, str, str]]) -> Mapping[str, AreaInfo]:
    return MappingProxyType(
        {keyword: AreaInfo(area=area, station=station, ward=ward, family=family) for keyword, (area, station, ward) in rows.items()}
    )


# 키워드 등장 순서가 곧 매칭 우선순위입니다.
KANTO_AREAS: Mapping[str, AreaInfo] = _areas(
    RegionFamily.KANTO,
    {
        "shibuya": ("Shibuya", "Shibuya Station", "Shibuya-ku"),
        "shinjuku": ("Shinjuku", "Shinjuku Station", "Shinjuku-ku"),
        "harajuku": ("Harajuku", "Harajuku Station", "Shibuya-ku"),
        "ginza": ("Ginza", "Ginza Station", "Chuo-ku"),
        "asakusa": ("Asakusa", "Asakusa Station", "Taito-ku"),
        "ueno": ("Ueno", "Ueno Station", "Taito-ku"),
        "akihabara": ("Akihabara", "Akihabara Station", "Chiyoda-ku"),
        "tokyo station": ("Marunouchi", "Tokyo Station", "Chiyoda-ku"),
        "roppongi": ("Roppongi", "Roppongi Station", "Minato-ku"),
        "tsukiji": ("Tsukiji", "Tsukiji Station", "Chuo-ku"),
    },
)

KANSAI_AREAS: Mapping[str, AreaInfo] = _areas(
    RegionFamily.KANSAI,
    {
        "gion": ("Gion", "Gion-Shijo Station", "Higashiyama-ku"),
        "arashiyama": ("Arashiyama", "Arashiyama Station", "Ukyo-ku"),
        "fushimi": ("Fushimi", "Fushimi-Inari Station", "Fushimi-ku"),
        "kiyomizu": ("Higashiyama", "Kiyomizu-Gojo Station", "Higashiyama-ku"),
        "dotonbori": ("Dotonbori", "Namba Station", "Chuo-ku"),
        "namba": ("Namba", "Namba Station", "Chuo-ku"),
        "osaka castle": ("Osaka Castle", "Osakajokoen Station", "Chuo-ku"),
        "umeda": ("Umeda", "Umeda Station", "Kita-ku"),
    },
)

AREAS_BY_FAMILY: Mapping[RegionFamily, Mapping[str, AreaInfo]] = MappingProxyType(
    {
        RegionFamily.KANTO: KANTO_AREAS,
        RegionFamily.KANSAI: KANSAI_AREAS,
    }
)

ALL_AREAS: Mapping[str, AreaInfo] = MappingProxyType({**KANTO_AREAS, **KANSAI_AREAS})

# 지역명/구역명으로 광역권을 판별할 때 쓰는 별칭
FAMILY_ALIASES: Mapping[RegionFamily, tuple[str, ...]] = MappingProxyType(
    {
        RegionFamily.KANTO: ("kanto", "tokyo"),
        RegionFamily.KANSAI: ("kansai", "kyoto", "osaka"),
    }
)

_TOKAIDO_SHINKANSEN = RouteInfo(
    mode=TransportMode.SHINKANSEN,
    line="Tokaido Shinkansen",
    duration_minutes=160,
    cost=13000,
    duration_label="2h 40min",
)

INTER_FAMILY_ROUTES: Mapping[frozenset[RegionFamily], RouteInfo] = MappingProxyType(
    {frozenset({RegionFamily.KANTO, RegionFamily.KANSAI}): _TOKAIDO_SHINKANSEN}
)

LOCAL_TRANSIT_LINES: Mapping[RegionFamily, str] = MappingProxyType({RegionFamily.KANTO: "JR Yamanote Line"})
LOCAL_TRANSIT_MODE = TransportMode.TRAIN
LOCAL_TRANSIT_MINUTES = 20
LOCAL_TRANSIT_COST = 200


def family_of_name(name: str | None) -> RegionFamily | None:
    """지역명 또는 구역명이 속한 광역권을 반환합니다. 판별할 수 없으면 None입니다."""
    lowered = (name or "").strip().lower()
    if not lowered:
        return None

    for info in ALL_AREAS.values():
        if info.area.lower() == lowered:
            return info.family

    for family, aliases in FAMILY_ALIASES.items():
        if any(alias in lowered for alias in aliases):
            return family
    return None


def areas_for_region(region_name: str, region_id: str = "") -> Mapping[str, AreaInfo]:
    """지역이 속한 광역권의 구역 테이블을 반환합니다. 모호하면 전체 테이블을 반환합니다."""
    lowered = f"{region_id} {region_name}".lower()
    for family in RegionFamily:
        if family.value in lowered:
            return AREAS_BY_FAMILY[family]
    return ALL_AREAS


def find_route(from_family: RegionFamily | None, to_family: RegionFamily | None) -> RouteInfo | None:
    """서로 다른 두 광역권 사이의 고정 장거리 이동 정보를 반환합니다."""
    if from_family is None or to_family is None or from_family == to_family:
        return None
    return INTER_FAMILY_ROUTES.get(frozenset({from_family, to_family}))
