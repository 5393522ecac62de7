"""타임라인 도메인 공용 Enum 정의."""

from enum import StrEnum


class ActivityCategory(StrEnum):
    """활동 분류 (닫힌 집합)."""

    ATTRACTION = "attraction"
    MEAL = "meal"
    TRANSPORT = "transport"
    ACCOMMODATION = "accommodation"
    EXPERIENCE = "experience"


class TransportMode(StrEnum):
    """활동 간 이동 수단.

    `SHINKANSEN`은 지역 간 장거리 철도 이동을 나타냅니다.
    """

    WALK = "walk"
    TRAIN = "train"
    SUBWAY = "subway"
    BUS = "bus"
    TAXI = "taxi"
    SHINKANSEN = "shinkansen"
    FERRY = "ferry"


class RegionFamily(StrEnum):
    """지역 키워드 테이블을 공유하는 광역권."""

    KANTO = "kanto"
    KANSAI = "kansai"


class TravelStyleId(StrEnum):
    """여행 스타일 태그."""

    TRADITIONAL = "traditional"
    MODERN = "modern"
    NATURE = "nature"
    URBAN = "urban"
    SPIRITUAL = "spiritual"
    FOODIE = "foodie"
    OTAKU = "otaku"
    RYOKAN = "ryokan"


class SeasonId(StrEnum):
    """여행 시즌 태그."""

    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"
    ANY = "any"
