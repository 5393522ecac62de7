"""여행 타임라인 요청/응답 스키마."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from app.schemas.enums import ActivityCategory, SeasonId, TransportMode, TravelStyleId


class Region(BaseModel):
    """호출자가 제공하는 여행 지역 참조 데이터."""

    id: str = Field(..., description="지역 식별자 (예: kanto)")
    name: str = Field(..., description="표시용 지역명")
    name_native: str = Field("", description="현지어 지역명")
    description: str = Field("", description="지역 설명")
    icon: str = Field("", description="지역 아이콘")
    sub_areas: list[str] = Field(default_factory=list, description="하위 행정 구역 목록")


class RegionAllocationEntry(BaseModel):
    """지역별 배정 일수."""

    region: Region = Field(..., description="배정 대상 지역")
    days: int = Field(..., ge=1, description="해당 지역에 배정된 일수")


class TravelStyle(BaseModel):
    """여행 스타일 태그. 파서는 해석하지 않고 그대로 전달합니다."""

    id: TravelStyleId = Field(..., description="여행 스타일 코드")
    name: str = Field(..., description="표시명")
    name_native: str = Field("", description="현지어 표시명")
    description: str = Field("", description="설명")
    icon: str = Field("", description="아이콘")


class Season(BaseModel):
    """여행 시즌 태그. 파서는 해석하지 않고 그대로 전달합니다."""

    id: SeasonId = Field(..., description="시즌 코드")
    name: str = Field(..., description="표시명")
    name_native: str = Field("", description="현지어 표시명")
    description: str = Field("", description="설명")
    highlights: list[str] = Field(default_factory=list, description="시즌 하이라이트")


class TripParameters(BaseModel):
    """타임라인 파싱에 필요한 여행 파라미터.

    Fields:
        `total_duration`: 전체 여행 일수
        `regions`: 순서가 있는 지역별 배정 일수 목록
        `travel_style`: 여행 스타일 태그 (선택)
        `season`: 여행 시즌 태그 (선택)
    """

    total_duration: int = Field(..., ge=1, description="전체 여행 일수")
    regions: list[RegionAllocationEntry] = Field(..., min_length=1, description="지역별 배정 일수")
    travel_style: TravelStyle | None = Field(default=None, description="여행 스타일 태그")
    season: Season | None = Field(default=None, description="여행 시즌 태그")

    @model_validator(mode="after")
    def validate_allocation_sum(self):
        allocated = sum(entry.days for entry in self.regions)
        if allocated != self.total_duration:
            raise ValueError(
                f"지역별 배정 일수의 합({allocated})이 전체 여행 일수({self.total_duration})와 같아야 합니다."
            )
        return self


class Coordinates(BaseModel):
    """위경도 좌표."""

    lat: float = Field(..., description="위도")
    lng: float = Field(..., description="경도")


class LocationDescriptor(BaseModel):
    """활동 텍스트에서 추정한 위치 정보."""

    name: str = Field(..., description="장소명")
    area: str = Field(..., description="상위 구역명 (예: Shibuya)")
    ward: str | None = Field(default=None, description="행정 구역 (예: Shibuya-ku)")
    station: str | None = Field(default=None, description="가장 가까운 역")
    coordinates: Coordinates | None = Field(default=None, description="좌표")


class TransportDescriptor(BaseModel):
    """직전 활동에서 현재 활동까지의 이동 정보."""

    mode: TransportMode = Field(..., description="이동 수단")
    line: str | None = Field(default=None, description="노선명")
    duration_minutes: int = Field(..., ge=0, description="이동 시간(분)")
    cost: int = Field(..., ge=0, description="이동 비용(엔)")
    instructions: str | None = Field(default=None, description="이동 안내 문구")


class Activity(BaseModel):
    """일자 내 개별 일정 항목."""

    id: str = Field(..., description="일자 내 고유 식별자")
    name: str = Field(..., description="표시명 (괄호 내용 제거)")
    description: str = Field(..., description="정제된 원문 텍스트")
    start_time: str = Field(..., pattern=r"^\d{2}:\d{2}$", description="시작 시각 (HH:MM, 24시간제)")
    duration_minutes: int = Field(..., gt=0, description="소요 시간(분)")
    category: ActivityCategory = Field(..., description="활동 분류")
    icon: str = Field(..., description="표시 아이콘")
    estimated_cost: int | None = Field(default=None, ge=0, description="예상 비용(엔)")
    location: LocationDescriptor | None = Field(default=None, description="추정 위치")
    location_label: str | None = Field(default=None, description="표시용 위치 문자열")
    transport: TransportDescriptor | None = Field(default=None, description="직전 활동으로부터의 이동 정보")


class Day(BaseModel):
    """일차별 일정."""

    day_number: int = Field(..., ge=1, description="여행 N일차 (1부터 시작)")
    region: Region = Field(..., description="해당 일차의 지역")
    activities: list[Activity] = Field(default_factory=list, description="일정 목록 (삽입 순서)")
    total_cost: int = Field(0, ge=0, description="활동 비용 합계")

    @model_validator(mode="after")
    def sync_total_cost(self):
        self.total_cost = sum(activity.estimated_cost or 0 for activity in self.activities)
        return self

    def recompute_total_cost(self) -> int:
        """활동 목록 전체를 다시 합산해 `total_cost`를 갱신합니다."""
        self.total_cost = sum(activity.estimated_cost or 0 for activity in self.activities)
        return self.total_cost


class Timeline(BaseModel):
    """파싱 결과 타임라인."""

    days: list[Day] = Field(..., description="일차 순으로 정렬된 일정")
    total_duration: int = Field(..., ge=1, description="전체 여행 일수")
    regions: list[RegionAllocationEntry] = Field(..., description="지역별 배정 일수")
    travel_style: TravelStyle | None = Field(default=None, description="여행 스타일 태그")
    season: Season | None = Field(default=None, description="여행 시즌 태그")


class TimelineParseRequest(BaseModel):
    """타임라인 파싱 요청 모델."""

    itinerary_text: str = Field(..., description="LLM이 생성한 자유 형식 일정 텍스트")
    trip: TripParameters = Field(..., description="여행 파라미터")
