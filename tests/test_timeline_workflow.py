"""타임라인 파싱 그래프 노드 테스트."""

from app.core.time_slots import TimelineParserConfig
from app.graph.timeline.nodes import extract_days, filter_lines, reconcile_days
from app.graph.timeline.nodes.reconcile import reconcile_day_map
from app.graph.timeline.state import TimelineState
from app.graph.timeline.workflow import compiled_timeline_graph
from app.schemas.enums import ActivityCategory
from app.schemas.timeline import Activity, Day, Region, RegionAllocationEntry, TripParameters

KANTO = Region(id="kanto", name="Kanto")
KANSAI = Region(id="kansai", name="Kansai")
NODE_CONFIG = {"configurable": {"parser_config": TimelineParserConfig()}}


def _trip() -> TripParameters:
    return TripParameters(
        total_duration=3,
        regions=[
            RegionAllocationEntry(region=KANTO, days=2),
            RegionAllocationEntry(region=KANSAI, days=1),
        ],
    )


def _activity(day_number: int, cost: int) -> Activity:
    return Activity(
        id=f"activity-{day_number}-0",
        name="Visit Fushimi Inari Shrine",
        description="Visit Fushimi Inari Shrine",
        start_time="09:00",
        duration_minutes=120,
        category=ActivityCategory.ATTRACTION,
        icon="🏮",
        estimated_cost=cost,
    )


class TestFilterLines:
    """filter_lines 노드 테스트."""

    def test_keeps_candidate_lines_in_order(self):
        state: TimelineState = {
            "itinerary_text": "# Title\n\nDay 1: Tokyo\n**Highlights**\n- Visit Meiji Shrine\nok\n- Purchase a Suica card\n",
        }

        result = filter_lines(state, NODE_CONFIG)

        assert result["lines"] == ["Day 1: Tokyo", "- Visit Meiji Shrine"]
        assert result["skipped_lines"] == 4

    def test_empty_text(self):
        result = filter_lines({"itinerary_text": ""}, NODE_CONFIG)

        assert result == {"lines": [], "skipped_lines": 0}


class TestExtractDays:
    """extract_days 노드 테스트."""

    def test_builds_day_map(self):
        state: TimelineState = {
            "trip": _trip(),
            "lines": ["Day 3: Kyoto", "- Morning walk in Arashiyama bamboo grove"],
        }

        result = extract_days(state, NODE_CONFIG)

        assert list(result["days_by_number"]) == [3]
        day = result["days_by_number"][3]
        assert day.region == KANSAI
        assert day.activities[0].location.area == "Arashiyama"


class TestReconcileDays:
    """reconcile_days 노드 테스트."""

    def test_fills_gaps_and_discards_out_of_range(self):
        extracted = Day(day_number=2, region=KANTO, activities=[_activity(2, 1500)])
        stray = Day(day_number=7, region=KANTO, activities=[_activity(7, 800)])

        days = reconcile_day_map({7: stray, 2: extracted}, _trip())

        assert [day.day_number for day in days] == [1, 2, 3]
        assert days[1] is extracted
        assert days[0].region == KANTO
        assert days[2].region == KANSAI
        assert days[0].activities == []
        assert days[0].total_cost == 0
        assert days[2].total_cost == 0

    def test_builds_timeline_with_pass_through_fields(self):
        trip = _trip()

        result = reconcile_days({"trip": trip, "days_by_number": {}})

        timeline = result["timeline"]
        assert timeline.total_duration == 3
        assert timeline.regions == trip.regions
        assert timeline.travel_style is None
        assert len(timeline.days) == 3


def test_compiled_graph_runs_all_nodes() -> None:
    result = compiled_timeline_graph.invoke(
        {"itinerary_text": "Day 2: Tokyo\n- Afternoon shopping in Ginza", "trip": _trip()},
        config=NODE_CONFIG,
    )

    assert result["lines"] == ["Day 2: Tokyo", "- Afternoon shopping in Ginza"]
    assert list(result["days_by_number"]) == [2]
    assert [len(day.activities) for day in result["timeline"].days] == [0, 1, 0]
