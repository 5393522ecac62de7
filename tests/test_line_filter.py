"""잡음 줄 필터 테스트."""

import pytest

from app.core.line_filter import contains_admin_phrase, contains_preamble_phrase, should_skip_line
from app.core.time_slots import TimelineParserConfig


@pytest.mark.parametrize("line", ["", "   ", "Nara", "  ok  "])
def test_skips_empty_and_short_lines(line: str) -> None:
    assert should_skip_line(line) is True


@pytest.mark.parametrize("line", ["# Tokyo Adventure", "## Day 1", "**Day 1: Tokyo**", "  **Budget notes**"])
def test_skips_markdown_headings_and_bold(line: str) -> None:
    assert should_skip_line(line) is True


@pytest.mark.parametrize(
    "line",
    [
        "This itinerary assumes you have a 7-day JR Pass.",
        "Note: all costs are estimates and may vary.",
        "- Purchase a Suica Card at Haneda Airport",
        "• PURCHASE A SUICA CARD!!",
        "Check   into  hotel near Shinjuku",
        "The JR Pass will be cost-effective for this route.",
        "Airport transfer via Narita Express",
    ],
)
def test_skips_admin_and_disclaimer_phrases(line: str) -> None:
    assert should_skip_line(line) is True


@pytest.mark.parametrize(
    "line",
    [
        "Osaka",
        "Day 1: Tokyo",
        "• Visit Senso-ji Temple",
        "Visit the Suica Penguin gift shop",
        "Ride the JR Yamanote Line to Ueno",
    ],
)
def test_keeps_candidate_lines(line: str) -> None:
    assert should_skip_line(line) is False


def test_min_line_length_from_config() -> None:
    config = TimelineParserConfig(min_line_length=10)

    assert should_skip_line("Too short", config) is True
    assert should_skip_line("Short line", config) is False


def test_contains_admin_phrase_is_case_insensitive() -> None:
    assert contains_admin_phrase("Currency Exchange at the airport") is True
    assert contains_admin_phrase("Exchange diary shopping in Harajuku") is False


@pytest.mark.parametrize(
    "line",
    [
        "This itinerary is designed for first-time visitors to Tokyo.",
        "A JR Pass is not needed for this Tokyo-only trip.",
        "Adjust activities to your pace and the weather.",
        "Museum tickets: purchase in advance online.",
    ],
)
def test_skips_broad_preamble_lines(line: str) -> None:
    assert contains_preamble_phrase(line) is True
    assert should_skip_line(line) is True


def test_preamble_phrases_are_separate_from_admin_phrases() -> None:
    assert contains_preamble_phrase("A JR Pass is not needed") is True
    assert contains_admin_phrase("A JR Pass is not needed") is False
