"""잡음 줄 필터링 노드."""

from __future__ import annotations

from langchain_core.runnables import RunnableConfig

from app.core.line_filter import should_skip_line
from app.core.logger import get_logger
from app.graph.timeline.nodes._config import resolve_parser_config
from app.graph.timeline.state import TimelineState

logger = get_logger(__name__)


def filter_lines(state: TimelineState, config: RunnableConfig) -> TimelineState:
    """원문을 줄 단위로 나누고 처리할 후보 줄만 남깁니다."""
    parser_config = resolve_parser_config(config)
    raw_lines = (state.get("itinerary_text") or "").splitlines()

    lines: list[str] = []
    skipped = 0
    for raw_line in raw_lines:
        if should_skip_line(raw_line, parser_config):
            if raw_line.strip():
                skipped += 1
                logger.debug("Skipping line: %s", raw_line.strip()[:50])
            continue
        lines.append(raw_line.strip())

    logger.info("Filtered itinerary text: %d candidate lines, %d skipped", len(lines), skipped)
    return {"lines": lines, "skipped_lines": skipped}
