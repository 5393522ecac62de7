"""타임라인 그래프 노드 모음."""

from app.graph.timeline.nodes.extract import extract_days
from app.graph.timeline.nodes.filter import filter_lines
from app.graph.timeline.nodes.reconcile import reconcile_days

__all__ = ["filter_lines", "extract_days", "reconcile_days"]
