"""타임라인 파싱 그래프 워크플로우 구성."""

from langgraph.graph import END, StateGraph

from app.graph.timeline.nodes import extract_days, filter_lines, reconcile_days
from app.graph.timeline.state import TimelineState


def _create_timeline_workflow() -> StateGraph:
    """타임라인 파싱 그래프 워크플로우를 생성합니다."""
    workflow = StateGraph(TimelineState)

    workflow.add_node("filter_lines", filter_lines)
    workflow.add_node("extract_days", extract_days)
    workflow.add_node("reconcile_days", reconcile_days)

    workflow.set_entry_point("filter_lines")
    workflow.add_edge("filter_lines", "extract_days")
    workflow.add_edge("extract_days", "reconcile_days")
    workflow.add_edge("reconcile_days", END)

    return workflow


compiled_timeline_graph = _create_timeline_workflow().compile()
