"""노드 공통 설정 조회."""

from langchain_core.runnables import RunnableConfig

from app.core.time_slots import TimelineParserConfig, build_parser_config


def resolve_parser_config(config: RunnableConfig | None) -> TimelineParserConfig:
    """`configurable.parser_config`가 있으면 사용하고, 없으면 설정값으로 만듭니다."""
    parser_config = (config or {}).get("configurable", {}).get("parser_config")
    if isinstance(parser_config, TimelineParserConfig):
        return parser_config
    return build_parser_config()
