"""로깅 설정 테스트."""

import logging

from app.core.logger import get_logger
from app.core.logging_config import build_logging_config


def test_build_logging_config_uses_env_level(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = build_logging_config()

    assert config["root"]["level"] == "DEBUG"
    assert config["loggers"]["uvicorn.access"]["level"] == "DEBUG"
    assert config["disable_existing_loggers"] is False


def test_explicit_level_overrides_env(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    assert build_logging_config("warning")["root"]["level"] == "WARNING"


def test_get_logger_attaches_single_handler() -> None:
    logger = get_logger("tests.logging.single_handler")
    same = get_logger("tests.logging.single_handler")

    assert logger is same
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)
