"""
Tests for the structlog configuration helpers.
"""

import pytest
import structlog

from core.log import add_app_context, configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_structlog():
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_json_renderer(self):
        configure_logging("DEBUG", json_logs=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert add_app_context in processors

    def test_console_renderer(self):
        configure_logging("warning", json_logs=False)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_stdlib_wrapper(self):
        configure_logging()
        assert structlog.get_config()["wrapper_class"] is structlog.stdlib.BoundLogger


class TestAppContext:
    def test_tags_entries(self):
        assert add_app_context(None, "info", {"event": "x"})["app"] == "orderflow"

    def test_keeps_existing_value(self):
        assert add_app_context(None, "info", {"app": "other"})["app"] == "other"


def test_get_logger_returns_usable_logger():
    logger = get_logger("orderflow.tests")
    assert hasattr(logger, "info")
