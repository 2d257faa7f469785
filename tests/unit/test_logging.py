import io
import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from looksalike.config.logging import PACKAGE_LOGGER, setup_logging


@pytest.fixture()
def reset_structlog() -> Iterator[None]:
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level, propagate = (
        package_logger.handlers[:],
        package_logger.level,
        package_logger.propagate,
    )
    yield
    structlog.reset_defaults()
    package_logger.handlers = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.mark.unit
class TestSetupLogging:
    def test_json_renderer_when_requested(self, reset_structlog: None) -> None:
        setup_logging(log_level="DEBUG", json_output=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_uses_stdlib_logger_factory(self, reset_structlog: None) -> None:
        setup_logging(json_output=True)
        config = structlog.get_config()
        assert isinstance(config["logger_factory"], structlog.stdlib.LoggerFactory)
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger

    def test_non_tty_stream_gets_json_events(self, reset_structlog: None) -> None:
        stream = io.StringIO()
        setup_logging(log_level="DEBUG", stream=stream)

        structlog.get_logger("looksalike.api").info("diff_saved", differences=3)

        event = json.loads(stream.getvalue().strip())
        assert event["event"] == "diff_saved"
        assert event["differences"] == 3
        assert event["logger"] == "looksalike.api"
        assert event["level"] == "info"

    def test_events_below_level_are_dropped(self, reset_structlog: None) -> None:
        stream = io.StringIO()
        setup_logging(log_level="WARNING", stream=stream)

        structlog.get_logger("looksalike.engine.diff_image").debug("diff_image_built")

        assert stream.getvalue() == ""

    def test_root_logger_is_left_alone(self, reset_structlog: None) -> None:
        root_handlers = logging.getLogger().handlers[:]
        setup_logging(stream=io.StringIO())
        assert logging.getLogger().handlers == root_handlers
        assert logging.getLogger(PACKAGE_LOGGER).propagate is False
