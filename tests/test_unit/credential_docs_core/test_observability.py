"""Unit tests for logging helpers."""

import logging
from unittest.mock import Mock

import pytest
import structlog

from credential_docs_core.observability import (
    configure_logging,
    log_bind,
    observe_around,
)


class TestObserveAround:
    """Test observe_around."""

    def test_logs_start_and_completion(self) -> None:
        logger = Mock()
        with observe_around(logger, "GENERATION", csp="huawei"):
            pass

        logger.info.assert_any_call("GENERATION_STARTED", csp="huawei")
        completed = logger.info.call_args_list[-1]
        assert completed.args == ("GENERATION_COMPLETED",)
        assert completed.kwargs["csp"] == "huawei"
        assert completed.kwargs["duration_ms"] >= 0
        logger.exception.assert_not_called()

    def test_logs_failure_and_reraises(self) -> None:
        logger = Mock()
        with pytest.raises(ValueError, match="boom"), observe_around(
            logger, "GENERATION"
        ):
            raise ValueError("boom")

        assert logger.exception.call_args.args == ("GENERATION_FAILED",)
        events = [call.args[0] for call in logger.info.call_args_list]
        assert "GENERATION_COMPLETED" not in events


class TestLogBind:
    """Test log_bind."""

    def test_binds_context_inside_block(self) -> None:
        with log_bind(run_id="r1"):
            assert structlog.contextvars.get_contextvars()["run_id"] == "r1"
        assert "run_id" not in structlog.contextvars.get_contextvars()


class TestConfigureLogging:
    """Test configure_logging."""

    def test_json_rendering(self) -> None:
        configure_logging("DEBUG")
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_dev_mode_uses_console_renderer(self) -> None:
        configure_logging("INFO", dev_mode=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging("LOUD")
        wrapper_class = structlog.get_config()["wrapper_class"]
        assert wrapper_class is structlog.make_filtering_bound_logger(logging.INFO)
