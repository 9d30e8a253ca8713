"""Tests for structured logging configuration."""

import logging
from unittest.mock import patch

import pytest
import structlog

from src.core.logging import (
    QUIET_LOGGERS,
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
    log_context,
)


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def setup_method(self) -> None:
        """Reset structlog and logging configuration before each test."""
        structlog.reset_defaults()
        clear_contextvars()

    def test_configure_development_mode(self) -> None:
        """Should configure pretty-printed output in development mode."""
        configure_logging(development=True)
        logger = get_logger("test")
        # Should not raise
        logger.info("test message", key="value")

    def test_configure_production_mode(self) -> None:
        """Should configure JSON output in production mode."""
        configure_logging(development=False)
        logger = get_logger("test")
        # Should not raise
        logger.info("test message", key="value")

    def test_reads_environment_variable(self) -> None:
        """Should read ENVIRONMENT env var to determine mode."""
        with patch.dict("os.environ", {"ENVIRONMENT": "production"}):
            configure_logging()
            processors = structlog.get_config()["processors"]
            assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_development_uses_console_renderer(self) -> None:
        configure_logging(development=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_reads_log_level_environment_variable(self) -> None:
        """Should read LOG_LEVEL env var."""
        with patch.dict("os.environ", {"LOG_LEVEL": "DEBUG"}):
            configure_logging(development=True)
            assert logging.getLogger().level == logging.DEBUG

    def test_explicit_log_level_wins(self) -> None:
        with patch.dict("os.environ", {"LOG_LEVEL": "DEBUG"}):
            configure_logging(development=True, log_level="error")
            assert logging.getLogger().level == logging.ERROR

    def test_unknown_log_level_falls_back_to_info(self) -> None:
        configure_logging(development=True, log_level="chatty")
        assert logging.getLogger().level == logging.INFO

    def test_quiets_noisy_loggers(self) -> None:
        """Should cap noisy library loggers at WARNING."""
        configure_logging(development=True, log_level="DEBUG")
        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_quiet_loggers_follow_stricter_level(self) -> None:
        configure_logging(development=True, log_level="ERROR")
        assert logging.getLogger("uvicorn.access").level == logging.ERROR


class TestGetLogger:
    """Tests for get_logger function."""

    def setup_method(self) -> None:
        """Configure logging before each test."""
        structlog.reset_defaults()
        configure_logging(development=True)

    def test_returns_bound_logger(self) -> None:
        """Should return a structlog BoundLogger."""
        logger = get_logger("test.module")
        assert hasattr(logger, "info")
        assert hasattr(logger, "debug")
        assert hasattr(logger, "warning")
        assert hasattr(logger, "error")

    def test_logger_without_name(self) -> None:
        """Should create logger without name."""
        logger = get_logger()
        # Should not raise
        logger.info("test message")


class TestContextVars:
    """Tests for context variable functions."""

    def setup_method(self) -> None:
        """Configure logging and clear context before each test."""
        structlog.reset_defaults()
        clear_contextvars()
        configure_logging(development=True)

    def teardown_method(self) -> None:
        clear_contextvars()

    def test_bind_contextvars_adds_to_context(self) -> None:
        bind_contextvars(request_path="/pages/cwe-327", method="GET")
        assert structlog.contextvars.get_contextvars() == {
            "request_path": "/pages/cwe-327",
            "method": "GET",
        }

    def test_clear_contextvars_removes_all(self) -> None:
        bind_contextvars(key1="value1", key2="value2")
        clear_contextvars()
        assert structlog.contextvars.get_contextvars() == {}

    def test_log_context_binds_inside_block(self) -> None:
        with log_context(cwe_id="CWE-327"):
            assert structlog.contextvars.get_contextvars() == {"cwe_id": "CWE-327"}
        assert structlog.contextvars.get_contextvars() == {}

    def test_log_context_keeps_outer_values(self) -> None:
        bind_contextvars(method="POST")
        with log_context(side="good"):
            assert structlog.contextvars.get_contextvars() == {
                "method": "POST",
                "side": "good",
            }
        assert structlog.contextvars.get_contextvars() == {"method": "POST"}

    def test_log_context_unbinds_on_error(self) -> None:
        with pytest.raises(RuntimeError), log_context(side="bad"):
            raise RuntimeError("boom")
        assert structlog.contextvars.get_contextvars() == {}

    def test_bound_values_reach_log_output(self, capsys) -> None:
        configure_logging(development=False)
        with log_context(request_path="/routes"):
            get_logger("test").info("routes_listed")
        out = capsys.readouterr().out
        assert "routes_listed" in out
        assert "/routes" in out
