"""Tests for logging formatters and context handling."""

import json
import logging
import sys
from unittest.mock import patch

import pytest

from pantrytracker.logging_config import (
    ContextualFormatter,
    LoggingContext,
    StructuredJsonFormatter,
    clear_context,
    configure_logging,
    get_logger,
    household_id_ctx,
    recipe_name_ctx,
    set_context,
)


def _record(message: str = "checked pantry") -> logging.LogRecord:
    return logging.LogRecord(
        name="pantrytracker.availability.matcher",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestLoggingContext:
    """Tests for context variable handling."""

    def test_context_manager_resets(self):
        with LoggingContext(household_id="house-123", recipe_name="Pancakes"):
            assert household_id_ctx.get() == "house-123"
            assert recipe_name_ctx.get() == "Pancakes"
        assert household_id_ctx.get() is None
        assert recipe_name_ctx.get() is None

    def test_set_and_clear(self):
        set_context(household_id="house-1")
        assert household_id_ctx.get() == "house-1"
        clear_context()
        assert household_id_ctx.get() is None


class TestFormatters:
    """Tests for JSON and text formatters."""

    def test_json_formatter_includes_context(self):
        with LoggingContext(household_id="house-123", recipe_name="Pancakes"):
            payload = json.loads(StructuredJsonFormatter().format(_record()))
        assert payload["message"] == "checked pantry"
        assert payload["level"] == "DEBUG"
        assert payload["household_id"] == "house-123"
        assert payload["recipe_name"] == "Pancakes"

    def test_text_formatter(self):
        with LoggingContext(recipe_name="Pancakes"):
            line = ContextualFormatter().format(_record())
        assert "pantrytracker.availability.matcher [recipe=Pancakes]" in line
        assert line.endswith("checked pantry")

    def test_get_logger_adds_context(self, caplog):
        logger = get_logger("pantrytracker.test")
        with caplog.at_level(logging.INFO, logger="pantrytracker.test"):
            with LoggingContext(household_id="house-9"):
                logger.info("hello")
        assert caplog.records[-1].household_id == "house-9"


class TestConfigureLogging:
    """Tests for configure_logging defaults taken from settings."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)

    def _stdout_formatter(self) -> logging.Formatter:
        handler = logging.getLogger().handlers[-1]
        return handler.formatter

    def test_level_and_format_from_settings(self, settings):
        json_settings = settings.model_copy(update={"log_level": "warning", "log_format": "json"})
        configure_logging(settings=json_settings)
        assert logging.getLogger().level == logging.WARNING
        assert isinstance(self._stdout_formatter(), StructuredJsonFormatter)

    def test_text_format_in_development(self, settings):
        text_settings = settings.model_copy(update={"log_level": "INFO", "log_format": "text"})
        configure_logging(settings=text_settings)
        assert logging.getLogger().level == logging.INFO
        assert isinstance(self._stdout_formatter(), ContextualFormatter)

    def test_explicit_arguments_win(self, settings):
        json_settings = settings.model_copy(update={"log_format": "json"})
        configure_logging(log_level="DEBUG", json_format=False, settings=json_settings)
        assert logging.getLogger().level == logging.DEBUG
        assert isinstance(self._stdout_formatter(), ContextualFormatter)

    def test_production_environment(self, settings):
        """Test that production without a terminal selects JSON."""
        prod = settings.model_copy(update={"environment": "production"})
        assert prod.is_production
        with patch.object(sys.stdout, "isatty", return_value=False):
            configure_logging(settings=prod)
        assert isinstance(self._stdout_formatter(), StructuredJsonFormatter)
