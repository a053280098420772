"""Tests for logging configuration."""

import json
import logging
from typing import Any, Dict

import pytest
import structlog
from structlog.stdlib import BoundLogger
from structlog.types import BindableLogger

from geofield.core.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_logging():
    """Restore the test logging configuration afterwards."""
    yield
    configure_logging(testing=True)


def test_configure_logging() -> None:
    """Test logging configuration."""
    configure_logging()
    logger = structlog.get_logger()
    assert isinstance(logger, BoundLogger | BindableLogger)

    processors = structlog.get_config()["processors"]
    assert any(
        p.__class__.__name__ == "JSONRenderer" for p in processors
    ), "JSONRenderer not configured"


def test_configure_logging_testing_uses_key_value_renderer() -> None:
    """Test that test mode renders key/value pairs."""
    configure_logging(testing=True)

    processors = structlog.get_config()["processors"]
    assert processors[-1].__class__.__name__ == "KeyValueRenderer"


def test_configure_logging_level() -> None:
    """Test the log level is applied to the package logger."""
    configure_logging(level="debug")

    assert logging.getLogger("geofield").level == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_unknown_level_defaults_to_info() -> None:
    configure_logging(level="chatty")

    assert logging.getLogger("geofield").level == logging.INFO


def test_configure_logging_accepts_settings_level_names() -> None:
    """LOG_LEVEL values are upper-cased by the settings validator."""
    configure_logging(level="CRITICAL")

    assert logging.getLogger("geofield").level == logging.CRITICAL


def test_configure_logging_twice_keeps_one_handler() -> None:
    configure_logging()
    configure_logging()

    package_logger = logging.getLogger("geofield")
    assert len(package_logger.handlers) == 1
    assert logging.getLogger().handlers == package_logger.handlers
    assert package_logger.propagate is False


def test_get_logger() -> None:
    """Test get_logger returns a configured logger."""
    logger = get_logger()
    assert isinstance(logger, BoundLogger | BindableLogger)

    logger.info("test_message", test_key="test_value")


def test_get_logger_binds_context() -> None:
    """Test get_logger binds the given context."""
    logger = get_logger(module="fallback_geocoder")

    logger.info("test_message")
    assert logger._context.get("module") == "fallback_geocoder"


def test_json_logging() -> None:
    """Test that logs are properly formatted as JSON."""
    configure_logging()

    test_data = {
        "provider": "google_maps",
        "attempts": 2,
        "found": True,
        "error": None,
        "providers": ["google_maps", "nominatim"],
    }

    processors = structlog.get_config()["processors"]
    json_renderer = next(p for p in processors if p.__class__.__name__ == "JSONRenderer")

    event_dict: Dict[str, Any] = {"event": "address_geocoded", **test_data}
    parsed = json.loads(json_renderer(None, None, event_dict))

    assert parsed["event"] == "address_geocoded"
    assert parsed["provider"] == "google_maps"
    assert parsed["attempts"] == 2
    assert parsed["found"] is True
    assert parsed["error"] is None
    assert parsed["providers"] == ["google_maps", "nominatim"]
