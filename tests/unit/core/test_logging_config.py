"""Unit tests for structured logging setup."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from core.constants import LOG_LEVEL_ENV_VAR
from core.errors import StrataConfigError
from core.logging_config import get_logger


def test_get_logger_keeps_structured_fields() -> None:
    """Logged events should carry their keyword fields."""
    logger = get_logger("tests.logging.fields", level="INFO")

    with capture_logs() as captured:
        logger.warning("sample_event", layer_count=2)

    assert captured[0]["event"] == "sample_event" and captured[0]["layer_count"] == 2


def test_get_logger_drops_events_below_level() -> None:
    """Events under the configured level should be filtered out."""
    logger = get_logger("tests.logging.filtered", level="ERROR")

    with capture_logs() as captured:
        logger.warning("dropped_event")

    assert captured == []


def test_logger_levels_are_independent() -> None:
    """Creating a stricter logger should not silence an existing verbose one."""
    verbose_logger = get_logger("tests.logging.verbose", level="DEBUG")
    quiet_logger = get_logger("tests.logging.quiet", level="ERROR")

    with capture_logs() as captured:
        verbose_logger.debug("verbose_event")
        quiet_logger.warning("quiet_event")

    assert [event["event"] for event in captured] == ["verbose_event"]


def test_get_logger_reads_env_level_on_first_use(monkeypatch: pytest.MonkeyPatch) -> None:
    """An invalid env level should fail when logging, not when creating a logger."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")
    logger = get_logger("tests.logging.lazy")

    with pytest.raises(StrataConfigError):
        logger.warning("lazy_event")


def test_get_logger_uses_env_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Loggers without an explicit level should follow STRATA_LOG_LEVEL."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "DEBUG")
    logger = get_logger("tests.logging.env")

    with capture_logs() as captured:
        logger.debug("env_event")

    assert captured[0]["event"] == "env_event"
