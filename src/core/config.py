"""Runtime configuration model for Strata.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
import random

from core.constants import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV_VAR,
    RANDOM_SEED_ENV_VAR,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import StrataConfigError


@dataclass(frozen=True)
class StrataConfig:
    """Validated runtime configuration.

    Attributes:
        random_seed: Optional seed for the default random source used by
            shuffle helpers. None draws from OS entropy.
        log_level: Minimum level emitted by library loggers.
    """

    random_seed: int | None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "StrataConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            StrataConfigError: If environment values are invalid.
        """
        random_seed_value = os.getenv(RANDOM_SEED_ENV_VAR)
        return cls(
            random_seed=_parse_random_seed(random_seed_value),
            log_level=log_level_from_env(),
        )

    def build_random(self) -> random.Random:
        """Create a random source honoring the configured seed."""
        return random.Random(self.random_seed)


def _parse_random_seed(raw_value: str | None) -> int | None:
    """Parse the random seed environment value.

    Args:
        raw_value: Raw string from environment, or None when unset.

    Returns:
        Parsed integer seed, or None when unset or blank.

    Raises:
        StrataConfigError: If value cannot be parsed into int.
    """
    if raw_value is None or not raw_value.strip():
        return None
    try:
        return int(raw_value)
    except ValueError as error:
        raise StrataConfigError(
            f"Invalid {RANDOM_SEED_ENV_VAR} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {RANDOM_SEED_ENV_VAR} to a numeric value or unset it."
        ) from error


def _parse_log_level(raw_value: str) -> str:
    """Normalize and validate the log level environment value.

    Raises:
        StrataConfigError: If the level name is not supported.
    """
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        supported = ", ".join(SUPPORTED_LOG_LEVELS)
        raise StrataConfigError(
            f"Invalid {LOG_LEVEL_ENV_VAR} value: got '{raw_value}'. "
            f"Use one of: {supported}."
        )
    return level


def log_level_from_env() -> str:
    """Read the library log level from the environment.

    Returns:
        Upper-cased level name, defaulting to WARNING.

    Raises:
        StrataConfigError: If the level name is not supported.
    """
    return _parse_log_level(os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL))
