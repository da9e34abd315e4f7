"""Core constants used across Strata modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

RANDOM_SEED_ENV_VAR = "STRATA_RANDOM_SEED"
LOG_LEVEL_ENV_VAR = "STRATA_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_RANGE_STEP = 1
NOT_FOUND_INDEX = -1
