"""Configuration for JWT helpers, read from the environment when needed."""
from __future__ import annotations

import os

from loguru import logger

LEEWAY_ENV_VAR = "OAUTH2_UTILS_JWT_LEEWAY_SECONDS"
DEFAULT_JWT_LEEWAY_SECONDS = 60


def jwt_leeway_seconds() -> int:
    """
    Clock-skew allowance for expiry checks.

    Invalid or negative values are logged and replaced by the default.
    """
    raw = os.getenv(LEEWAY_ENV_VAR, "").strip()
    if not raw:
        return DEFAULT_JWT_LEEWAY_SECONDS
    try:
        value = int(raw)
    except ValueError:
        logger.warning(
            "{} must be an integer, got {!r}; using {}.", LEEWAY_ENV_VAR, raw, DEFAULT_JWT_LEEWAY_SECONDS
        )
        return DEFAULT_JWT_LEEWAY_SECONDS
    if value < 0:
        logger.warning("{} must be >= 0, got {}; using {}.", LEEWAY_ENV_VAR, value, DEFAULT_JWT_LEEWAY_SECONDS)
        return DEFAULT_JWT_LEEWAY_SECONDS
    return value
