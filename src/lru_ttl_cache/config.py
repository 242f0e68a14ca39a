"""Configuration for the LRU cache."""

from __future__ import annotations

import os
from typing import Any

import structlog
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import DEFAULT_MAX_AGE_SECONDS, DEFAULT_MAX_SIZE, ENV_PREFIX
from .errors import InvalidCacheConfigError

logger = structlog.get_logger(__name__)


class CacheOptions(BaseModel):
    """Capacity and age limits, fixed at cache construction."""

    model_config = ConfigDict(frozen=True)

    max_size: int = Field(
        default=DEFAULT_MAX_SIZE,
        ge=1,
        strict=True,
        description="Maximum number of resident entries; bools and strings are rejected",
    )
    max_age_seconds: float = Field(
        default=DEFAULT_MAX_AGE_SECONDS,
        gt=0,
        description="Seconds after the last update before an entry is treated as absent",
    )


def build_options(**values: Any) -> CacheOptions:
    """
    Validate raw option values.

    Returns:
        CacheOptions instance

    Raises:
        InvalidCacheConfigError: If a limit is not positive or has the wrong type
    """
    try:
        return CacheOptions(**values)
    except ValidationError as exc:
        details = {
            ".".join(str(part) for part in error["loc"]): error["msg"]
            for error in exc.errors()
        }
        raise InvalidCacheConfigError(
            "max_size must be an integer >= 1 and max_age_seconds must be > 0.",
            details=details,
        ) from exc


def load_cache_options(prefix: str = ENV_PREFIX) -> CacheOptions:
    """
    Load cache options from environment variables.

    Reads ``{prefix}MAX_SIZE`` and ``{prefix}MAX_AGE_SECONDS``; unset or
    blank variables fall back to the defaults.

    Returns:
        CacheOptions instance

    Raises:
        InvalidCacheConfigError: If a variable is not a valid positive number
    """
    load_dotenv()

    values: dict[str, Any] = {}
    raw_max_size = os.getenv(f"{prefix}MAX_SIZE", "").strip()
    raw_max_age = os.getenv(f"{prefix}MAX_AGE_SECONDS", "").strip()
    try:
        if raw_max_size:
            values["max_size"] = int(raw_max_size)
        if raw_max_age:
            values["max_age_seconds"] = float(raw_max_age)
    except ValueError as exc:
        raise InvalidCacheConfigError(
            f"{prefix}MAX_SIZE must be an integer and {prefix}MAX_AGE_SECONDS "
            "must be a number. Check your .env file.",
            details={"max_size": raw_max_size, "max_age_seconds": raw_max_age},
        ) from exc

    options = build_options(**values)
    logger.debug(
        "lru_cache_options_loaded",
        max_size=options.max_size,
        max_age_seconds=options.max_age_seconds,
    )
    return options
