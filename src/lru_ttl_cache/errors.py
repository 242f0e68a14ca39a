"""Error types for cache configuration."""

from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Standardized error codes for the cache."""

    INVALID_CONFIG = "invalid_config"
    UNSUPPORTED_KEY = "unsupported_key"


class CacheError(Exception):
    """
    Structured cache error.

    Attributes:
        code: Error code from ErrorCode enum
        message: Human-readable error message
        details: Additional error context
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a plain dictionary for logging."""
        payload: dict[str, Any] = {
            "code": self.code.value,
            "title": self.code.value.replace("_", " ").title(),
            "detail": self.message,
        }
        if self.details:
            payload["errors"] = self.details
        return payload


class InvalidCacheConfigError(CacheError, ValueError):
    """Error for non-positive or malformed cache limits."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CONFIG,
            message=message,
            details=details,
        )


class UnsupportedKeyError(CacheError, TypeError):
    """Error when a key cannot be turned into a canonical string."""

    def __init__(self, key: Any, reason: str) -> None:
        super().__init__(
            code=ErrorCode.UNSUPPORTED_KEY,
            message=f"Unsupported cache key: {reason}",
            details={"key_type": type(key).__name__},
        )
