"""Error handling utilities for baseline-audit."""

from __future__ import annotations

import functools
import time
from typing import Any, Callable, Mapping, TypeVar

from baseline_audit.models.results import AuditError
from baseline_audit.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class BaselineAuditError(Exception):
    """Base exception for baseline-audit."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_audit_error(self) -> AuditError:
        """Convert to AuditError model."""
        return AuditError(code=self.code, message=self.message, details=self.details)


class ValidationError(BaselineAuditError):
    """Validation failed."""

    def __init__(self, message: str, field: str | None = None, code: str = "VALIDATION_ERROR"):
        details = {"field": field} if field else {}
        super().__init__(message, code=code, details=details)


class NetworkError(BaselineAuditError):
    """Network operation failed."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        details: dict[str, Any] = {"url": url} if url else {}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, code="NETWORK_ERROR", details=details)


def retry(
    max_attempts: int = 3,
    delay: float = 1.0,
    backoff: float = 2.0,
    exceptions: tuple[type[Exception], ...] = (Exception,),
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Retry a call that failed with one of ``exceptions``.

    The last exception propagates once ``max_attempts`` calls have failed;
    any other exception propagates immediately. Each retry is logged.

    Args:
        max_attempts: Total number of calls, at least 1
        delay: Seconds to wait before the first retry
        backoff: Multiplier applied to the delay after each retry
        exceptions: Exception types that trigger a retry
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        name = getattr(func, "__qualname__", None) or getattr(func, "__name__", repr(func))

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            wait = delay
            for attempt in range(1, max_attempts):
                try:
                    return func(*args, **kwargs)
                except exceptions as e:
                    logger.warning(
                        "%s failed (%s), retrying in %.1fs [%d/%d]",
                        name,
                        e,
                        wait,
                        attempt,
                        max_attempts - 1,
                    )
                    time.sleep(wait)
                    wait *= backoff
            return func(*args, **kwargs)

        return wrapper

    return decorator


def require_system_name(payload: Any) -> str:
    """Return the submitted system name or raise.

    Args:
        payload: Decoded submission body

    Returns:
        The non-empty system name

    Raises:
        ValidationError: If the payload carries no usable system name
    """
    if not isinstance(payload, Mapping):
        raise ValidationError(
            "Missing systemName in request body",
            field="systemName",
            code="MISSING_SYSTEM_NAME",
        )

    name = payload.get("systemName")
    if not isinstance(name, str) or not name:
        raise ValidationError(
            "Missing systemName in request body",
            field="systemName",
            code="MISSING_SYSTEM_NAME",
        )
    return name
