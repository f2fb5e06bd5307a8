"""Logging setup for baseline-audit.

Everything logs under the ``baseline_audit`` namespace. The CLI configures
it once per invocation; ``baseline-audit serve`` also hands uvicorn a
matching configuration so access lines and collector lines share a format.
"""

import logging
import sys
from typing import Any, TextIO

PLAIN_FORMAT = "%(levelname)s: %(message)s"
STRUCTURED_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class StructuredFormatter(logging.Formatter):
    """Formatter that appends ``key=value`` context fields to each line.

    Values containing whitespace are quoted so lines stay splittable.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        fields = getattr(record, "extra_fields", None)
        if not fields:
            return message
        pairs = " ".join(f"{key}={_quote(value)}" for key, value in fields.items())
        return f"{message} {pairs}"


def _quote(value: Any) -> str:
    text = str(value)
    if not text or any(ch.isspace() for ch in text):
        return f'"{text}"'
    return text


def configure_logging(
    level: str = "INFO",
    structured: bool = False,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Configure the ``baseline_audit`` logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        structured: Timestamped lines with logger name and context fields
        stream: Destination stream, stderr by default

    Returns:
        The installed handler
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    if structured:
        handler.setFormatter(StructuredFormatter(STRUCTURED_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    logger = logging.getLogger("baseline_audit")
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers = [handler]
    logger.propagate = False
    return handler


def uvicorn_log_config(level: str = "INFO", structured: bool = False) -> dict[str, Any]:
    """Build a ``logging.config.dictConfig`` mapping for uvicorn's loggers."""
    if structured:
        formatter: dict[str, Any] = {"()": StructuredFormatter, "fmt": STRUCTURED_FORMAT}
    else:
        formatter = {"format": PLAIN_FORMAT}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": formatter},
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            name: {"handlers": ["default"], "level": level.upper(), "propagate": False}
            for name in UVICORN_LOGGERS
        },
    }


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the ``baseline_audit`` namespace."""
    if not name.startswith("baseline_audit"):
        name = f"baseline_audit.{name}"
    return logging.getLogger(name)


class ContextAdapter(logging.LoggerAdapter):
    """Logger adapter attaching fixed context fields to every record.

    Fields passed per call as ``extra={"extra_fields": {...}}`` are merged
    over the fixed ones.
    """

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        extra = dict(kwargs.get("extra") or {})
        fields = dict(self.extra or {})
        fields.update(extra.pop("extra_fields", {}))
        extra["extra_fields"] = fields
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger_with_context(name: str, **context: Any) -> ContextAdapter:
    """Get a logger whose records carry ``context`` as extra fields.

    Example:
        log = get_logger_with_context(__name__, system="LAB-PC-01")
        log.info("Report stored")  # ... Report stored system=LAB-PC-01
    """
    return ContextAdapter(get_logger(name), context)
