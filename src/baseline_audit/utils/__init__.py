"""Utility functions for baseline-audit."""

from baseline_audit.utils.logging import configure_logging, get_logger, get_logger_with_context
from baseline_audit.utils.errors import (
    BaselineAuditError,
    ValidationError,
    NetworkError,
    retry,
    require_system_name,
)
from baseline_audit.utils.config import (
    BaselineAuditConfig,
    RequirementsConfig,
    ProbeConfig,
    CollectorConfig,
    ServerConfig,
    OutputConfig,
    load_config,
    get_config,
    set_config,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "get_logger_with_context",
    # Errors
    "BaselineAuditError",
    "ValidationError",
    "NetworkError",
    "retry",
    "require_system_name",
    # Config
    "BaselineAuditConfig",
    "RequirementsConfig",
    "ProbeConfig",
    "CollectorConfig",
    "ServerConfig",
    "OutputConfig",
    "load_config",
    "get_config",
    "set_config",
]
