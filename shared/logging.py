"""
Logging utilities (re-exports).

Re-exports from utils.logger and utils.logging_config so that client code
imports everything logging-related from one place.
"""

from utils.logger import get_logger, log_with_context
from utils.logging_config import (
    configure_structlog,
    redact_sensitive_fields,
    setup_logging,
)

__all__ = [
    "get_logger",
    "log_with_context",
    "configure_structlog",
    "redact_sensitive_fields",
    "setup_logging",
]
