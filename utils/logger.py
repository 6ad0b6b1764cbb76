"""
Logger factory for the API service client.

Provides:
- get_logger(): Get a configured logger instance
- log_with_context(): Bind common context to a logger
"""

import structlog
from structlog.stdlib import BoundLogger


def get_logger(name: str) -> BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Configured structlog BoundLogger instance

    Example:
        >>> from utils.logger import get_logger
        >>> log = get_logger(__name__)
        >>> log.info("request_completed", status=200, response_time_ms=42)
    """
    return structlog.get_logger(name)


def log_with_context(logger: BoundLogger, **context) -> BoundLogger:
    """
    Bind context to a logger for all subsequent log calls.

    Args:
        logger: The logger to bind context to
        **context: Key-value pairs to bind

    Returns:
        Logger with bound context

    Example:
        >>> log = log_with_context(get_logger(__name__), endpoint="/users")
        >>> log.info("request_completed")  # Will include endpoint
    """
    return logger.bind(**context)
