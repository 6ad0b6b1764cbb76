"""
Client error hierarchy.

AppError is the base for all typed errors raised by this package itself.
Failures raised by the HTTP transport (httpx.HTTPError and friends) are never
wrapped in an AppError: they reach the caller exactly as the transport
raised them, so callers can tell misconfiguration apart from network trouble.
"""

from __future__ import annotations

from typing import Optional


class AppError(Exception):
    """Base client error. All typed errors inherit from this."""

    error_code: str = "internal_error"

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class ConfigurationError(AppError):
    """Required settings are missing; raised before any request is sent."""

    error_code = "configuration_error"
