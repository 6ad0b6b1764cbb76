"""
ServiceBase: base class for API service clients used by test suites.

Subclasses pass their endpoint path and call the verb methods; every call
returns a Response envelope carrying the round-trip time measured here,
around the transport call, independent of anything the transport reports.

Transport failures are logged and re-raised untouched. Credentials are
opt-in: pass the result of authenticate() as the config of a call.
"""

from __future__ import annotations

import time
from typing import Any, Optional

from config import ClientSettings
from errors import ConfigurationError
from infrastructure.http_client import get_http_client
from infrastructure.transport.protocol import Transport, TransportResponse
from schemas.dto.requests.config import RequestConfig, merge_config
from schemas.dto.responses.envelope import Response
from shared.crypto import encode_basic_auth
from shared.logging import get_logger

log = get_logger(__name__)

# Monotonic: never goes backwards, so response times are never negative
_clock = time.monotonic


class ServiceBase:
    def __init__(
        self,
        endpoint_path: str,
        *,
        transport: Optional[Transport] = None,
        settings: Optional[ClientSettings] = None,
    ) -> None:
        # None means "read the environment whenever settings are needed"
        self._settings = settings
        # None means "the running loop's shared HttpClient", looked up per call
        self._transport = transport
        self.url = self.base_url + endpoint_path
        self.default_config: RequestConfig = {}

    @property
    def settings(self) -> ClientSettings:
        return self._settings if self._settings is not None else ClientSettings()

    @property
    def _api(self) -> Transport:
        if self._transport is not None:
            return self._transport
        return get_http_client(self._settings)

    @property
    def base_url(self) -> str:
        return self.settings.base_url or ""

    async def authenticate(self) -> RequestConfig:
        """Build a request config carrying a Basic Authorization header.

        Reads USER/PASSWORD from the settings on every call. Raises
        ConfigurationError without touching the network when either is missing.
        """
        settings = self.settings
        username = settings.user
        password = settings.password

        if not settings.has_credentials:
            missing = [
                name
                for name, value in (("user", username), ("password", password))
                if not value
            ]
            log.error("credentials_missing", missing=missing)
            raise ConfigurationError(
                "Missing username or password in environment variables.",
                field=",".join(missing),
            )

        return {"headers": {"Authorization": encode_basic_auth(username, password)}}

    async def get(
        self, url: str, config: Optional[RequestConfig] = None
    ) -> Response[Any]:
        return await self._timed("GET", url, config)

    async def post(
        self, url: str, data: Any, config: Optional[RequestConfig] = None
    ) -> Response[Any]:
        return await self._timed("POST", url, config, data)

    async def put(
        self, url: str, data: Any, config: Optional[RequestConfig] = None
    ) -> Response[Any]:
        return await self._timed("PUT", url, config, data)

    async def patch(
        self, url: str, data: Any, config: Optional[RequestConfig] = None
    ) -> Response[Any]:
        return await self._timed("PATCH", url, config, data)

    async def delete(
        self, url: str, config: Optional[RequestConfig] = None
    ) -> Response[Any]:
        return await self._timed("DELETE", url, config)

    async def head(
        self, url: str, config: Optional[RequestConfig] = None
    ) -> Response[Any]:
        return await self._timed("HEAD", url, config)

    async def options(
        self, url: str, config: Optional[RequestConfig] = None
    ) -> Response[Any]:
        return await self._timed("OPTIONS", url, config)

    async def _timed(
        self,
        method: str,
        url: str,
        config: Optional[RequestConfig],
        *body: Any,
    ) -> Response[Any]:
        operation = getattr(self._api, method.lower())
        request_config = merge_config(self.default_config, config)

        start_time = _clock()
        try:
            response = await operation(url, *body, request_config)
        except Exception as e:
            log.warning(
                "request_failed",
                method=method,
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise
        end_time = _clock()

        return self._build_response(end_time, start_time, method, url, response)

    def _build_response(
        self,
        end_time: float,
        start_time: float,
        method: str,
        url: str,
        response: TransportResponse,
    ) -> Response[Any]:
        response_time = int((end_time - start_time) * 1000)

        log.debug(
            "request_completed",
            method=method,
            url=url,
            status=response.status,
            response_time_ms=response_time,
        )
        return Response(
            data=response.data,
            status=response.status,
            headers=response.headers,
            response_time=response_time,
        )
