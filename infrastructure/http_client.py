"""Shared async HTTP client with configurable timeout."""

import asyncio
import weakref
from typing import Any, Mapping, Optional, Union

import httpx

from config import ClientSettings
from infrastructure.transport.protocol import TransportResponse
from shared.logging import get_logger

log = get_logger(__name__)


class HttpClient:
    """Thin async wrapper around httpx.AsyncClient implementing Transport.

    Every verb takes the request configuration as a mapping of httpx
    per-request keyword arguments (headers, params, timeout, auth, ...).
    Non-2xx statuses raise httpx.HTTPStatusError unless the client was
    built with raise_for_status=False.
    """

    def __init__(
        self,
        timeout: float = 5.0,
        raise_for_status: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)
        self.raise_for_status = raise_for_status

    async def get(self, url: str, config: Mapping[str, Any]) -> TransportResponse:
        return await self._send("GET", url, None, config)

    async def post(
        self, url: str, data: Any, config: Mapping[str, Any]
    ) -> TransportResponse:
        return await self._send("POST", url, data, config)

    async def put(
        self, url: str, data: Any, config: Mapping[str, Any]
    ) -> TransportResponse:
        return await self._send("PUT", url, data, config)

    async def patch(
        self, url: str, data: Any, config: Mapping[str, Any]
    ) -> TransportResponse:
        return await self._send("PATCH", url, data, config)

    async def delete(
        self, url: str, config: Mapping[str, Any]
    ) -> TransportResponse:
        return await self._send("DELETE", url, None, config)

    async def head(self, url: str, config: Mapping[str, Any]) -> TransportResponse:
        return await self._send("HEAD", url, None, config)

    async def options(
        self, url: str, config: Mapping[str, Any]
    ) -> TransportResponse:
        return await self._send("OPTIONS", url, None, config)

    async def _send(
        self, method: str, url: str, data: Any, config: Mapping[str, Any]
    ) -> TransportResponse:
        kwargs = dict(config)
        if isinstance(data, (bytes, str)):
            kwargs["content"] = data
        elif data is not None:
            kwargs["json"] = data

        log.debug("http_request_sent", method=method, url=url)
        response = await self._client.request(method, url, **kwargs)
        if self.raise_for_status:
            response.raise_for_status()

        return TransportResponse(
            data=_decode_body(response),
            status=response.status_code,
            headers=_collect_headers(response.headers),
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()


def _decode_body(response: httpx.Response) -> Any:
    """JSON when the body parses as JSON, the raw text otherwise."""
    if not response.content:
        return ""
    try:
        return response.json()
    except ValueError:
        return response.text


def _collect_headers(headers: httpx.Headers) -> dict[str, Union[str, list[str]]]:
    """Lower-cased header names; repeated names (Set-Cookie) keep every value."""
    collected: dict[str, Union[str, list[str]]] = {}
    for name in headers.keys():
        values = headers.get_list(name)
        collected[name] = values[0] if len(values) == 1 else values
    return collected


# One client per event loop: pooled connections belong to the loop that opened them
_clients: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, HttpClient]" = (
    weakref.WeakKeyDictionary()
)
# Used when get_http_client() is called with no loop running
_detached_client: Optional[HttpClient] = None


def _current_loop() -> Optional[asyncio.AbstractEventLoop]:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


def _new_client(settings: Optional[ClientSettings]) -> HttpClient:
    if settings is None:
        settings = ClientSettings()
    log.debug(
        "http_client_created",
        timeout=settings.http_timeout_seconds,
        raise_for_status=settings.http_raise_for_status,
    )
    return HttpClient(
        timeout=settings.http_timeout_seconds,
        raise_for_status=settings.http_raise_for_status,
    )


def get_http_client(settings: Optional[ClientSettings] = None) -> HttpClient:
    """Return the shared HttpClient of the running event loop, creating it on first use.

    Every ServiceBase in the same loop gets the same instance. A new loop
    (e.g. each asyncio.run() or each test) gets a fresh one.
    """
    global _detached_client
    loop = _current_loop()
    if loop is None:
        if _detached_client is None:
            _detached_client = _new_client(settings)
        return _detached_client

    # Closed loops can no longer be used to close their clients; just forget them
    for stale in [known for known in list(_clients.keys()) if known.is_closed()]:
        _clients.pop(stale, None)

    client = _clients.get(loop)
    if client is None:
        client = _clients[loop] = _new_client(settings)
    return client


async def close_http_client() -> None:
    """Close the running loop's HttpClient; the next get_http_client() makes a new one."""
    client = _clients.pop(asyncio.get_running_loop(), None)
    if client is not None:
        await client.aclose()
