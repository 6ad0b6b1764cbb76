"""Transport protocol: ServiceBase depends on this, not on HttpClient."""

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol


@dataclass(frozen=True)
class TransportResponse:
    """What a transport reports back for one completed request."""

    data: Any
    status: int
    headers: dict[str, Any] = field(default_factory=dict)


class Transport(Protocol):
    async def get(
        self, url: str, config: Mapping[str, Any]
    ) -> TransportResponse: ...

    async def post(
        self, url: str, data: Any, config: Mapping[str, Any]
    ) -> TransportResponse: ...

    async def put(
        self, url: str, data: Any, config: Mapping[str, Any]
    ) -> TransportResponse: ...

    async def patch(
        self, url: str, data: Any, config: Mapping[str, Any]
    ) -> TransportResponse: ...

    async def delete(
        self, url: str, config: Mapping[str, Any]
    ) -> TransportResponse: ...

    async def head(
        self, url: str, config: Mapping[str, Any]
    ) -> TransportResponse: ...

    async def options(
        self, url: str, config: Mapping[str, Any]
    ) -> TransportResponse: ...
