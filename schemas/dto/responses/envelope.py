"""
Response envelope returned by every ServiceBase verb method.

Response[T] holds the transport payload, status and headers plus the round-trip
time measured by the service, in milliseconds.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, SkipValidation

T = TypeVar("T")


class Response(BaseModel, Generic[T]):
    """Immutable envelope; `data` is whatever the transport decoded."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    data: T
    status: int
    # Transport headers as reported: never coerced or copied
    headers: SkipValidation[dict[str, Any]]
    response_time: int = Field(ge=0, alias="responseTime")
