"""
Unit test configuration.

Patches dotenv so pydantic-settings never reads the project's real .env file
during unit tests, and clears the client variables a developer shell may
export (USER in particular). Tests control config exclusively through
monkeypatch.setenv() or explicit ClientSettings(...).
"""

import weakref
from unittest.mock import AsyncMock

import pytest

import infrastructure.http_client as http_client_module
from infrastructure.transport.protocol import TransportResponse

_CLIENT_ENV_VARS = (
    "BASEURL",
    "BASE_URL",
    "USER",
    "PASSWORD",
    "HTTP_TIMEOUT_SECONDS",
    "HTTP_RAISE_FOR_STATUS",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def disable_dotenv_loading(monkeypatch):
    """Prevent pydantic-settings from loading .env files in all unit tests."""
    import pydantic_settings.sources.providers.dotenv as ps_dotenv

    monkeypatch.setattr(ps_dotenv, "dotenv_values", lambda *a, **kw: {})


@pytest.fixture(autouse=True)
def clean_client_env(monkeypatch):
    for var in _CLIENT_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def reset_shared_http_client(monkeypatch):
    """Each test starts without any shared HttpClient."""
    monkeypatch.setattr(http_client_module, "_clients", weakref.WeakKeyDictionary())
    monkeypatch.setattr(http_client_module, "_detached_client", None)


@pytest.fixture
def transport_response():
    return TransportResponse(
        data={"id": 7, "name": "alice"},
        status=200,
        headers={"content-type": "application/json", "x-request-id": "req_1"},
    )


@pytest.fixture
def fake_transport(transport_response):
    """Transport spy; every verb resolves to the same TransportResponse."""
    transport = AsyncMock()
    for verb in ("get", "post", "put", "patch", "delete", "head", "options"):
        getattr(transport, verb).return_value = transport_response
    return transport
