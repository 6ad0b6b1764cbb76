"""Integration test configuration: no .env, no developer credentials."""

import weakref

import pytest

import infrastructure.http_client as http_client_module


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    import pydantic_settings.sources.providers.dotenv as ps_dotenv

    monkeypatch.setattr(ps_dotenv, "dotenv_values", lambda *a, **kw: {})
    for var in ("BASEURL", "BASE_URL", "USER", "PASSWORD"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(http_client_module, "_clients", weakref.WeakKeyDictionary())
    monkeypatch.setattr(http_client_module, "_detached_client", None)
