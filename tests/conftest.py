"""Shared test fixtures and configuration."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from pkgsift.config.settings import JsDelivrSettings, Settings

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults (no .env file)."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def jsdelivr_settings() -> Settings:
    """Settings with placeholder Algolia credentials."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        jsdelivr=JsDelivrSettings(app_id="TESTAPP", api_key="test-search-key"),
    )


@pytest.fixture
def captured() -> list[httpx.Request]:
    """Requests seen by the mock transports of a test."""
    return []


@pytest.fixture
def json_transport(captured: list[httpx.Request]) -> Callable[..., httpx.MockTransport]:
    """Factory for a transport that answers every request with a fixed JSON body."""

    def _make(body: Any, status_code: int = 200) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(status_code, json=body)

        return httpx.MockTransport(handler)

    return _make


@pytest.fixture
def failing_transport(captured: list[httpx.Request]) -> httpx.MockTransport:
    """Transport that fails every request with a connection error."""

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    return httpx.MockTransport(handler)


@pytest.fixture
def patch_transport(monkeypatch: pytest.MonkeyPatch) -> Callable[[httpx.AsyncBaseTransport], None]:
    """Route every ``httpx.AsyncClient`` created during the test through *transport*.

    Used for code paths (the CLI) that do not take a transport argument.
    """

    def _patch(transport: httpx.AsyncBaseTransport) -> None:
        real_client = httpx.AsyncClient

        def factory(**kwargs: Any) -> httpx.AsyncClient:
            kwargs["transport"] = transport
            return real_client(**kwargs)

        monkeypatch.setattr(httpx, "AsyncClient", factory)

    return _patch
