"""Tests for the npms.io adapter."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from pkgsift.adapters.base.exceptions import TransportError
from pkgsift.adapters.npm.adapter import NpmAdapter
from pkgsift.api import search_npm
from pkgsift.config.settings import Settings
from pkgsift.models.query import SearchOptions

NPM_RESPONSE = {
    "total": 1,
    "results": [{"package": {"name": "react", "version": "18.3.1"}, "score": {"final": 0.95}}],
}


class TestNpmSearch:
    def test_name(self, settings: Settings) -> None:
        assert NpmAdapter(settings).name == "npm"

    async def test_defaults(
        self,
        settings: Settings,
        json_transport: Callable[..., httpx.MockTransport],
        captured: list[httpx.Request],
    ) -> None:
        data = await search_npm(settings=settings, transport=json_transport(NPM_RESPONSE))

        assert data == NPM_RESPONSE
        request = captured[0]
        assert request.url.host == "api.npms.io"
        assert request.url.path == "/v2/search/"
        assert dict(request.url.params) == {"size": "25"}

    async def test_query_and_size(
        self,
        settings: Settings,
        json_transport: Callable[..., httpx.MockTransport],
        captured: list[httpx.Request],
    ) -> None:
        await search_npm("react", 5, settings=settings, transport=json_transport(NPM_RESPONSE))
        assert dict(captured[0].url.params) == {"q": "react", "size": "5"}

    async def test_page_is_ignored(
        self,
        settings: Settings,
        json_transport: Callable[..., httpx.MockTransport],
        captured: list[httpx.Request],
    ) -> None:
        adapter = NpmAdapter(settings, transport=json_transport(NPM_RESPONSE))
        await adapter.search("react", SearchOptions(page=4))
        assert "page" not in captured[0].url.params

    async def test_transport_error_propagates(self, settings: Settings, failing_transport: httpx.MockTransport) -> None:
        with pytest.raises(TransportError, match="connection refused"):
            await search_npm("react", settings=settings, transport=failing_transport)
