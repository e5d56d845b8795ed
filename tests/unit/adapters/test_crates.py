"""Tests for the crates.io adapter."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from pkgsift.adapters.base.exceptions import DecodeError, TransportError
from pkgsift.adapters.crates.adapter import CratesAdapter
from pkgsift.api import search_crates
from pkgsift.config.settings import Settings
from pkgsift.models.query import SearchOptions

CRATES_RESPONSE = {
    "crates": [{"name": "tokio", "max_version": "1.40.0", "downloads": 250000000}],
    "meta": {"total": 1, "next_page": None, "prev_page": None},
}


class TestCratesProperties:
    def test_name(self, settings: Settings) -> None:
        assert CratesAdapter(settings).name == "crates"

    def test_default_base_url(self, settings: Settings) -> None:
        assert CratesAdapter(settings).base_url == "https://crates.io/api/v1/"

    def test_base_url_override(self, settings: Settings) -> None:
        adapter = CratesAdapter(settings, base_url="http://mock.local/api/")
        assert adapter.base_url == "http://mock.local/api/"


class TestCratesSearch:
    async def test_defaults(
        self,
        settings: Settings,
        json_transport: Callable[..., httpx.MockTransport],
        captured: list[httpx.Request],
    ) -> None:
        data = await search_crates(settings=settings, transport=json_transport(CRATES_RESPONSE))

        assert data == CRATES_RESPONSE
        request = captured[0]
        assert request.method == "GET"
        assert request.url.path == "/api/v1/crates"
        assert dict(request.url.params) == {"page": "1", "per_page": "25"}
        assert request.headers["User-Agent"] == "my_crawler (help@my_crawler.com)"

    async def test_query_and_pagination(
        self,
        settings: Settings,
        json_transport: Callable[..., httpx.MockTransport],
        captured: list[httpx.Request],
    ) -> None:
        await search_crates("tokio", 3, 10, settings=settings, transport=json_transport(CRATES_RESPONSE))
        assert dict(captured[0].url.params) == {"page": "3", "per_page": "10", "q": "tokio"}

    async def test_empty_query_is_sent(
        self,
        settings: Settings,
        json_transport: Callable[..., httpx.MockTransport],
        captured: list[httpx.Request],
    ) -> None:
        adapter = CratesAdapter(settings, transport=json_transport(CRATES_RESPONSE))
        await adapter.search("", SearchOptions())
        assert captured[0].url.params["q"] == ""

    async def test_custom_user_agent(
        self,
        json_transport: Callable[..., httpx.MockTransport],
        captured: list[httpx.Request],
    ) -> None:
        custom = Settings(_env_file=None, http={"user_agent": "pkgsift-tests/0.1"})  # type: ignore[call-arg]
        await search_crates("serde", settings=custom, transport=json_transport(CRATES_RESPONSE))
        assert captured[0].headers["User-Agent"] == "pkgsift-tests/0.1"

    async def test_transport_error_propagates(self, settings: Settings, failing_transport: httpx.MockTransport) -> None:
        with pytest.raises(TransportError):
            await search_crates("tokio", settings=settings, transport=failing_transport)

    async def test_decode_error_propagates(self, settings: Settings) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(502, text="Bad Gateway"))
        with pytest.raises(DecodeError):
            await search_crates("tokio", settings=settings, transport=transport)
