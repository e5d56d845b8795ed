"""Request builder — Accumulates query parameters for a single registry call.

Every adapter describes its HTTP call the same way:

    builder = RequestBuilder("https://crates.io/api/v1/", user_agent=_USER_AGENT)
    builder.set_param("page", 1).set_param("q", "tokio")
    data = await builder.build().get("crates")

The builder is a plain mutable accumulator. ``build()`` takes a snapshot into
an immutable ``RequestConfig`` that owns the actual network call.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ConfigDict, Field

from pkgsift.adapters.base.exceptions import DecodeError, HttpStatusError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class RequestConfig(BaseModel):
    """Frozen description of one HTTP call to a registry."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    base_url: str = Field(description="URL prefix; endpoints are appended verbatim")
    params: dict[str, str] = Field(default_factory=dict, description="Query parameters")
    user_agent: str | None = Field(default=None, description="User-Agent header value")
    headers: dict[str, str] = Field(default_factory=dict, description="Extra request headers")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")
    transport: httpx.AsyncBaseTransport | None = Field(
        default=None,
        exclude=True,
        description="Custom httpx transport (tests, proxies)",
    )

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}{endpoint}"

    def request_headers(self) -> dict[str, str]:
        headers = dict(self.headers)
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        return headers

    def query_string(self) -> str:
        """Encode the parameters as ``key=value&...`` (sorted by key)."""
        return urlencode(sorted(self.params.items()))

    def _client(self) -> httpx.AsyncClient:
        client_kwargs: dict[str, Any] = {
            "headers": self.request_headers(),
            "timeout": httpx.Timeout(self.timeout),
        }
        if self.transport is not None:
            client_kwargs["transport"] = self.transport
        return httpx.AsyncClient(**client_kwargs)

    async def get(self, endpoint: str = "") -> Any:
        """Send a GET request and return the parsed JSON body.

        The HTTP status code is not inspected; registries that answer errors
        with a JSON document have that document returned as-is.

        Args:
            endpoint: Path appended to ``base_url``.

        Returns:
            The decoded JSON value.

        Raises:
            TransportError: If the request could not be completed.
            DecodeError: If the body is not valid JSON.
        """
        url = self.url_for(endpoint)
        logger.debug("GET %s params=%s", url, self.params)
        try:
            async with self._client() as client:
                response = await client.get(url, params=self.params)
        except httpx.RequestError as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        return _decode(response)

    async def post(self, endpoint: str, payload: Any) -> Any:
        """Send a POST request with a JSON body and return the parsed JSON body.

        Unlike ``get``, the accumulated parameters are not added to the URL;
        callers that need them embed ``query_string()`` in *payload*.

        Raises:
            TransportError: If the request could not be completed.
            HttpStatusError: If the response status is not 2xx.
            DecodeError: If the body is not valid JSON.
        """
        url = self.url_for(endpoint)
        logger.debug("POST %s", url)
        try:
            async with self._client() as client:
                response = await client.post(url, json=payload)
        except httpx.RequestError as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        if not response.is_success:
            raise HttpStatusError(response.text, status_code=response.status_code)

        return _decode(response)


def _decode(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise DecodeError(f"Invalid JSON from {response.request.url} (HTTP {response.status_code}): {e}") from e


class RequestBuilder:
    """Mutable accumulator for a registry request.

    Args:
        base_url: URL prefix shared by every endpoint of the registry.
        user_agent: Value of the ``User-Agent`` header (omitted when ``None``).
        timeout: Request timeout in seconds.
        transport: Optional ``httpx`` transport passed to the client.
    """

    def __init__(
        self,
        base_url: str,
        user_agent: str | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout
        self.transport = transport
        self.params: dict[str, str] = {}
        self.headers: dict[str, str] = {}

    def set_param(self, key: str, value: Any) -> RequestBuilder:
        """Insert or overwrite a query parameter (last write wins)."""
        self.params[key] = str(value)
        return self

    def set_header(self, name: str, value: str) -> RequestBuilder:
        """Insert or overwrite an extra request header (last write wins)."""
        self.headers[name] = value
        return self

    def build(self) -> RequestConfig:
        """Snapshot the accumulated state into an immutable ``RequestConfig``."""
        return RequestConfig(
            base_url=self.base_url,
            params=dict(self.params),
            user_agent=self.user_agent,
            headers=dict(self.headers),
            timeout=self.timeout,
            transport=self.transport,
        )
