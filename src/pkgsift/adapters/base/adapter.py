"""Base search adapter — Abstract interface for all registry connectors.

Every registry must implement this interface to integrate with PkgSift.
The adapter is responsible for:
  1. Knowing the registry's base URL and required headers
  2. Translating the query and ``SearchOptions`` into registry parameters
  3. Issuing exactly one HTTP call and returning the JSON result
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from pkgsift.adapters.base.request import RequestBuilder
from pkgsift.config.settings import Settings
from pkgsift.models.query import SearchOptions

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)


class SearchAdapter(ABC):
    """Abstract base class for registry adapters.

    Subclasses set ``default_base_url`` and implement ``name`` and
    ``search()``. Adapters hold no connection state: every ``search()`` call
    builds a fresh request and client.

    Args:
        settings: Application settings (user agent, timeout, credentials).
        base_url: Override for the registry base URL.
        transport: Optional ``httpx`` transport used for every request.
    """

    default_base_url: str = ""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._base_url = base_url or self.default_base_url
        self._transport = transport

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique adapter name (e.g., 'crates', 'npm')."""

    @property
    def base_url(self) -> str:
        return self._base_url

    def request(self) -> RequestBuilder:
        """Start a request against this registry with the configured user agent."""
        return RequestBuilder(
            self._base_url,
            self._settings.http.user_agent,
            timeout=self._settings.http.timeout,
            transport=self._transport,
        )

    @abstractmethod
    async def search(self, query: str | None = None, options: SearchOptions | None = None) -> Any:
        """Search the registry.

        Args:
            query: Free-text search query. ``None`` omits the query parameter.
            options: Pagination options; ``None`` uses registry defaults.

        Returns:
            The registry's JSON response.

        Raises:
            TransportError: If the registry could not be reached.
            DecodeError: If the response is not valid JSON.
        """
