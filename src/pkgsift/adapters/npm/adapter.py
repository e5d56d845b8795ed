"""npms.io adapter — npm package search via the npms.io API.

API reference:
  GET https://api.npms.io/v2/search/?q=<query>&size=<n>
"""

from __future__ import annotations

import logging
from typing import Any

from pkgsift.adapters.base.adapter import SearchAdapter
from pkgsift.models.query import SearchOptions

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 25


class NpmAdapter(SearchAdapter):
    """Search adapter for npm packages, backed by npms.io.

    npms.io has no page parameter; ``options.page`` is ignored.
    """

    default_base_url = "https://api.npms.io/v2/search/"

    @property
    def name(self) -> str:
        return "npm"

    async def search(self, query: str | None = None, options: SearchOptions | None = None) -> Any:
        options = options or SearchOptions()
        builder = self.request()
        if query is not None:
            builder.set_param("q", query)
        builder.set_param("size", options.size or DEFAULT_SIZE)

        logger.debug("npm search: query=%s", query)
        return await builder.build().get("")
