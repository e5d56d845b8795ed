"""Packagist adapter — PHP (Composer) package search.

API reference:
  GET https://packagist.org/search.json?q=<query>&per_page=<n>
"""

from __future__ import annotations

import logging
from typing import Any

from pkgsift.adapters.base.adapter import SearchAdapter
from pkgsift.models.query import SearchOptions

logger = logging.getLogger(__name__)

DEFAULT_PER_PAGE = 25


class ComposerAdapter(SearchAdapter):
    """Search adapter for Composer packages on Packagist.

    Only the first page is requested; ``options.page`` is ignored.
    """

    default_base_url = "https://packagist.org/search.json"

    @property
    def name(self) -> str:
        return "composer"

    async def search(self, query: str | None = None, options: SearchOptions | None = None) -> Any:
        options = options or SearchOptions()
        builder = self.request()
        if query is not None:
            builder.set_param("q", query)
        builder.set_param("per_page", options.size or DEFAULT_PER_PAGE)

        logger.debug("composer search: query=%s", query)
        return await builder.build().get("")
