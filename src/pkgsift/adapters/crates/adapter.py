"""crates.io adapter — Rust crate search via the crates.io REST API.

API reference:
  GET https://crates.io/api/v1/crates
    ?q=<query>
    &page=<1-based page>
    &per_page=<page_size>
"""

from __future__ import annotations

import logging
from typing import Any

from pkgsift.adapters.base.adapter import SearchAdapter
from pkgsift.models.query import SearchOptions

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 25


class CratesAdapter(SearchAdapter):
    """Search adapter for crates.io.

    Returns the full response body (``{"crates": [...], "meta": {...}}``).
    """

    default_base_url = "https://crates.io/api/v1/"

    @property
    def name(self) -> str:
        return "crates"

    async def search(self, query: str | None = None, options: SearchOptions | None = None) -> Any:
        options = options or SearchOptions()
        builder = (
            self.request()
            .set_param("page", options.page if options.page is not None else DEFAULT_PAGE)
            .set_param("per_page", options.size or DEFAULT_PER_PAGE)
        )
        if query is not None:
            builder.set_param("q", query)

        logger.debug("crates search: query=%s", query)
        return await builder.build().get("crates")
