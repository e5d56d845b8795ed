"""Docker Hub adapter — Container image search via the v1 index API.

API reference:
  GET https://index.docker.io/v1/search?q=<query>&page=<1-based page>
"""

from __future__ import annotations

import logging
from typing import Any

from pkgsift.adapters.base.adapter import SearchAdapter
from pkgsift.models.query import SearchOptions

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1


class DockerAdapter(SearchAdapter):
    """Search adapter for Docker Hub images.

    The v1 index returns a fixed page size, so ``options.size`` is ignored.
    """

    default_base_url = "https://index.docker.io/v1/search"

    @property
    def name(self) -> str:
        return "docker"

    async def search(self, query: str | None = None, options: SearchOptions | None = None) -> Any:
        options = options or SearchOptions()
        builder = self.request()
        if query is not None:
            builder.set_param("q", query)
        builder.set_param("page", options.page if options.page is not None else DEFAULT_PAGE)

        logger.debug("docker search: query=%s", query)
        return await builder.build().get("")
