"""jsDelivr adapter — npm package index as served to jsdelivr.com.

jsDelivr's package search is hosted on Algolia. A query is one POST to the
index's ``query`` endpoint; the search parameters travel as a URL-encoded
string inside the JSON body:

  POST https://<app-id>-dsn.algolia.net/1/indexes/<index>/query
  X-Algolia-Agent: ...
  X-Algolia-Application-Id: <app-id>
  X-Algolia-API-Key: <search-only key>

  {"params": "attributesToHighlight=&attributesToRetrieve=name%2C...&hitsPerPage=25&page=0&query=react"}

Only the ``hits`` list of the response is returned.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pkgsift.adapters.base.adapter import SearchAdapter
from pkgsift.adapters.base.exceptions import ConfigurationError, DecodeError
from pkgsift.config.settings import Settings
from pkgsift.models.query import SearchOptions

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 0
DEFAULT_HITS_PER_PAGE = 25


class JsDelivrAdapter(SearchAdapter):
    """Search adapter for the jsDelivr npm index (Algolia).

    Pages are 0-based. Requires ``jsdelivr.app_id`` and ``jsdelivr.api_key``
    in the settings.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(settings, base_url=base_url, transport=transport)
        cfg = self._settings.jsdelivr
        if not self._base_url and cfg.app_id:
            self._base_url = f"https://{cfg.app_id.lower()}-dsn.algolia.net/1/indexes/{cfg.index}/query"

    @property
    def name(self) -> str:
        return "jsdelivr"

    async def search(self, query: str | None = None, options: SearchOptions | None = None) -> Any:
        """Search the jsDelivr index.

        Returns:
            The ``hits`` list from the Algolia response (``[]`` when absent
            or null).

        Raises:
            ConfigurationError: If the Algolia credentials are not configured.
            HttpStatusError: If Algolia answers with a non-2xx status; the
                message is the response body.
            DecodeError: If the response is not a JSON object.
        """
        cfg = self._settings.jsdelivr
        if not cfg.app_id or not cfg.api_key:
            raise ConfigurationError(
                "jsDelivr search requires Algolia credentials. "
                "Set PKGSIFT_JSDELIVR__APP_ID and PKGSIFT_JSDELIVR__API_KEY."
            )

        options = options or SearchOptions()
        config = (
            self.request()
            .set_param("query", query if query is not None else "")
            .set_param("page", options.page if options.page is not None else DEFAULT_PAGE)
            .set_param("hitsPerPage", options.size or DEFAULT_HITS_PER_PAGE)
            .set_param("attributesToRetrieve", ",".join(cfg.attributes))
            .set_param("attributesToHighlight", "")
            .set_header("X-Algolia-Agent", cfg.agent)
            .set_header("X-Algolia-Application-Id", cfg.app_id)
            .set_header("X-Algolia-API-Key", cfg.api_key)
            .build()
        )

        logger.debug("jsdelivr search: query=%s, index=%s", query, cfg.index)
        data = await config.post("", {"params": config.query_string()})
        if not isinstance(data, dict):
            raise DecodeError(f"Unexpected Algolia response: expected an object, got {type(data).__name__}")
        return data.get("hits") or []
