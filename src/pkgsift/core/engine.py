"""PkgSift Engine — Resolves a source name and runs one registry search.

The engine wires settings into the adapter registry:
  1. Register every built-in adapter that is enabled in the settings
  2. Resolve the requested source name to an adapter
  3. Run exactly one search and hand back the JSON result
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from pkgsift.adapters.base.registry import AdapterRegistry
from pkgsift.adapters.composer.adapter import ComposerAdapter
from pkgsift.adapters.crates.adapter import CratesAdapter
from pkgsift.adapters.docker.adapter import DockerAdapter
from pkgsift.adapters.jsdelivr.adapter import JsDelivrAdapter
from pkgsift.adapters.npm.adapter import NpmAdapter
from pkgsift.config.settings import Settings
from pkgsift.models.query import SearchOptions

if TYPE_CHECKING:
    import httpx

    from pkgsift.adapters.base.adapter import SearchAdapter

logger = logging.getLogger(__name__)

BUILTIN_ADAPTERS: dict[str, type[SearchAdapter]] = {
    "npm": NpmAdapter,
    "docker": DockerAdapter,
    "jsdelivr": JsDelivrAdapter,
    "crates": CratesAdapter,
    "composer": ComposerAdapter,
}


def build_registry(settings: Settings) -> AdapterRegistry:
    """Create a registry holding every built-in adapter enabled in *settings*."""
    registry = AdapterRegistry()
    for name, adapter_class in BUILTIN_ADAPTERS.items():
        if not settings.adapter_config(name).enabled:
            logger.info("Adapter disabled by configuration: %s", name)
            continue
        registry.register(name, adapter_class)
    return registry


class SearchEngine:
    """Entry point for running a search against a named registry.

    Attributes:
        settings: Application configuration.
        adapter_registry: Registry of enabled adapters.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.adapter_registry = build_registry(self.settings)
        self._transport = transport

    @property
    def sources(self) -> list[str]:
        return self.adapter_registry.registered_adapters

    def get_adapter(self, source: str) -> SearchAdapter:
        """Instantiate the adapter for *source*.

        Raises:
            AdapterNotFoundError: If *source* is unknown or disabled.
        """
        return self.adapter_registry.create(
            source,
            settings=self.settings,
            base_url=self.settings.adapter_config(source).base_url,
            transport=self._transport,
        )

    async def search(
        self,
        source: str,
        query: str | None = None,
        options: SearchOptions | None = None,
    ) -> Any:
        """Search *source* for *query*.

        Errors raised by the adapter propagate unchanged.
        """
        adapter = self.get_adapter(source)
        start = time.monotonic()
        result = await adapter.search(query, options)
        took_ms = int((time.monotonic() - start) * 1000)
        logger.info("Search completed: source=%s, query=%s, took=%dms", source, query, took_ms)
        return result
