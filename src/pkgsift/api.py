"""Library entry points — One coroutine per registry.

Usage::

    import asyncio
    from pkgsift.api import search_crates, write_json_to_file

    data = asyncio.run(search_crates("tokio", per_page=5))
    write_json_to_file(data, "crates.json")

Every function raises the adapter exceptions unchanged
(``TransportError``, ``DecodeError``, ``HttpStatusError``, ...).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pkgsift.adapters.composer.adapter import ComposerAdapter
from pkgsift.adapters.crates.adapter import CratesAdapter
from pkgsift.adapters.docker.adapter import DockerAdapter
from pkgsift.adapters.jsdelivr.adapter import JsDelivrAdapter
from pkgsift.adapters.npm.adapter import NpmAdapter
from pkgsift.models.query import SearchOptions
from pkgsift.output.writer import write_json_to_file

if TYPE_CHECKING:
    import httpx

    from pkgsift.config.settings import Settings

__all__ = [
    "search_composer",
    "search_crates",
    "search_docker",
    "search_jsdelivr",
    "search_npm",
    "write_json_to_file",
]


async def search_crates(
    query: str | None = None,
    page: int | None = None,
    per_page: int | None = None,
    *,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """Search crates.io (defaults: ``page=1``, ``per_page=25``)."""
    adapter = CratesAdapter(settings, transport=transport)
    return await adapter.search(query, SearchOptions(page=page, size=per_page))


async def search_npm(
    query: str | None = None,
    size: int | None = None,
    *,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """Search npm via npms.io (default: ``size=25``)."""
    adapter = NpmAdapter(settings, transport=transport)
    return await adapter.search(query, SearchOptions(size=size))


async def search_jsdelivr(
    query: str | None = None,
    page: int | None = None,
    hits_per_page: int | None = None,
    *,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[Any]:
    """Search the jsDelivr index and return its hits (defaults: ``page=0``, ``hitsPerPage=25``)."""
    adapter = JsDelivrAdapter(settings, transport=transport)
    return await adapter.search(query, SearchOptions(page=page, size=hits_per_page))


async def search_docker(
    query: str | None = None,
    page: int | None = None,
    *,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """Search Docker Hub images (default: ``page=1``)."""
    adapter = DockerAdapter(settings, transport=transport)
    return await adapter.search(query, SearchOptions(page=page))


async def search_composer(
    query: str | None = None,
    per_page: int | None = None,
    *,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """Search Packagist (default: ``per_page=25``)."""
    adapter = ComposerAdapter(settings, transport=transport)
    return await adapter.search(query, SearchOptions(size=per_page))
