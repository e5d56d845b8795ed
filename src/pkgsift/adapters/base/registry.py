"""Adapter Registry — Maps source names to registry adapter classes.

The registry is the single place where a source name typed on the command
line (``crates``, ``npm``, ...) is resolved to the adapter that serves it.
"""

from __future__ import annotations

import logging
from typing import Any

from pkgsift.adapters.base.adapter import SearchAdapter

logger = logging.getLogger(__name__)


class AdapterNotFoundError(Exception):
    """Raised when a requested adapter is not registered."""


class AdapterRegistry:
    """Registry for registry adapter classes.

    Example:
        >>> registry = AdapterRegistry()
        >>> registry.register("crates", CratesAdapter)
        >>> adapter = registry.create("crates", settings=settings)
    """

    def __init__(self) -> None:
        self._classes: dict[str, type[SearchAdapter]] = {}

    def register(self, name: str, adapter_class: type[SearchAdapter]) -> None:
        """Register an adapter class.

        Args:
            name: Unique source name for this adapter.
            adapter_class: The adapter class to register.
        """
        if name in self._classes:
            logger.warning("Overwriting existing adapter registration: %s", name)
        self._classes[name] = adapter_class
        logger.debug("Registered adapter: %s", name)

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def get_class(self, name: str) -> type[SearchAdapter]:
        """Look up the adapter class registered under *name*.

        Raises:
            AdapterNotFoundError: If no adapter is registered under this name.
        """
        if name not in self._classes:
            raise AdapterNotFoundError(
                f"Unsupported source: {name}. "
                f"Supported sources are: {', '.join(self.registered_adapters)}"
            )
        return self._classes[name]

    def create(self, name: str, **kwargs: Any) -> SearchAdapter:
        """Instantiate the adapter registered under *name*.

        Args:
            name: The registered source name.
            **kwargs: Passed to the adapter constructor.

        Raises:
            AdapterNotFoundError: If no adapter is registered under this name.
        """
        adapter = self.get_class(name)(**kwargs)
        logger.debug("Created adapter: %s", name)
        return adapter

    @property
    def registered_adapters(self) -> list[str]:
        """List all registered source names."""
        return list(self._classes.keys())
