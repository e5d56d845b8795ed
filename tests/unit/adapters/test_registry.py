"""Tests for the adapter registry."""

from __future__ import annotations

import pytest

from pkgsift.adapters.base.registry import AdapterNotFoundError, AdapterRegistry
from pkgsift.adapters.crates.adapter import CratesAdapter
from pkgsift.adapters.npm.adapter import NpmAdapter
from pkgsift.config.settings import Settings


class TestAdapterRegistry:
    def test_register_and_create(self, settings: Settings) -> None:
        registry = AdapterRegistry()
        registry.register("crates", CratesAdapter)

        adapter = registry.create("crates", settings=settings)

        assert isinstance(adapter, CratesAdapter)
        assert "crates" in registry
        assert registry.registered_adapters == ["crates"]

    def test_unknown_name_lists_supported_sources(self) -> None:
        registry = AdapterRegistry()
        registry.register("crates", CratesAdapter)
        registry.register("npm", NpmAdapter)

        with pytest.raises(AdapterNotFoundError, match="Unsupported source: foo") as exc_info:
            registry.get_class("foo")
        assert "crates, npm" in str(exc_info.value)

    def test_reregister_overwrites(self) -> None:
        registry = AdapterRegistry()
        registry.register("packages", CratesAdapter)
        registry.register("packages", NpmAdapter)
        assert registry.get_class("packages") is NpmAdapter
        assert registry.registered_adapters == ["packages"]

    def test_create_passes_kwargs(self, settings: Settings) -> None:
        registry = AdapterRegistry()
        registry.register("crates", CratesAdapter)
        adapter = registry.create("crates", settings=settings, base_url="http://mock.local/")
        assert adapter.base_url == "http://mock.local/"
