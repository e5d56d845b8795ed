"""Base adapter interface — Request builder and abstract registry connector."""

from pkgsift.adapters.base.adapter import SearchAdapter
from pkgsift.adapters.base.registry import AdapterRegistry
from pkgsift.adapters.base.request import RequestBuilder, RequestConfig

__all__ = ["AdapterRegistry", "RequestBuilder", "RequestConfig", "SearchAdapter"]
