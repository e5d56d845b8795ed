"""Search option models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SearchOptions(BaseModel):
    """Pagination options shared by every adapter.

    ``None`` means "use the registry's default". Each adapter maps these onto
    its own parameter names (``per_page``, ``size``, ``hitsPerPage``, ...).
    """

    page: int | None = Field(default=None, ge=0, description="Page number (registry-specific base)")
    size: int | None = Field(default=None, ge=1, description="Results per page")
