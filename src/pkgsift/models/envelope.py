"""Error envelope — JSON document shown by the CLI when a search fails."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ErrorItem(BaseModel):
    """A single displayable error entry."""

    title: str = Field(default="Error", description="Short heading")
    subtitle: str = Field(description="Error message")


class ErrorEnvelope(BaseModel):
    """``{"items": [{"title": "Error", "subtitle": "..."}]}``."""

    items: list[ErrorItem] = Field(default_factory=list)

    @classmethod
    def from_exception(cls, exc: BaseException) -> ErrorEnvelope:
        return cls(items=[ErrorItem(subtitle=str(exc))])

    def to_json_value(self) -> dict[str, Any]:
        return self.model_dump()
