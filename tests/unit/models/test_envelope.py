"""Tests for the CLI error envelope."""

from __future__ import annotations

from pkgsift.adapters.base.exceptions import HttpStatusError, TransportError
from pkgsift.models.envelope import ErrorEnvelope
from pkgsift.output.writer import dumps_pretty


def test_from_exception_shape() -> None:
    envelope = ErrorEnvelope.from_exception(TransportError("connection refused"))
    assert envelope.to_json_value() == {"items": [{"title": "Error", "subtitle": "connection refused"}]}


def test_http_status_error_uses_body_text() -> None:
    envelope = ErrorEnvelope.from_exception(HttpStatusError("quota exceeded", status_code=429))
    assert envelope.items[0].subtitle == "quota exceeded"


def test_pretty_printed() -> None:
    text = dumps_pretty(ErrorEnvelope.from_exception(ValueError("boom")).to_json_value())
    assert text == '{\n  "items": [\n    {\n      "title": "Error",\n      "subtitle": "boom"\n    }\n  ]\n}'
