"""Adapter-specific exceptions."""

from __future__ import annotations


class AdapterError(Exception):
    """Base exception for adapter errors."""


class TransportError(AdapterError):
    """Raised when the registry cannot be reached (connection, TLS, timeout)."""


class DecodeError(AdapterError):
    """Raised when a registry response body is not valid JSON."""


class HttpStatusError(AdapterError):
    """Raised when a registry answers with a non-success status code.

    The exception message is the raw response body so callers can surface
    whatever the backend reported.
    """

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(AdapterError):
    """Raised when adapter configuration is invalid."""
