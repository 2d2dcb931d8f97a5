"""Exceptions raised by the Devnagri MCP server."""
from typing import Optional


class DevnagriError(Exception):
    """Base class for all errors raised by this package."""


class UpstreamError(DevnagriError):
    """
    The translation API did not return a usable translation.

    Raised for non-200 responses, network failures and malformed bodies.
    ``status_code`` is set only when the upstream actually answered.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(DevnagriError, ValueError):
    """A tool argument is missing or malformed."""
