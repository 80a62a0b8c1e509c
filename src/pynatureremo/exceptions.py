"""Custom exceptions for pynatureremo library."""

from __future__ import annotations


class NatureRemoError(Exception):
    """Base exception for all Nature Remo errors."""


class NatureRemoConnectionError(NatureRemoError):
    """Exception raised for connection failures."""


class NatureRemoTimeoutError(NatureRemoError):
    """Exception raised when API requests timeout."""


class RateLimitHeaderError(NatureRemoError):
    """Exception raised when a rate limit header is missing or invalid.

    The API is expected to send the X-Rate-Limit-* headers on every response,
    so a response without them is treated as a failed call even when the HTTP
    status indicates success.

    Attributes:
        header_name: Name of the offending header.
        value: Raw header value, or None if the header was absent.
    """

    def __init__(self, message: str = "", header_name: str | None = None, value: str | None = None) -> None:
        """Initialize RateLimitHeaderError.

        Args:
            message: Error message.
            header_name: Name of the offending header.
            value: Raw header value, or None if the header was absent.
        """
        super().__init__(message)
        self.header_name = header_name
        self.value = value


class NatureRemoAPIError(NatureRemoError):
    """Exception raised when the API answers with a non-2xx status.

    Attributes:
        status: HTTP status code of the response.
        reason: Response body text, or None if the body was empty or unreadable.
    """

    def __init__(self, message: str = "", status: int | None = None, reason: str | None = None) -> None:
        """Initialize NatureRemoAPIError.

        Args:
            message: Error message.
            status: HTTP status code of the response.
            reason: Response body text, if any.
        """
        super().__init__(message)
        self.status = status
        self.reason = reason


class NatureRemoDecodeError(NatureRemoError):
    """Exception raised when a response body cannot be decoded."""
