"""Exceptions raised by the forecast and geocoding clients.

The gateway turns every one of them into the same HTTP 500 body; the
classes only decide how loudly the failure is logged.
"""

from __future__ import annotations

from typing import Optional


class UpstreamError(Exception):
    """A provider call that produced no usable answer.

    ``status_code`` is the provider's HTTP status, or 0 when no response
    was received or the body could not be used.
    """

    def __init__(self, message: str, status_code: int = 0) -> None:
        super().__init__(message)
        self.message: str = message
        self.status_code: int = status_code

    def __str__(self) -> str:
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message

    @property
    def provider_unavailable(self) -> bool:
        """True when the provider itself is down or overloaded."""
        return self.status_code >= 500

    @classmethod
    def from_status(cls, status_code: int, message: str) -> UpstreamError:
        """Pick the error class for a non-200 provider response.

        Args:
            status_code: HTTP status the provider answered with
            message: Explanation taken from the body or a known-status table

        Returns:
            Appropriate UpstreamError subclass
        """
        if status_code in (401, 403):
            return AuthenticationError(message, status_code)
        if status_code == 429:
            return RateLimitError(message, status_code)
        return cls(message, status_code)


class AuthenticationError(UpstreamError):
    """Provider rejected our credentials (API key or User-Agent)."""


class RateLimitError(UpstreamError):
    """Provider is throttling this client."""


class NetworkError(UpstreamError):
    """No response was received from the provider."""

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.original_error = original_error

    @property
    def provider_unavailable(self) -> bool:
        return True


class ParseError(UpstreamError):
    """Provider answered 200 with a body we cannot use."""

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.original_error = original_error


class LocationNotFoundError(UpstreamError):
    """The geocoder answered successfully but found no match."""

    def __init__(self, location: str) -> None:
        super().__init__(f"No results found for location: {location!r}")
        self.location = location
