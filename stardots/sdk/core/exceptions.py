"""Custom exception hierarchy.

Transport and parsing failures are raised as exceptions. Business failures
(``success=false`` or a non-zero ``code``) are not exceptions: they arrive as
ordinary decoded responses for the caller to inspect.
"""

from __future__ import annotations


class StarDotsError(Exception):
    """Base exception for all SDK errors."""

    pass


class InvalidURLError(StarDotsError):
    """Request URL is not well-formed. Raised before any network I/O."""

    def __init__(self, url: str = "") -> None:
        super().__init__("Invalid URL" + (f": {url}" if url else ""))
        self.url = url


class InvalidResponseError(StarDotsError):
    """Transport succeeded but the server returned no body."""

    def __init__(self, status_code: int | None = None) -> None:
        super().__init__("Invalid response from server")
        self.status_code = status_code


class _DetailError(StarDotsError):
    prefix = "Error"

    def __init__(self, detail: str) -> None:
        super().__init__(f"{self.prefix}: {detail}")
        self.detail = detail


class NetworkError(_DetailError):
    """Connection-level failure (DNS, TLS, timeout, refused)."""

    prefix = "Network error"


class DecodingError(_DetailError):
    """Response bytes did not parse into the expected shape."""

    prefix = "Decoding error"


class EncodingError(_DetailError):
    """Outbound parameters could not be serialized to JSON."""

    prefix = "Encoding error"
