"""HTTP client helper."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping

import aiohttp
from yarl import URL

from ...config import DEFAULT_REQUEST_TIMEOUT, JSON_CONTENT_TYPE
from ...core.exceptions import InvalidURLError, NetworkError
from .multipart import FilePart, build_multipart_body, content_type_for, new_boundary

logger = logging.getLogger(__name__)


def validate_url(url: str | URL) -> URL:
    """Parse an absolute http(s) URL.

    Raises:
        InvalidURLError: If the URL is not absolute http(s) with a host.
    """
    try:
        parsed = url if isinstance(url, URL) else URL(url)
    except (TypeError, ValueError) as exc:
        raise InvalidURLError(str(url)) from exc
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise InvalidURLError(str(url))
    return parsed


class HTTPClient:
    """Async HTTP client wrapper.

    Both send methods return ``(body, status)`` for any HTTP response,
    4xx/5xx included; only connection-level failures raise.
    """

    def __init__(self, timeout: float = DEFAULT_REQUEST_TIMEOUT) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def _timeout_for(self, timeout: float | None) -> aiohttp.ClientTimeout:
        if timeout is None:
            return self.timeout
        return aiohttp.ClientTimeout(total=timeout)

    async def _send(
        self,
        method: str,
        url: str | URL,
        body: bytes | None,
        headers: dict[str, str],
        timeout: float | None,
    ) -> tuple[bytes, int]:
        target = validate_url(url)
        try:
            async with self.session.request(
                method,
                target,
                data=body,
                headers=headers,
                timeout=self._timeout_for(timeout),
            ) as response:
                raw = await response.read()
                status = response.status
        except aiohttp.InvalidURL as exc:
            raise InvalidURLError(str(url)) from exc
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            detail = str(exc) or exc.__class__.__name__
            logger.debug("Request failed", extra={"method": method, "url": str(target), "error": detail})
            raise NetworkError(detail) from exc

        logger.debug(
            "Response received",
            extra={"method": method, "url": str(target), "status": status, "bytes": len(raw)},
        )
        return raw, status

    async def send_json(
        self,
        method: str,
        url: str | URL,
        body: bytes | None = None,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> tuple[bytes, int]:
        """Send a request with a JSON (or empty) body."""
        request_headers = {"Content-Type": JSON_CONTENT_TYPE}
        request_headers.update(headers or {})
        return await self._send(method, url, body, request_headers, timeout)

    async def send_multipart(
        self,
        method: str,
        url: str | URL,
        form_fields: Mapping[str, str],
        file_part: FilePart | None = None,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
        boundary: str | None = None,
    ) -> tuple[bytes, int]:
        """Send a multipart/form-data request."""
        boundary = boundary or new_boundary()
        request_headers = dict(headers or {})
        request_headers["Content-Type"] = content_type_for(boundary)
        body = build_multipart_body(boundary, form_fields, file_part)
        return await self._send(method, url, body, request_headers, timeout)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
