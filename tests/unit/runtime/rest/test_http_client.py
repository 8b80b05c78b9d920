"""Precise unit tests for HTTPClient.

Tests focus on session management, headers, status passthrough and error mapping.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from stardots.sdk.core import InvalidURLError, NetworkError
from stardots.sdk.runtime.rest import FilePart, HTTPClient


def make_response(body: bytes = b"{}", status: int = 200):
    response = AsyncMock()
    response.status = status
    response.read = AsyncMock(return_value=body)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def install_session(client: HTTPClient, response=None, side_effect=None):
    session = MagicMock()
    session.closed = False
    session.request = MagicMock(return_value=response, side_effect=side_effect)
    client._session = session
    return session


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None

    def test_default_timeout(self):
        assert HTTPClient().timeout.total == 30.0

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        client = HTTPClient()
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        client = HTTPClient()
        await client.close()
        await client.close()  # Should not raise

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with HTTPClient() as client:
            assert client.session is not None
        assert client._session is None or client._session.closed


class TestSendJSON:
    """Test send_json."""

    @pytest.mark.asyncio
    async def test_returns_body_and_status(self):
        client = HTTPClient()
        session = install_session(client, make_response(b'{"ok":1}', 200))

        raw, status = await client.send_json(
            "PUT", "https://api.example.com/x", b'{"a":1}', headers={"x-stardots-key": "k"}
        )

        assert raw == b'{"ok":1}'
        assert status == 200
        args, kwargs = session.request.call_args
        assert args[0] == "PUT"
        assert str(args[1]) == "https://api.example.com/x"
        assert kwargs["data"] == b'{"a":1}'
        assert kwargs["headers"]["Content-Type"] == "application/json; charset=utf-8"
        assert kwargs["headers"]["x-stardots-key"] == "k"

    @pytest.mark.asyncio
    async def test_http_errors_are_not_exceptions(self):
        """Test 4xx/5xx flow through as (body, status)."""
        client = HTTPClient()
        install_session(client, make_response(b'{"code":500}', 500))

        raw, status = await client.send_json("GET", "https://api.example.com/x")
        assert status == 500
        assert raw == b'{"code":500}'

    @pytest.mark.asyncio
    async def test_per_call_timeout(self):
        client = HTTPClient(timeout=30.0)
        session = install_session(client, make_response())

        await client.send_json("GET", "https://api.example.com/x", timeout=5.0)
        assert session.request.call_args.kwargs["timeout"].total == 5.0

        await client.send_json("GET", "https://api.example.com/x")
        assert session.request.call_args.kwargs["timeout"].total == 30.0

    @pytest.mark.asyncio
    async def test_invalid_url_fails_before_io(self):
        client = HTTPClient()
        session = install_session(client, make_response())

        for url in ("not a url", "ftp://example.com/x", "https://"):
            with pytest.raises(InvalidURLError):
                await client.send_json("GET", url)
        session.request.assert_not_called()

    @pytest.mark.asyncio
    async def test_client_error_maps_to_network_error(self):
        client = HTTPClient()
        install_session(client, side_effect=aiohttp.ClientConnectionError("refused"))

        with pytest.raises(NetworkError) as exc_info:
            await client.send_json("GET", "https://api.example.com/x")
        assert "refused" in exc_info.value.detail

    @pytest.mark.asyncio
    async def test_timeout_maps_to_network_error(self):
        client = HTTPClient()
        install_session(client, side_effect=asyncio.TimeoutError())

        with pytest.raises(NetworkError) as exc_info:
            await client.send_json("GET", "https://api.example.com/x")
        assert exc_info.value.detail == "TimeoutError"

    @pytest.mark.asyncio
    async def test_unreachable_host(self):
        """Test a refused connection raises NetworkError."""
        async with HTTPClient(timeout=5.0) as client:
            with pytest.raises(NetworkError):
                await client.send_json("GET", "http://127.0.0.1:1/openapi/space/list")


class TestSendMultipart:
    """Test send_multipart."""

    @pytest.mark.asyncio
    async def test_body_and_content_type(self):
        client = HTTPClient()
        session = install_session(client, make_response(b"{}", 200))

        await client.send_multipart(
            "PUT",
            "https://api.example.com/upload",
            {"space": "demo"},
            FilePart(file_name="t.txt", content=b"hi"),
            headers={"x-stardots-key": "k"},
            boundary="B1",
        )

        kwargs = session.request.call_args.kwargs
        assert kwargs["headers"]["Content-Type"] == "multipart/form-data; boundary=B1"
        assert kwargs["headers"]["x-stardots-key"] == "k"
        assert kwargs["data"].startswith(b'--B1\r\nContent-Disposition: form-data; name="space"')
        assert kwargs["data"].endswith(b"--B1--\r\n")

    @pytest.mark.asyncio
    async def test_generates_boundary(self):
        client = HTTPClient()
        session = install_session(client, make_response())

        await client.send_multipart("PUT", "https://api.example.com/upload", {"space": "demo"})

        content_type = session.request.call_args.kwargs["headers"]["Content-Type"]
        boundary = content_type.split("boundary=", 1)[1]
        assert boundary.startswith("Boundary-")
        assert session.request.call_args.kwargs["data"].endswith(f"--{boundary}--\r\n".encode())
