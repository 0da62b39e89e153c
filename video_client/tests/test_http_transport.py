"""
Unit tests for the httpx transport.
"""

import pytest
import httpx
import json
from unittest.mock import AsyncMock, patch

from video_client.adapters.http_transport import HttpxTransport
from video_client.client import VideoClient
from video_client.shared.errors import TransportError


def mock_client(handler):
    """AsyncClient backed by an in-process handler."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestHttpxTransport:
    """Test cases for HttpxTransport."""

    @pytest.mark.asyncio
    async def test_get_returns_json(self):
        """A 200 response is decoded as JSON."""
        def handler(request):
            assert request.method == "GET"
            return httpx.Response(200, json={"id": "v1"})

        transport = HttpxTransport(client=mock_client(handler))

        assert await transport.get("http://catalog/videos/v1") == {"id": "v1"}
        await transport.aclose()

    @pytest.mark.asyncio
    async def test_empty_body(self):
        transport = HttpxTransport(client=mock_client(lambda request: httpx.Response(200)))
        assert await transport.get("http://catalog/videos/v1") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [404, 410, 500, 503])
    async def test_status_error_carries_status(self, status):
        """Failure statuses raise a TransportError carrying the status."""
        transport = HttpxTransport(client=mock_client(lambda request: httpx.Response(status, text="nope")))

        with pytest.raises(TransportError) as raised:
            await transport.get("http://catalog/videos/v1")

        assert raised.value.status == status
        assert raised.value.details["url"] == "http://catalog/videos/v1"
        assert raised.value.to_response().status == status

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        """A successful response that is not JSON raises a TransportError."""
        transport = HttpxTransport(client=mock_client(lambda request: httpx.Response(200, text="<html>oops</html>")))

        with pytest.raises(TransportError) as raised:
            await transport.get("http://catalog/videos/v1")

        assert raised.value.status is None
        assert raised.value.details["body"] == "<html>oops</html>"

    @pytest.mark.asyncio
    async def test_network_error_has_no_status(self):
        """Connection failures raise a TransportError without a status."""
        def handler(request):
            raise httpx.ConnectError("Connection failed", request=request)

        transport = HttpxTransport(client=mock_client(handler))

        with pytest.raises(TransportError) as raised:
            await transport.get("http://catalog/videos/v1")

        assert raised.value.status is None

    @pytest.mark.asyncio
    async def test_per_request_client(self):
        """Without an injected client a short-lived AsyncClient is used."""
        with patch('httpx.AsyncClient') as client_cls:
            client_cls.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=httpx.Response(
                    status_code=200,
                    content=json.dumps([{"id": "c1"}]),
                    request=httpx.Request("GET", "http://catalog/category")
                )
            )

            result = await HttpxTransport(timeout=3.0).get("http://catalog/category")

        assert result == [{"id": "c1"}]
        client_cls.assert_called_once_with(timeout=3.0)

    @pytest.mark.asyncio
    async def test_client_over_httpx_not_found(self):
        """End to end: a 404 from the upstream becomes None."""
        calls = []

        def handler(request):
            calls.append(str(request.url))
            return httpx.Response(404)

        client = VideoClient("http://catalog", HttpxTransport(client=mock_client(handler)))

        assert await client.get_playlist("PL404") is None
        assert calls == ["http://catalog/playlists/PL404"]
