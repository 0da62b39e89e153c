"""
HTTP transport for the video client.
"""

from typing import Any, Optional, Protocol

import httpx

from video_client.shared.errors import TransportError
from video_client.shared.logging import get_logger


class HttpTransport(Protocol):
    """GET-only transport the client talks through.

    Implementations return the decoded JSON body and raise an error carrying
    a ``status`` (or a ``response`` with one) when the upstream answers with
    a failure status.
    """

    async def get(self, url: str) -> Any:
        ...


class HttpxTransport:
    """Default transport built on ``httpx.AsyncClient``."""

    def __init__(
        self,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
        headers: Optional[dict] = None
    ):
        self.timeout = timeout
        self.headers = headers or {"Accept": "application/json"}
        self.logger = get_logger("video_client.transport")
        self._client = client

    async def get(self, url: str) -> Any:
        """Fetch ``url`` and return its JSON body."""
        try:
            if self._client is not None:
                response = await self._client.get(url, headers=self.headers)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(url, headers=self.headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            log = self.logger.info if status in (404, 410) else self.logger.error
            log("Upstream request failed", url=url, status_code=status)
            raise TransportError(
                f"Unexpected status {status}",
                status=status,
                url=url,
                details={"body": exc.response.text}
            ) from exc
        except httpx.HTTPError as exc:
            self.logger.error("Upstream request error", url=url, error=str(exc))
            raise TransportError(str(exc) or type(exc).__name__, url=url) from exc

        self.logger.debug("Upstream response received", url=url, status_code=response.status_code)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            self.logger.error("Upstream response is not JSON", url=url, error=str(exc))
            raise TransportError(
                "Invalid JSON response",
                url=url,
                details={"body": response.text}
            ) from exc

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
