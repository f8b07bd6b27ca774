"""HTTP client for the remote-control server.

Wraps an ``httpx.AsyncClient`` bound to the server's base URL. Telemetry
is read with GET and commands are sent with POST; every failure is raised
as ``RemoteClientError`` so callers decide what to do with it.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

NO_CACHE_HEADERS = {
    "Content-Type": "application/json",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
    "Expires": "0",
}
JSON_HEADERS = {"Content-Type": "application/json"}


class RemoteClientError(Exception):
    """Raised when a request to the remote-control server fails."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class RemoteClient:
    """Async HTTP client for the remote-control server.

    Example usage::

        async with RemoteClient("http://192.168.1.10:3000") as client:
            info = await client.get("/system-info")
            await client.post("/", {"command": "click_mouse"})

    Args:
        base_url: Server address, e.g. ``http://host:3000``.
        timeout: Seconds before a request is abandoned. ``None`` waits
            indefinitely.
        transport: Optional httpx transport, used to stub the server.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> None:
        """Create the underlying HTTP client."""
        if self._client is not None:
            return
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
        )
        logger.info("Client ready for %s", self._base_url)

    async def disconnect(self) -> None:
        """Close the HTTP client. Safe to call more than once."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("Client for %s closed", self._base_url)

    async def get(self, path: str) -> Any:
        """GET ``path`` bypassing intermediary caches and decode the JSON body."""
        client = self._require_client(path)
        try:
            resp = await client.get(path, headers=NO_CACHE_HEADERS)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPError as e:
            raise RemoteClientError(f"GET {path} failed: {e}", path=path) from e
        except ValueError as e:
            raise RemoteClientError(f"GET {path} returned invalid JSON: {e}", path=path) from e

    async def post(self, path: str, body: dict | None = None) -> None:
        """POST ``body`` as JSON to ``path``; an empty body when ``None``.

        The response body is not read.
        """
        client = self._require_client(path)
        try:
            if body is None:
                resp = await client.post(path, headers=JSON_HEADERS)
            else:
                resp = await client.post(path, json=body, headers=JSON_HEADERS)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            raise RemoteClientError(f"POST {path} failed: {e}", path=path) from e

    def _require_client(self, path: str) -> httpx.AsyncClient:
        if self._client is None:
            raise RemoteClientError("Client is not connected", path=path)
        return self._client

    async def __aenter__(self) -> RemoteClient:
        await self.connect()
        return self

    async def __aexit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        await self.disconnect()
