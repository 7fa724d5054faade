"""
Async HTTP client shared by the session and RPC clients.

Sends one request per call. Session requests map a failed response to a
SessionError. No retries are performed and timeouts come from the client
configuration.
"""

import asyncio
import json
from typing import Any

import httpx
import structlog

from secretstore.config import SecretStoreConfig
from secretstore.exceptions import SessionError
from secretstore.utils import remove_enclosing_dquotes, sanitize_headers

logger = structlog.get_logger(__name__)


def decode_body(text: str) -> Any:
    """
    Decode a session response body.

    Nodes answer with JSON-encoded strings, objects or arrays. Anything that
    does not decode to one of those is returned as the raw text.
    """
    try:
        data = json.loads(text)
    except ValueError:
        return text
    if isinstance(data, str | dict | list):
        return data
    return text


class AsyncHttpClient:
    """Async HTTP client for Secret Store session requests."""

    def __init__(
        self,
        config: SecretStoreConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            config: Default request options.
            transport: Optional transport for testing (mock transport).
        """
        self._config = config
        self._transport = transport

        self._client: httpx.AsyncClient | None = None
        self._client_lock = asyncio.Lock()

    async def __aenter__(self) -> "AsyncHttpClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._client_lock:
            if self._client is None:
                self._client = httpx.AsyncClient(
                    timeout=self._config.timeout,
                    transport=self._transport,
                    headers=self._config.default_headers(),
                    verify=self._config.verify,
                    follow_redirects=self._config.follow_redirects,
                )
        return self._client

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        async with self._client_lock:
            if self._client is None:
                logger.debug("Client not open.")
                return
            await self._client.aclose()
            self._client = None

    async def send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """
        Send a request and return the raw response, whatever its status.

        Args:
            method: HTTP method.
            url: Absolute URL.
            **kwargs: Forwarded to ``httpx.AsyncClient.request`` (content, json).

        Raises:
            httpx.TransportError: If the request could not be delivered.
        """
        client = await self._ensure_client()
        return await client.request(method, url, **kwargs)

    async def request(self, method: str, url: str, *, content: str | None = None) -> Any:
        """
        Make a session request.

        Args:
            method: HTTP method (GET or POST).
            url: Absolute session URL.
            content: Optional request body.

        Returns:
            Decoded response body.

        Raises:
            SessionError: If the node answers with a non-success status.
            httpx.TransportError: If the request could not be delivered.
        """
        logger.debug("Session request", method=method, url=url)
        response = await self.send(method, url, content=content)

        if not response.is_success:
            self._raise_session_error(response, content)

        return decode_body(response.text)

    def _raise_session_error(self, response: httpx.Response, content: str | None) -> None:
        request = response.request
        meta = {
            "method": request.method,
            "url": str(request.url),
            "headers": sanitize_headers(request.headers),
            "content": content,
            "timeout": self._config.timeout,
        }
        body = decode_body(response.text)
        detail = remove_enclosing_dquotes(body) if isinstance(body, str) else json.dumps(body)
        msg = f"{response.reason_phrase} ({response.status_code}): {detail}"
        logger.debug("Session request failed", status=response.status_code, url=meta["url"])
        raise SessionError(msg, meta=meta, status_code=response.status_code)
