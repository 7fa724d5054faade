"""
Secret Store session API client.

Each operation is addressed entirely by the identifiers embedded in its URL,
so calls on one client may run concurrently.
"""

import json
from collections.abc import Sequence
from typing import Any

import httpx
import structlog

from secretstore.api.http_client import AsyncHttpClient
from secretstore.api.key_material import DocumentKeyArg, resolve_document_key
from secretstore.config import SecretStoreConfig
from secretstore.exceptions import ConfigurationError, SessionError
from secretstore.models.keys import DocumentKeyPortions
from secretstore.utils import remove_0x, remove_enclosing_dquotes

logger = structlog.get_logger(__name__)


class SecretStoreSessionClient:
    """
    Client for the HTTP session endpoint of a Secret Store node.

    Hex identifiers are embedded in the URL path without their ``0x`` prefix.

    Example:
        ```python
        async with SecretStoreSessionClient("http://localhost:8090") as session:
            public = await session.generate_server_key(key_id, signed_key_id, 1)
        ```
    """

    def __init__(
        self,
        url: str | None,
        config: SecretStoreConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            url: Base URL of the node's session endpoint.
            config: Default request options. Uses defaults if not provided.
            transport: Optional httpx transport for testing.

        Raises:
            ConfigurationError: If no URL is given.
        """
        if not url:
            msg = "Secret Store endpoint URL was not given"
            raise ConfigurationError(msg)
        self.url = url.removesuffix("/")
        self.config = config or SecretStoreConfig()
        self._http = AsyncHttpClient(self.config, transport=transport)

    async def __aenter__(self) -> "SecretStoreSessionClient":
        await self._http.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the underlying HTTP connections."""
        await self._http.aclose()

    def _session_url(self, *segments: object) -> str:
        return "/".join([self.url, *(str(s) for s in segments)])

    async def _send_unquoted(self, method: str, url: str, body: str | None = None) -> str:
        data = await self._http.request(method, url, content=body)
        return remove_enclosing_dquotes(data) if isinstance(data, str) else json.dumps(data)

    async def generate_server_key(
        self, server_key_id: str, signed_server_key_id: str, threshold: int
    ) -> str:
        """
        Run a server key generation session.

        Args:
            server_key_id: Caller-chosen ID of the key to generate.
            signed_server_key_id: The key ID signed by the requester.
            threshold: Number of nodes needed to use the key, minus one.

        Returns:
            Hex-encoded public portion of the generated server key.
        """
        url = self._session_url(
            "shadow", remove_0x(server_key_id), remove_0x(signed_server_key_id), threshold
        )
        return await self._send_unquoted("POST", url)

    async def retrieve_server_key_public(
        self, server_key_id: str, signed_server_key_id: str
    ) -> str:
        """Retrieve the public portion of a previously generated server key."""
        url = self._session_url(
            "server", remove_0x(server_key_id), remove_0x(signed_server_key_id)
        )
        return await self._send_unquoted("GET", url)

    async def store_document_key(
        self,
        server_key_id: str,
        signed_server_key_id: str,
        common_point_or_key: DocumentKeyArg | None,
        encrypted_point: str | None = None,
    ) -> Any:
        """
        Bind an externally generated document key to an existing server key.

        The key material is either an ExternallyEncryptedDocumentKey (or a
        mapping with the same fields), or its common point followed by its
        encrypted point.

        Returns:
            The node's response body, not unquoted.

        Raises:
            ValidationError: If the key material is missing or incomplete.
                Nothing is sent in that case.
        """
        common_point, point = resolve_document_key(common_point_or_key, encrypted_point)
        url = self._session_url(
            "shadow",
            remove_0x(server_key_id),
            remove_0x(signed_server_key_id),
            remove_0x(common_point),
            remove_0x(point),
        )
        return await self._http.request("POST", url)

    async def generate_server_and_document_key(
        self, server_key_id: str, signed_server_key_id: str, threshold: int
    ) -> str:
        """
        Generate a server key and a document key bound to it in one session.

        Returns:
            Document key encrypted with the requester's public key.
        """
        url = self._session_url(remove_0x(server_key_id), remove_0x(signed_server_key_id), threshold)
        return await self._send_unquoted("POST", url)

    async def shadow_retrieve_document_key(
        self, server_key_id: str, signed_server_key_id: str
    ) -> DocumentKeyPortions:
        """
        Retrieve a document key in portions, to be combined by the requester.

        Raises:
            SessionError: If the node fails or answers with something other
                than a document key portions object.
        """
        url = self._session_url(
            "shadow", remove_0x(server_key_id), remove_0x(signed_server_key_id)
        )
        data = await self._http.request("GET", url)
        try:
            return DocumentKeyPortions.from_dict(data)
        except (KeyError, TypeError) as e:
            msg = "Malformed document key portions in session response"
            raise SessionError(msg, meta={"method": "GET", "url": url}) from e

    async def retrieve_document_key(self, server_key_id: str, signed_server_key_id: str) -> str:
        """Retrieve a document key encrypted with the requester's public key."""
        url = self._session_url(remove_0x(server_key_id), remove_0x(signed_server_key_id))
        return await self._send_unquoted("GET", url)

    async def sign_schnorr(
        self, server_key_id: str, signed_server_key_id: str, message_hash: str
    ) -> str:
        """
        Sign a message hash with a server key using the Schnorr scheme.

        The message hash is placed in the URL exactly as given.

        Returns:
            Signature encrypted with the requester's public key.
        """
        url = self._session_url(
            "schnorr", remove_0x(server_key_id), remove_0x(signed_server_key_id), message_hash
        )
        return await self._send_unquoted("GET", url)

    async def sign_ecdsa(
        self, server_key_id: str, signed_server_key_id: str, message_hash: str
    ) -> str:
        """
        Sign a message hash with a server key using ECDSA.

        The message hash is placed in the URL exactly as given.

        Returns:
            Signature encrypted with the requester's public key.
        """
        url = self._session_url(
            "ecdsa", remove_0x(server_key_id), remove_0x(signed_server_key_id), message_hash
        )
        return await self._send_unquoted("GET", url)

    async def nodes_set_change(
        self,
        node_ids_new_set: Sequence[str],
        signature_old_set: str,
        signature_new_set: str,
    ) -> str:
        """
        Ask the cluster to migrate to a new set of nodes.

        Args:
            node_ids_new_set: Node IDs of the new set.
            signature_old_set: Hash of the current node set, signed by the administrator.
            signature_new_set: Hash of the new node set, signed by the administrator.
        """
        url = self._session_url(
            "admin",
            "servers_set_change",
            remove_0x(signature_old_set),
            remove_0x(signature_new_set),
        )
        body = json.dumps(list(node_ids_new_set), separators=(",", ":"))
        logger.debug("Requesting nodes set change", nodes=len(node_ids_new_set))
        return await self._send_unquoted("POST", url, body)
