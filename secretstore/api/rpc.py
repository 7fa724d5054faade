"""
Secretstore RPC module client.

Talks JSON-RPC to a single node that the caller trusts with an account
password. Hex parameters are sent with their ``0x`` prefix.
"""

import itertools
from collections.abc import Sequence
from typing import Any

import httpx
import structlog

from secretstore.api.http_client import AsyncHttpClient
from secretstore.api.key_material import KeyPortionsArg, resolve_key_portions
from secretstore.config import SecretStoreConfig
from secretstore.exceptions import ConfigurationError, RpcError
from secretstore.models.keys import ExternallyEncryptedDocumentKey
from secretstore.utils import ensure_0x

logger = structlog.get_logger(__name__)

JSONRPC_VERSION = "2.0"


class JsonRpcProvider:
    """JSON-RPC 2.0 transport over HTTP."""

    def __init__(
        self,
        url: str,
        config: SecretStoreConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            url: RPC endpoint of the node.
            config: Default request options. Uses defaults if not provided.
            transport: Optional transport for testing (mock transport).
        """
        if not url:
            msg = "Secret Store RPC module endpoint URL was not given"
            raise ConfigurationError(msg)
        self.url = url
        self._http = AsyncHttpClient(config or SecretStoreConfig(), transport=transport)
        self._ids = itertools.count(1)

    async def __aenter__(self) -> "JsonRpcProvider":
        await self._http.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()

    async def send(self, method: str, params: Sequence[Any]) -> dict[str, Any]:
        """
        Send a JSON-RPC request.

        Args:
            method: RPC method name.
            params: Positional parameters.

        Returns:
            The decoded response envelope, which carries either
            ``result`` or ``error``.

        Raises:
            RpcError: If the endpoint answers with a non-success status or
                with something that is not a JSON-RPC envelope.
            httpx.TransportError: If the request could not be delivered.
        """
        payload = {
            "jsonrpc": JSONRPC_VERSION,
            "id": next(self._ids),
            "method": method,
            "params": list(params),
        }
        response = await self._http.send("POST", self.url, json=payload)

        if not response.is_success:
            msg = f"{response.reason_phrase} ({response.status_code}): {response.text}"
            raise RpcError(msg, code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            msg = "Invalid JSON response from RPC endpoint"
            raise RpcError(msg, code=response.status_code, data=response.text) from e
        if not isinstance(data, dict):
            msg = "RPC response is not a JSON-RPC envelope"
            raise RpcError(msg, data=data)
        return data


class SecretStoreRpcApiClient:
    """
    Client for the secretstore RPC module of a node.

    The node should be a local one, since account passwords are sent to it.

    Example:
        ```python
        async with SecretStoreRpcApiClient("http://localhost:8545") as rpc:
            signature = await rpc.sign_raw_hash(account, password, key_id)
        ```
    """

    def __init__(
        self,
        endpoint: str | JsonRpcProvider | None,
        config: SecretStoreConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            endpoint: RPC endpoint URL, or an already constructed provider.
            config: Request options used when a provider is built from a URL.
            transport: Optional httpx transport for testing.

        Raises:
            ConfigurationError: If no endpoint is given, or if a provider is
                given together with a config or transport it would ignore.
        """
        if not endpoint:
            msg = "Secret Store RPC module endpoint URL was not given"
            raise ConfigurationError(msg)
        if isinstance(endpoint, JsonRpcProvider):
            if config is not None or transport is not None:
                msg = "config and transport apply only when the endpoint is a URL"
                raise ConfigurationError(msg)
            self.provider = endpoint
        else:
            self.provider = JsonRpcProvider(endpoint, config, transport=transport)

    async def __aenter__(self) -> "SecretStoreRpcApiClient":
        await self.provider.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the provider's HTTP connections."""
        await self.provider.aclose()

    async def _send(self, method: str, *params: Any) -> Any:
        logger.debug("RPC call", method=method)
        response = await self.provider.send(method, params)

        if error := response.get("error"):
            logger.debug("RPC error", method=method, error=error)
            if isinstance(error, dict):
                raise RpcError(
                    error.get("message", "Unknown error"),
                    code=error.get("code"),
                    data=error.get("data"),
                )
            raise RpcError(str(error))

        return response.get("result")

    async def sign_raw_hash(self, account: str, pwd: str, raw_hash: str) -> str:
        """
        Compute a recoverable ECDSA signature of a hash.

        Typically used to sign server key IDs and node set hashes.

        Args:
            account: Address of the signing account.
            pwd: Password of the account.
            raw_hash: 256-bit hash to sign.

        Returns:
            Hex-encoded signature.
        """
        return await self._send("secretstore_signRawHash", account, pwd, ensure_0x(raw_hash))

    async def generate_document_key(
        self, account: str, pwd: str, server_key: str
    ) -> ExternallyEncryptedDocumentKey:
        """
        Securely generate a document key, encrypted with a server key.

        Args:
            account: Address of the requesting account.
            pwd: Password of the account.
            server_key: Public portion of the server key.
        """
        result = await self._send(
            "secretstore_generateDocumentKey", account, pwd, ensure_0x(server_key)
        )
        try:
            return ExternallyEncryptedDocumentKey.from_dict(result)
        except (KeyError, TypeError) as e:
            msg = "Malformed document key in RPC response"
            raise RpcError(msg, data=result) from e

    async def encrypt(
        self, account: str, pwd: str, hex_document: str, encrypted_document_key: str
    ) -> str:
        """Encrypt a hex-encoded document with an encrypted document key."""
        return await self._send(
            "secretstore_encrypt",
            account,
            pwd,
            ensure_0x(encrypted_document_key),
            ensure_0x(hex_document),
        )

    async def decrypt(
        self, account: str, pwd: str, encrypted_document: str, encrypted_document_key: str
    ) -> str:
        """Decrypt a document with an encrypted document key."""
        return await self._send(
            "secretstore_decrypt",
            account,
            pwd,
            ensure_0x(encrypted_document_key),
            ensure_0x(encrypted_document),
        )

    async def shadow_decrypt(
        self,
        account: str,
        pwd: str,
        encrypted_document: str,
        secret_or_portions: KeyPortionsArg | None,
        common_point: str | None = None,
        decrypt_shadows: Sequence[str] | None = None,
    ) -> str:
        """
        Decrypt a document with document key portions from a shadow retrieval.

        The key material is either DocumentKeyPortions (or a mapping with the
        same fields), or the decrypted secret, common point and decryption
        shadows given separately.

        Raises:
            ValidationError: If the key material is missing or incomplete.
                Nothing is sent in that case.
        """
        portions = resolve_key_portions(secret_or_portions, common_point, decrypt_shadows)
        return await self._send(
            "secretstore_shadowDecrypt",
            account,
            pwd,
            ensure_0x(portions.decrypted_secret),
            ensure_0x(portions.common_point),
            list(portions.decrypt_shadows),
            ensure_0x(encrypted_document),
        )

    async def servers_set_hash(self, node_ids: Sequence[str]) -> str:
        """Compute the hash of a node set, to be signed for a nodes set change."""
        return await self._send("secretstore_serversSetHash", list(node_ids))
