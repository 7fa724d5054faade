"""
Secret Store client facade.

Pairs a session client and an RPC client aimed at the same logical cluster.
"""

from typing import Self

import httpx
import structlog

from secretstore.api.rpc import JsonRpcProvider, SecretStoreRpcApiClient
from secretstore.api.session import SecretStoreSessionClient
from secretstore.config import SecretStoreConfig

logger = structlog.get_logger(__name__)


class SecretStoreClient:
    """
    Async client for a Secret Store cluster.

    Session operations are reached through ``session`` and RPC module
    operations through ``rpc``.

    Example:
        ```python
        async with SecretStoreClient("http://localhost:8090", "http://localhost:8545") as ss:
            signed_id = await ss.rpc.sign_raw_hash(account, password, key_id)
            server_key = await ss.session.generate_server_key(key_id, signed_id, 1)
            document_key = await ss.rpc.generate_document_key(account, password, server_key)
            await ss.session.store_document_key(key_id, signed_id, document_key)
        ```

    Args:
        session_url: Base URL of the node's session endpoint.
        rpc_endpoint: RPC endpoint URL of a trusted node, or a provider.
        config: Request options shared by both clients. Uses defaults if not provided.
        session_transport: Optional httpx transport for the session client.
        rpc_transport: Optional httpx transport for the RPC client.
    """

    def __init__(
        self,
        session_url: str | None,
        rpc_endpoint: str | JsonRpcProvider | None,
        config: SecretStoreConfig | None = None,
        *,
        session_transport: httpx.AsyncBaseTransport | None = None,
        rpc_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or SecretStoreConfig()
        self.session = SecretStoreSessionClient(
            session_url, self._config, transport=session_transport
        )
        if isinstance(rpc_endpoint, JsonRpcProvider):
            self.rpc = SecretStoreRpcApiClient(rpc_endpoint, transport=rpc_transport)
        else:
            self.rpc = SecretStoreRpcApiClient(
                rpc_endpoint, self._config, transport=rpc_transport
            )

    async def __aenter__(self) -> Self:
        """Enter async context."""
        await self.session.__aenter__()
        try:
            await self.rpc.__aenter__()
        except BaseException:
            await self.session.aclose()
            raise
        logger.debug("Client initialized", session_url=self.session.url)
        return self

    async def __aexit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        """Exit async context."""
        await self.close()

    async def close(self) -> None:
        """Close both clients and release resources."""
        try:
            await self.session.aclose()
        finally:
            await self.rpc.aclose()
