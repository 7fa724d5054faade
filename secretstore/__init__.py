"""
Secret Store Python Client.

An async Python client for the session API and the secretstore RPC module
of a Secret Store key management cluster.

Example:
    ```python
    from secretstore import SecretStoreRpcApiClient, SecretStoreSessionClient

    async with (
        SecretStoreSessionClient("http://localhost:8090") as session,
        SecretStoreRpcApiClient("http://localhost:8545") as rpc,
    ):
        signed_id = await rpc.sign_raw_hash(account, password, key_id)
        server_key = await session.generate_server_key(key_id, signed_id, 1)
    ```
"""

from secretstore.api.rpc import JsonRpcProvider, SecretStoreRpcApiClient
from secretstore.api.session import SecretStoreSessionClient
from secretstore.client import SecretStoreClient
from secretstore.config import SecretStoreConfig
from secretstore.exceptions import (
    ConfigurationError,
    RpcError,
    SecretStoreError,
    SessionError,
    ValidationError,
)
from secretstore.models.keys import DocumentKeyPortions, ExternallyEncryptedDocumentKey
from secretstore.utils import add_0x, ensure_0x, remove_0x, remove_enclosing_dquotes

__version__ = "0.1.0"

__all__ = [
    # Clients
    "SecretStoreClient",
    "SecretStoreSessionClient",
    "SecretStoreRpcApiClient",
    "JsonRpcProvider",
    "SecretStoreConfig",
    # Models
    "DocumentKeyPortions",
    "ExternallyEncryptedDocumentKey",
    # Exceptions
    "SecretStoreError",
    "ConfigurationError",
    "ValidationError",
    "SessionError",
    "RpcError",
    # Hex helpers
    "remove_0x",
    "ensure_0x",
    "add_0x",
    "remove_enclosing_dquotes",
]
