"""
Secret Store API client layer.

Provides async clients for the session endpoint and the RPC module.
"""

from secretstore.api.http_client import AsyncHttpClient
from secretstore.api.rpc import JsonRpcProvider, SecretStoreRpcApiClient
from secretstore.api.session import SecretStoreSessionClient

__all__ = [
    "AsyncHttpClient",
    "JsonRpcProvider",
    "SecretStoreRpcApiClient",
    "SecretStoreSessionClient",
]
