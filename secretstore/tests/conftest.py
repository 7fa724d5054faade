from collections.abc import AsyncIterator

import pytest
import pytest_asyncio

from secretstore.api.rpc import SecretStoreRpcApiClient
from secretstore.api.session import SecretStoreSessionClient
from secretstore.tests.constants import RPC_URL, SESSION_URL
from secretstore.tests.utils.mock_transport import MockTransport


@pytest.fixture
def mock_transport() -> MockTransport:
    return MockTransport()


@pytest_asyncio.fixture
async def session_client(mock_transport: MockTransport) -> AsyncIterator[SecretStoreSessionClient]:
    async with SecretStoreSessionClient(SESSION_URL, transport=mock_transport) as client:
        yield client


@pytest_asyncio.fixture
async def rpc_client(mock_transport: MockTransport) -> AsyncIterator[SecretStoreRpcApiClient]:
    async with SecretStoreRpcApiClient(RPC_URL, transport=mock_transport) as client:
        yield client
