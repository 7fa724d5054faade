import pytest

from secretstore.config import SecretStoreConfig
from secretstore.exceptions import ConfigurationError


def test_default_headers_include_user_agent() -> None:
    config = SecretStoreConfig(user_agent="test-agent")

    assert config.default_headers() == {"User-Agent": "test-agent"}


def test_default_headers_merge_extra_headers() -> None:
    config = SecretStoreConfig(headers={"Authorization": "Basic abc"})

    headers = config.default_headers()

    assert headers["Authorization"] == "Basic abc"
    assert "User-Agent" in headers


@pytest.mark.parametrize("timeout", [0, -1.0])
def test_non_positive_timeout_is_rejected(timeout: float) -> None:
    with pytest.raises(ConfigurationError, match="timeout"):
        SecretStoreConfig(timeout=timeout)


def test_config_is_immutable() -> None:
    config = SecretStoreConfig()

    with pytest.raises(AttributeError):
        config.timeout = 5.0  # type: ignore[misc]
