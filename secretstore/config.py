"""
Secret Store client configuration.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from secretstore.exceptions import ConfigurationError


@dataclass(frozen=True, kw_only=True)
class SecretStoreConfig:
    """
    Default request options shared by every call of a client.

    The request URL, method and body are always chosen per call and never
    come from here.

    Attributes:
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.
        headers: Extra headers sent with every request.
        verify: Whether TLS certificates are verified.
        follow_redirects: Whether HTTP redirects are followed.
    """

    timeout: float = 30.0
    user_agent: str = "SecretStore-Python/0.1"
    headers: Mapping[str, str] = field(default_factory=dict)
    verify: bool = True
    follow_redirects: bool = False

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ConfigurationError(msg)

    def default_headers(self) -> dict[str, str]:
        """Headers to install on a new transport client."""
        return {"User-Agent": self.user_agent, **self.headers}
