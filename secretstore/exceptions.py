"""
Secret Store client exception hierarchy.

All exceptions inherit from SecretStoreError for easy catching.
"""

from typing import Any


class SecretStoreError(Exception):
    """Base exception for all secretstore errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class ConfigurationError(SecretStoreError):
    """Client was constructed without a usable endpoint or with invalid settings."""


class ValidationError(SecretStoreError):
    """Arguments were rejected before any request was sent."""


class SessionError(SecretStoreError):
    """A Secret Store session request failed."""

    def __init__(
        self, message: str, *, meta: dict[str, Any] | None = None, status_code: int | None = None
    ) -> None:
        super().__init__(message)
        self.meta = meta or {}
        self.status_code = status_code


class RpcError(SecretStoreError):
    """The secretstore RPC module returned an error or could not be reached."""

    def __init__(self, message: str, *, code: int | None = None, data: Any = None) -> None:
        super().__init__(message, code=code)
        self.code = code
        self.data = data
