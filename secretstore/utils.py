"""Hex prefix and quoting helpers shared by both clients."""

import re
from collections.abc import Mapping

HEX_PREFIX = "0x"

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "proxy-authorization"})

_ENCLOSING_DQUOTES = re.compile(r'"(.*)"', re.DOTALL)


def remove_0x(value: str | None) -> str:
    """
    Strip the ``0x`` marker from a hex string.

    Args:
        value: Hex string, possibly prefixed. ``None`` is accepted.

    Returns:
        The string without its prefix, or ``""`` for empty input.
    """
    if not value:
        return ""
    return value[len(HEX_PREFIX) :] if value.startswith(HEX_PREFIX) else value


def ensure_0x(value: str | None) -> str:
    """Prefix a hex string with ``0x`` unless it already is. ``None`` becomes ``"0x"``."""
    if not value:
        return HEX_PREFIX
    return value if value.startswith(HEX_PREFIX) else f"{HEX_PREFIX}{value}"


add_0x = ensure_0x


def remove_enclosing_dquotes(value: str) -> str:
    """
    Unwrap a string enclosed in a single pair of double quotes.

    Only a quote anchored at both ends is removed, so ``'"a"b"'`` becomes
    ``'a"b'`` and ``'abc'`` is returned as is.
    """
    match = _ENCLOSING_DQUOTES.fullmatch(value)
    return match.group(1) if match else value


def sanitize_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """
    Copy a header mapping with credential values masked.

    Args:
        headers: Request headers.

    Returns:
        Copy with sensitive values replaced by "***".
    """
    return {
        key: "***" if key.lower() in SENSITIVE_HEADERS else value for key, value in headers.items()
    }
