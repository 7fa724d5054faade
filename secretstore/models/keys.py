"""
Document key domain models.

The cluster and the RPC module exchange these as JSON objects with
snake_case field names; the fields are opaque hex strings.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Self


@dataclass(frozen=True, kw_only=True)
class DocumentKeyPortions:
    """
    Document key split into portions by a shadow retrieval session.

    Attributes:
        decrypted_secret: Decrypted secret point.
        common_point: Common point of the document key.
        decrypt_shadows: Per-node decryption shadows, in the order the
            cluster returned them.
    """

    decrypted_secret: str
    common_point: str
    decrypt_shadows: tuple[str, ...]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            decrypted_secret=data["decrypted_secret"],
            common_point=data["common_point"],
            decrypt_shadows=tuple(data["decrypt_shadows"]),
        )


@dataclass(frozen=True, kw_only=True)
class ExternallyEncryptedDocumentKey:
    """
    Document key generated by a local node and encrypted with a server key.

    Attributes:
        common_point: Common point of the document key.
        encrypted_key: Document key encrypted with the requester's public key.
        encrypted_point: Encrypted point of the document key.
    """

    common_point: str
    encrypted_key: str
    encrypted_point: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            common_point=data["common_point"],
            encrypted_key=data["encrypted_key"],
            encrypted_point=data["encrypted_point"],
        )
