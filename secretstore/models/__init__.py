"""
Domain models for the Secret Store.

These are immutable (frozen) dataclasses carrying opaque hex-encoded key material.
"""

from secretstore.models.keys import DocumentKeyPortions, ExternallyEncryptedDocumentKey

__all__ = [
    "DocumentKeyPortions",
    "ExternallyEncryptedDocumentKey",
]
