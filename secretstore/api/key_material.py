"""
Normalization of multi-part document key arguments.

Calls that take document key material accept either a structured object
(a model instance or a mapping with the wire field names) or the same values
as discrete positional strings. Both forms resolve to one canonical value
here, so validation happens once and before any request is built.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from secretstore.exceptions import ValidationError
from secretstore.models.keys import DocumentKeyPortions, ExternallyEncryptedDocumentKey

NO_PARAMETERS_MSG = "No document key parameters were given"
NOT_ENOUGH_PORTIONS_MSG = "Not enough document key portions were supplied"

DocumentKeyArg = str | ExternallyEncryptedDocumentKey | Mapping[str, Any]
KeyPortionsArg = str | DocumentKeyPortions | Mapping[str, Any]


def resolve_document_key(
    common_point_or_key: DocumentKeyArg | None,
    encrypted_point: str | None = None,
) -> tuple[str, str]:
    """
    Resolve the arguments of a document key store call.

    Args:
        common_point_or_key: Externally encrypted document key, or its common point.
        encrypted_point: Encrypted point, required when a common point is given.

    Returns:
        ``(common_point, encrypted_point)``, not yet hex-normalized.

    Raises:
        ValidationError: If the key material is missing or incomplete.
    """
    if not common_point_or_key:
        raise ValidationError(NO_PARAMETERS_MSG)

    if isinstance(common_point_or_key, str):
        common_point, point = common_point_or_key, encrypted_point
    elif isinstance(common_point_or_key, ExternallyEncryptedDocumentKey):
        common_point = common_point_or_key.common_point
        point = common_point_or_key.encrypted_point
    else:
        common_point = common_point_or_key.get("common_point")
        point = common_point_or_key.get("encrypted_point")

    if not common_point or not point:
        raise ValidationError(
            NOT_ENOUGH_PORTIONS_MSG, common_point=common_point, encrypted_point=point
        )
    return common_point, point


def resolve_key_portions(
    secret_or_portions: KeyPortionsArg | None,
    common_point: str | None = None,
    decrypt_shadows: Sequence[str] | None = None,
) -> DocumentKeyPortions:
    """
    Resolve the arguments of a shadow decryption call.

    Args:
        secret_or_portions: Document key portions, or the decrypted secret.
        common_point: Common point, required when a decrypted secret is given.
        decrypt_shadows: Decryption shadows, required and non-empty when a
            decrypted secret is given.

    Returns:
        Canonical document key portions.

    Raises:
        ValidationError: If the key material is missing or incomplete.
    """
    if not secret_or_portions:
        raise ValidationError(NO_PARAMETERS_MSG)

    if isinstance(secret_or_portions, DocumentKeyPortions):
        _shadows_tuple(secret_or_portions.decrypt_shadows)
        portions = secret_or_portions
    elif isinstance(secret_or_portions, str):
        portions = DocumentKeyPortions(
            decrypted_secret=secret_or_portions,
            common_point=common_point or "",
            decrypt_shadows=_shadows_tuple(decrypt_shadows),
        )
    else:
        portions = DocumentKeyPortions(
            decrypted_secret=secret_or_portions.get("decrypted_secret") or "",
            common_point=secret_or_portions.get("common_point") or "",
            decrypt_shadows=_shadows_tuple(secret_or_portions.get("decrypt_shadows")),
        )

    if not portions.decrypted_secret or not portions.common_point or not portions.decrypt_shadows:
        raise ValidationError(
            NOT_ENOUGH_PORTIONS_MSG,
            decrypted_secret=portions.decrypted_secret,
            common_point=portions.common_point,
            decrypt_shadows=portions.decrypt_shadows,
        )
    return portions


def _shadows_tuple(decrypt_shadows: Sequence[str] | None) -> tuple[str, ...]:
    # A bare string is a single hex value, not a sequence of shadows.
    if isinstance(decrypt_shadows, str):
        msg = "Decryption shadows must be a sequence of hex strings"
        raise ValidationError(msg, decrypt_shadows=decrypt_shadows)
    return tuple(decrypt_shadows or ())
