import pytest

from secretstore.api.key_material import resolve_document_key, resolve_key_portions
from secretstore.exceptions import ValidationError
from secretstore.models.keys import DocumentKeyPortions, ExternallyEncryptedDocumentKey
from secretstore.tests.constants import (
    COMMON_POINT,
    DECRYPT_SHADOWS,
    DECRYPTED_SECRET,
    ENCRYPTED_KEY,
    ENCRYPTED_POINT,
)

# Document key store arguments


def test_resolve_document_key_from_positional_points() -> None:
    assert resolve_document_key(COMMON_POINT, ENCRYPTED_POINT) == (COMMON_POINT, ENCRYPTED_POINT)


def test_resolve_document_key_from_model() -> None:
    key = ExternallyEncryptedDocumentKey(
        common_point=COMMON_POINT, encrypted_key=ENCRYPTED_KEY, encrypted_point=ENCRYPTED_POINT
    )

    assert resolve_document_key(key) == (COMMON_POINT, ENCRYPTED_POINT)


def test_resolve_document_key_from_mapping() -> None:
    key = {
        "common_point": COMMON_POINT,
        "encrypted_key": ENCRYPTED_KEY,
        "encrypted_point": ENCRYPTED_POINT,
    }

    assert resolve_document_key(key) == (COMMON_POINT, ENCRYPTED_POINT)


@pytest.mark.parametrize("key", [None, "", {}])
def test_resolve_document_key_without_parameters(key: object) -> None:
    with pytest.raises(ValidationError, match="No document key parameters were given"):
        resolve_document_key(key, ENCRYPTED_POINT)  # type: ignore[arg-type]


@pytest.mark.parametrize("encrypted_point", [None, ""])
def test_resolve_document_key_without_encrypted_point(encrypted_point: str | None) -> None:
    with pytest.raises(ValidationError, match="Not enough document key portions were supplied"):
        resolve_document_key(COMMON_POINT, encrypted_point)


def test_resolve_document_key_from_incomplete_mapping() -> None:
    with pytest.raises(ValidationError, match="Not enough document key portions were supplied"):
        resolve_document_key({"common_point": COMMON_POINT})


# Shadow decryption arguments


def test_resolve_key_portions_from_positional_fields() -> None:
    portions = resolve_key_portions(DECRYPTED_SECRET, COMMON_POINT, list(DECRYPT_SHADOWS))

    assert portions == DocumentKeyPortions(
        decrypted_secret=DECRYPTED_SECRET,
        common_point=COMMON_POINT,
        decrypt_shadows=DECRYPT_SHADOWS,
    )


def test_resolve_key_portions_returns_model_unchanged() -> None:
    portions = DocumentKeyPortions(
        decrypted_secret=DECRYPTED_SECRET,
        common_point=COMMON_POINT,
        decrypt_shadows=DECRYPT_SHADOWS,
    )

    assert resolve_key_portions(portions) is portions


def test_resolve_key_portions_from_mapping() -> None:
    portions = resolve_key_portions(
        {
            "decrypted_secret": DECRYPTED_SECRET,
            "common_point": COMMON_POINT,
            "decrypt_shadows": list(DECRYPT_SHADOWS),
        }
    )

    assert portions.decrypt_shadows == DECRYPT_SHADOWS


@pytest.mark.parametrize("secret", [None, ""])
def test_resolve_key_portions_without_parameters(secret: str | None) -> None:
    with pytest.raises(ValidationError, match="No document key parameters were given"):
        resolve_key_portions(secret, COMMON_POINT, list(DECRYPT_SHADOWS))


@pytest.mark.parametrize(
    ("common_point", "shadows"),
    [
        (None, list(DECRYPT_SHADOWS)),
        (COMMON_POINT, None),
        (COMMON_POINT, []),
    ],
)
def test_resolve_key_portions_with_incomplete_fields(
    common_point: str | None, shadows: list[str] | None
) -> None:
    with pytest.raises(ValidationError, match="Not enough document key portions were supplied"):
        resolve_key_portions(DECRYPTED_SECRET, common_point, shadows)


def test_resolve_key_portions_from_incomplete_mapping() -> None:
    with pytest.raises(ValidationError, match="Not enough document key portions were supplied"):
        resolve_key_portions({"decrypted_secret": DECRYPTED_SECRET, "common_point": COMMON_POINT})


# Structured forms get the same field checks as positional ones


def test_resolve_document_key_from_model_with_empty_common_point() -> None:
    key = ExternallyEncryptedDocumentKey(
        common_point="", encrypted_key=ENCRYPTED_KEY, encrypted_point=ENCRYPTED_POINT
    )

    with pytest.raises(ValidationError, match="Not enough document key portions were supplied"):
        resolve_document_key(key)


def test_resolve_document_key_from_model_with_empty_encrypted_point() -> None:
    key = ExternallyEncryptedDocumentKey(
        common_point=COMMON_POINT, encrypted_key=ENCRYPTED_KEY, encrypted_point=""
    )

    with pytest.raises(ValidationError, match="Not enough document key portions were supplied"):
        resolve_document_key(key)


@pytest.mark.parametrize(
    ("secret", "common_point", "shadows"),
    [
        (DECRYPTED_SECRET, COMMON_POINT, ()),
        (DECRYPTED_SECRET, "", DECRYPT_SHADOWS),
        ("", COMMON_POINT, DECRYPT_SHADOWS),
    ],
)
def test_resolve_key_portions_from_model_with_empty_field(
    secret: str, common_point: str, shadows: tuple[str, ...]
) -> None:
    portions = DocumentKeyPortions(
        decrypted_secret=secret, common_point=common_point, decrypt_shadows=shadows
    )

    with pytest.raises(ValidationError, match="Not enough document key portions were supplied"):
        resolve_key_portions(portions)


def test_resolve_key_portions_rejects_string_shadows() -> None:
    with pytest.raises(ValidationError, match="sequence of hex strings"):
        resolve_key_portions(DECRYPTED_SECRET, COMMON_POINT, "0xab")  # type: ignore[arg-type]


def test_resolve_key_portions_rejects_string_shadows_in_mapping() -> None:
    with pytest.raises(ValidationError, match="sequence of hex strings"):
        resolve_key_portions(
            {
                "decrypted_secret": DECRYPTED_SECRET,
                "common_point": COMMON_POINT,
                "decrypt_shadows": "0xab",
            }
        )
