"""Text identifiers carried as unpadded Base64URL.

Identifiers are UTF-8 encoded before encoding, and decoding is always
strict: an identifier that does not round-trip is an error, never a
best-effort guess.
"""

from __future__ import annotations

from b64url.core.codec import (
    InvalidBase64Url,
    decode_url_base64_strict,
    encode_url_base64,
)


def encode_id_to_b64url(value: str) -> str:
    """Encode identifier to Base64URL without padding."""
    return encode_url_base64(value.encode("utf-8"))


def decode_id_from_b64url(value: str) -> str:
    """Decode Base64URL identifier without padding."""
    if not value:
        raise InvalidBase64Url("empty value")
    decoded = decode_url_base64_strict(value)
    try:
        return decoded.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidBase64Url("invalid base64url value: not UTF-8 text") from exc
