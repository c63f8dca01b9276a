"""Base64URL codec core: alphabet tables, decoders, encoder and identifier helpers."""

from b64url.core.alphabet import ALPHABET, REVERSE_LOOKUP
from b64url.core.codec import (
    BoundaryPolicy,
    InvalidBase64Url,
    decode,
    decode_url_base64,
    decode_url_base64_strict,
    encode_url_base64,
)
from b64url.core.ids import decode_id_from_b64url, encode_id_to_b64url

__all__ = [
    "ALPHABET",
    "REVERSE_LOOKUP",
    "BoundaryPolicy",
    "InvalidBase64Url",
    "decode",
    "decode_url_base64",
    "decode_url_base64_strict",
    "encode_url_base64",
    "decode_id_from_b64url",
    "encode_id_to_b64url",
]
