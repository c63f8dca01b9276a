"""b64url: URL-safe Base64 decoding with a lookup table.

Usage:
    from b64url import decode_url_base64

    decode_url_base64("_-__")  # b"\xff\xef\xff"
"""

from b64url.core import (
    ALPHABET,
    REVERSE_LOOKUP,
    BoundaryPolicy,
    InvalidBase64Url,
    decode,
    decode_id_from_b64url,
    decode_url_base64,
    decode_url_base64_strict,
    encode_id_to_b64url,
    encode_url_base64,
)

__version__ = "0.1.0"

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
