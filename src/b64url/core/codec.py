"""URL-safe Base64 (no padding) decoding and encoding.

The permissive decoder mirrors the classic lookup-table routine: every
character is mapped through the 256-entry reverse table without validation,
so symbols outside the alphabet decode as ``A`` (index 0). Inputs whose
length is not a multiple of 4 are handled according to a BoundaryPolicy.

The strict decoder is an opt-in wrapper that validates before delegating to
the permissive routine.
"""

from __future__ import annotations

import base64
import logging
from enum import Enum

from b64url.core.alphabet import ALPHABET_SET, symbol_index

logger = logging.getLogger(__name__)


class InvalidBase64Url(ValueError):
    pass


class BoundaryPolicy(str, Enum):
    """Treatment of a final chunk with fewer than four symbols."""

    # Missing symbols read as index 0, output cut to floor(len * 0.75).
    ZERO_FILL = "zero-fill"
    REJECT = "reject"
    # Incomplete trailing chunk produces no output at all.
    TRUNCATE = "truncate"


def _index_at(value: str, position: int, length: int) -> int:
    if position >= length:
        return 0
    return symbol_index(value[position])


def decode_url_base64(
    value: str,
    policy: BoundaryPolicy | str = BoundaryPolicy.ZERO_FILL,
) -> bytes:
    """Decode unpadded URL-safe Base64 text into bytes.

    Characters are not validated. Under the default zero-fill policy the
    result has exactly ``len(value) * 3 // 4`` bytes, which also makes a
    lone trailing symbol (length % 4 == 1) contribute nothing.

    Args:
        value: Base64URL text without '=' padding
        policy: How to handle a final chunk shorter than four symbols

    Returns:
        Decoded bytes

    Raises:
        InvalidBase64Url: Only with BoundaryPolicy.REJECT on a misaligned length
    """
    policy = BoundaryPolicy(policy)
    length = len(value)

    if length % 4:
        if policy is BoundaryPolicy.REJECT:
            raise InvalidBase64Url(f"length {length} is not a multiple of 4")
        logger.debug(
            "Decoding input with incomplete final chunk",
            extra={"input_length": length, "boundary_policy": policy.value},
        )

    if policy is BoundaryPolicy.TRUNCATE:
        output_length = length // 4 * 3
    else:
        output_length = length * 3 // 4

    buffer = bytearray((length + 3) // 4 * 3)
    p = 0
    for i in range(0, length, 4):
        encoded1 = _index_at(value, i, length)
        encoded2 = _index_at(value, i + 1, length)
        encoded3 = _index_at(value, i + 2, length)
        encoded4 = _index_at(value, i + 3, length)

        buffer[p] = (encoded1 << 2) | (encoded2 >> 4)
        buffer[p + 1] = ((encoded2 & 0x0F) << 4) | (encoded3 >> 2)
        buffer[p + 2] = ((encoded3 & 0x03) << 6) | (encoded4 & 0x3F)
        p += 3

    del buffer[output_length:]
    return bytes(buffer)


def decode_url_base64_strict(value: str) -> bytes:
    """Decode Base64URL text, rejecting anything that is not a canonical encoding.

    Raises InvalidBase64Url for characters outside the alphabet, for a
    length that no byte string encodes to (length % 4 == 1), and for a
    final symbol carrying non-zero unused bits.
    """
    for position, char in enumerate(value):
        if char not in ALPHABET_SET:
            raise InvalidBase64Url(
                f"invalid base64url alphabet: {char!r} at position {position}"
            )

    remainder = len(value) % 4
    if remainder == 1:
        raise InvalidBase64Url(f"invalid base64url length {len(value)}")
    if remainder == 2 and symbol_index(value[-1]) & 0x0F:
        raise InvalidBase64Url("invalid base64url value: non-zero trailing bits")
    if remainder == 3 and symbol_index(value[-1]) & 0x03:
        raise InvalidBase64Url("invalid base64url value: non-zero trailing bits")

    return decode_url_base64(value, BoundaryPolicy.ZERO_FILL)


def encode_url_base64(data: bytes | bytearray | memoryview) -> str:
    """Encode bytes to Base64URL without padding."""
    encoded = base64.urlsafe_b64encode(bytes(data)).decode("ascii")
    return encoded.rstrip("=")


def decode(
    value: str,
    *,
    strict: bool | None = None,
    policy: BoundaryPolicy | str | None = None,
) -> bytes:
    """Decode using explicit options, falling back to configured defaults.

    ``strict`` wins over ``policy``: the strict decoder has a fixed
    boundary behaviour.
    """
    from b64url.config import settings

    if strict is None:
        strict = settings.strict
    if strict:
        return decode_url_base64_strict(value)

    if policy is None:
        policy = settings.boundary_policy
    return decode_url_base64(value, policy)
