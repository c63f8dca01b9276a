"""URL-safe Base64 alphabet and its reverse lookup table.

Both tables are built once at import and never mutated, so they can be
shared freely between threads.
"""

from __future__ import annotations

from typing import Final

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"


def _build_reverse_lookup(alphabet: str) -> bytes:
    table = bytearray(256)
    for index, symbol in enumerate(alphabet):
        table[ord(symbol)] = index
    return bytes(table)


# Codes outside the alphabet stay 0, the same value as "A".
REVERSE_LOOKUP: Final[bytes] = _build_reverse_lookup(ALPHABET)

ALPHABET_SET: Final[frozenset[str]] = frozenset(ALPHABET)


def symbol_index(char: str) -> int:
    """Return the 6-bit index for a character, 0 for anything unknown."""
    code = ord(char)
    if code > 0xFF:
        return 0
    return REVERSE_LOOKUP[code]
