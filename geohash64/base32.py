"""Geohash base32 codec.

Symbols map to 5-bit values using the geohash alphabet, which drops the
letters a, i, l and o. Decoding is lenient: anything outside the alphabet
contributes a zero value. Use ``valid_byte`` (or ``core.validate``) to reject
such input up front.
"""

from __future__ import annotations

from types import MappingProxyType

ENCODING = "0123456789bcdefghjkmnpqrstuvwxyz"  # Standard Base32 characters
DECODING = MappingProxyType({c: i for i, c in enumerate(ENCODING)})

SYMBOLS = 12
_MASK64 = 0xFFFFFFFFFFFFFFFF


def encode(x: int) -> str:
    """Encode the low 60 bits of x as 12 symbols, most significant first."""
    symbols = []
    for _ in range(SYMBOLS):
        symbols.append(ENCODING[x & 0x1F])
        x >>= 5
    return "".join(reversed(symbols))


def decode(symbols: str | bytes) -> int:
    """Accumulate symbols into a 64-bit integer, 5 bits per symbol."""
    if isinstance(symbols, (bytes, bytearray)):
        symbols = symbols.decode("latin-1")

    x = 0
    for c in symbols:
        x = ((x << 5) | DECODING.get(c, 0)) & _MASK64
    return x


def valid_byte(c: str | int) -> bool:
    """Report whether c (a character or a byte value) is a base32 symbol."""
    if isinstance(c, int):
        c = chr(c)
    return c in DECODING
