"""Encoding and decoding of string and integer geohashes.

Integer geohashes are 64-bit words holding the 32-bit latitude and longitude
quantizations interleaved, with longitude in the odd bits so the most
significant bit is the first longitude bit. A hash with fewer bits of
precision keeps only the leading bits, right-justified.

None of the functions here validate their input. Strings with unknown
symbols decode as if the symbol were ``'0'`` and coordinates outside the
valid range saturate. Call ``validate`` first when input is untrusted.
"""

import logging
import math
from dataclasses import dataclass

from geohash64 import base32
from geohash64.bits import deinterleave, interleave
from geohash64.errors import InvalidCharacterError, InvalidLengthError
from geohash64.ranges import decode_range, encode_range, error_with_precision

logger = logging.getLogger(__name__)

MAX_BITS = 64
MAX_CHARS = base32.SYMBOLS
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _check_bits(bits: int) -> None:
    if not 0 <= bits <= MAX_BITS:
        raise ValueError(f"Precision must be between 0 and {MAX_BITS} bits, got {bits}")


def _max_decimal_power(width: float) -> float:
    """Largest power of ten not exceeding width."""
    return 10.0 ** math.floor(math.log10(width))


def _round_axis(lo: float, hi: float) -> float:
    width = hi - lo
    if not width > 0:
        # degenerate axis: the only point in it is the edge
        return lo
    x = _max_decimal_power(width)
    return math.ceil(lo / x) * x


@dataclass(frozen=True)
class Box:
    """A rectangle in latitude/longitude space."""

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    def center(self) -> tuple[float, float]:
        """Return the center of the box as (lat, lng)."""
        return (
            (self.min_lat + self.max_lat) / 2.0,
            (self.min_lng + self.max_lng) / 2.0,
        )

    def contains(self, lat: float, lng: float) -> bool:
        """Check whether (lat, lng) lies in the box, edges and corners included."""
        return (
            self.min_lat <= lat <= self.max_lat
            and self.min_lng <= lng <= self.max_lng
        )

    def round(self) -> tuple[float, float]:
        """Return a point inside the box with as few decimal places as possible.

        Each axis is snapped up from its minimum edge to the nearest multiple
        of the largest power of ten that fits in the box width. An axis of
        zero width yields its edge value.
        """
        return (
            _round_axis(self.min_lat, self.max_lat),
            _round_axis(self.min_lng, self.max_lng),
        )


def encode_int(lat: float, lng: float) -> int:
    """Encode the point (lat, lng) as a 64-bit integer geohash."""
    lat_int = encode_range(lat, 90.0)
    lng_int = encode_range(lng, 180.0)
    return interleave(lat_int, lng_int)


def encode_int_with_precision(lat: float, lng: float, bits: int) -> int:
    """Encode the point (lat, lng) as an integer geohash of the given bits."""
    _check_bits(bits)
    return encode_int(lat, lng) >> (MAX_BITS - bits)


def encode_with_precision(lat: float, lng: float, chars: int = MAX_CHARS) -> str:
    """Encode the point (lat, lng) as a string geohash of chars characters."""
    if not 1 <= chars <= MAX_CHARS:
        raise ValueError(f"Precision must be between 1 and {MAX_CHARS}")
    inthash = encode_int_with_precision(lat, lng, 5 * chars)
    return base32.encode(inthash)[MAX_CHARS - chars :]


def encode(lat: float, lng: float) -> str:
    """Encode the point (lat, lng) with the standard 12 characters."""
    return encode_with_precision(lat, lng, MAX_CHARS)


def bounding_box_int_with_precision(hash: int, bits: int) -> Box:
    """Return the region encoded by an integer geohash with bits of precision."""
    _check_bits(bits)
    full_hash = (hash << (MAX_BITS - bits)) & _MASK64
    lat_int, lng_int = deinterleave(full_hash)
    lat = decode_range(lat_int, 90.0)
    lng = decode_range(lng_int, 180.0)
    lat_err, lng_err = error_with_precision(bits)
    return Box(
        min_lat=lat,
        max_lat=lat + lat_err,
        min_lng=lng,
        max_lng=lng + lng_err,
    )


def bounding_box_int(hash: int) -> Box:
    """Return the region encoded by a 64-bit integer geohash."""
    return bounding_box_int_with_precision(hash, MAX_BITS)


def bounding_box(hash: str) -> Box:
    """Return the region encoded by a string geohash."""
    bits = 5 * len(hash)
    inthash = base32.decode(hash)
    return bounding_box_int_with_precision(inthash, bits)


def validate(hash: str) -> bool:
    """Check that a string geohash fits in 64 bits and uses only base32 symbols.

    Returns True for a well-formed hash, otherwise raises InvalidLengthError
    or InvalidCharacterError.
    """
    if 5 * len(hash) > MAX_BITS:
        logger.debug("Rejected geohash %r: %d characters", hash, len(hash))
        raise InvalidLengthError(hash)

    for c in hash:
        if not base32.valid_byte(c):
            logger.debug("Rejected geohash %r: invalid character %r", hash, c)
            raise InvalidCharacterError(hash, c)
    return True


def decode(hash: str) -> tuple[float, float]:
    """Decode a string geohash to a rounded (lat, lng) point inside its box."""
    return bounding_box(hash).round()


def decode_center(hash: str) -> tuple[float, float]:
    """Decode a string geohash to the center (lat, lng) of its box."""
    return bounding_box(hash).center()


def decode_int_with_precision(hash: int, bits: int) -> tuple[float, float]:
    """Decode an integer geohash with bits of precision to a (lat, lng) point."""
    return bounding_box_int_with_precision(hash, bits).round()


def decode_int(hash: int) -> tuple[float, float]:
    return decode_int_with_precision(hash, MAX_BITS)
