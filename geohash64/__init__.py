"""Encoding and decoding of string and 64-bit integer geohashes."""

import logging

from geohash64.core import (
    MAX_BITS,
    MAX_CHARS,
    Box,
    bounding_box,
    bounding_box_int,
    bounding_box_int_with_precision,
    decode,
    decode_center,
    decode_int,
    decode_int_with_precision,
    encode,
    encode_int,
    encode_int_with_precision,
    encode_with_precision,
    validate,
)
from geohash64.errors import GeohashError, InvalidCharacterError, InvalidLengthError
from geohash64.geohash import Geohash
from geohash64.neighbors import (
    Direction,
    neighbor,
    neighbor_int,
    neighbor_int_with_precision,
    neighbors,
    neighbors_int,
    neighbors_int_with_precision,
)
from geohash64.ranges import error_with_precision

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "MAX_BITS",
    "MAX_CHARS",
    "Box",
    "Direction",
    "Geohash",
    "GeohashError",
    "InvalidCharacterError",
    "InvalidLengthError",
    "bounding_box",
    "bounding_box_int",
    "bounding_box_int_with_precision",
    "decode",
    "decode_center",
    "decode_int",
    "decode_int_with_precision",
    "encode",
    "encode_int",
    "encode_int_with_precision",
    "encode_with_precision",
    "error_with_precision",
    "neighbor",
    "neighbor_int",
    "neighbor_int_with_precision",
    "neighbors",
    "neighbors_int",
    "neighbors_int_with_precision",
    "validate",
]
