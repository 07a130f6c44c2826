"""Adjacent geohash cells.

Neighbors are found by moving the center of a cell one cell width or height
in each compass direction and encoding the result at the same precision.
Nothing wraps at the poles or the antimeridian: a step off the edge of the
map saturates onto the edge cell.
"""

from enum import IntEnum

from geohash64.core import (
    MAX_BITS,
    Box,
    bounding_box,
    bounding_box_int_with_precision,
    encode_int_with_precision,
    encode_with_precision,
)


class Direction(IntEnum):
    """Cardinal and intercardinal directions, in neighbor list order."""

    NORTH = 0
    NORTH_EAST = 1
    EAST = 2
    SOUTH_EAST = 3
    SOUTH = 4
    SOUTH_WEST = 5
    WEST = 6
    NORTH_WEST = 7


# (lat, lng) step per direction, indexed by Direction
_OFFSETS = (
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
)


def _shifted_centers(box: Box) -> list[tuple[float, float]]:
    lat, lng = box.center()
    lat_delta = box.max_lat - box.min_lat
    lng_delta = box.max_lng - box.min_lng
    return [
        (lat + dlat * lat_delta, lng + dlng * lng_delta) for dlat, dlng in _OFFSETS
    ]


def neighbors(hash: str) -> list[str]:
    """
    Compute the 8 neighboring geohashes, ordered N, NE, E, SE, S, SW, W, NW.
    """
    precision = len(hash)
    return [
        encode_with_precision(lat, lng, precision)
        for lat, lng in _shifted_centers(bounding_box(hash))
    ]


def neighbors_int_with_precision(hash: int, bits: int) -> list[int]:
    """Compute the 8 neighbors of an integer geohash with bits of precision."""
    box = bounding_box_int_with_precision(hash, bits)
    return [
        encode_int_with_precision(lat, lng, bits)
        for lat, lng in _shifted_centers(box)
    ]


def neighbors_int(hash: int) -> list[int]:
    """Compute the 8 neighbors of a 64-bit integer geohash."""
    return neighbors_int_with_precision(hash, MAX_BITS)


def neighbor(hash: str, direction: Direction) -> str:
    return neighbors(hash)[direction]


def neighbor_int(hash: int, direction: Direction) -> int:
    return neighbors_int_with_precision(hash, MAX_BITS)[direction]


def neighbor_int_with_precision(hash: int, bits: int, direction: Direction) -> int:
    return neighbors_int_with_precision(hash, bits)[direction]
