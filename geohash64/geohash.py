from geohash64 import core
from geohash64.core import Box
from geohash64.neighbors import Direction, neighbors
from geohash64.ranges import error_with_precision


class Geohash:
    """Geohash encoder/decoder fixed to a number of characters.

    Unlike the module-level functions, every hash passed in is checked for
    length and alphabet before it is decoded.
    """

    def __init__(self, precision: int = 5):
        """Initialize Geohash encoder/decoder with given precision."""
        if not 1 <= precision <= core.MAX_CHARS:  # 12 is standard max precision
            raise ValueError("Precision must be between 1 and 12")
        self.precision = precision

    def _check(self, geohash: str) -> None:
        if len(geohash) != self.precision:
            raise ValueError(
                f"Geohash length {len(geohash)} doesn't match precision {self.precision}"
            )
        core.validate(geohash)

    def encode(self, lat: float, lon: float) -> str:
        """Encode a latitude and longitude into a geohash."""
        return core.encode_with_precision(lat, lon, self.precision)

    def decode(self, geohash: str) -> tuple[float, float]:
        """Decode a geohash into a short latitude and longitude inside its cell."""
        self._check(geohash)
        return core.decode(geohash)

    def decode_center(self, geohash: str) -> tuple[float, float]:
        """Decode a geohash into the latitude and longitude of its cell center."""
        self._check(geohash)
        return core.decode_center(geohash)

    def bounding_box(self, geohash: str) -> Box:
        self._check(geohash)
        return core.bounding_box(geohash)

    def get_cell_size(self) -> tuple[float, float]:
        """Calculate the size of a geohash cell at this precision.

        Returns:
            (latitude_error, longitude_error)
        """
        return error_with_precision(5 * self.precision)

    def get_neighbors(self, geohash: str) -> dict[Direction, str]:
        """
        Compute the 8 neighboring geohashes (N, NE, E, SE, S, SW, W, NW).
        """
        self._check(geohash)
        return dict(zip(Direction, neighbors(geohash)))


if __name__ == "__main__":
    geo = Geohash(precision=6)
    encoded = geo.encode(41.878738, -87.6359612)  # Willis Tower
    decoded = geo.decode(encoded)
    box = geo.bounding_box(encoded)
    neighbors_by_direction = geo.get_neighbors(encoded)

    print(f"Encoded: {encoded}")
    print(f"Decoded: {decoded}")
    print(f"Box: {box}")
    for direction, neighbor in neighbors_by_direction.items():
        print(f"{direction.name:>10}: {neighbor}")
