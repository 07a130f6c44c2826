class GeohashError(ValueError):
    """Base class for malformed string geohashes."""


class InvalidLengthError(GeohashError):
    """Raised when a geohash carries more than 64 bits of precision."""

    def __init__(self, geohash: str):
        self.geohash = geohash
        self.bits = 5 * len(geohash)
        super().__init__(
            f"Geohash {geohash!r} is too long: {self.bits} bits exceeds 64"
        )


class InvalidCharacterError(GeohashError):
    """Raised when a geohash contains a symbol outside the base32 alphabet."""

    def __init__(self, geohash: str, char: str):
        self.geohash = geohash
        self.char = char
        super().__init__(f"Invalid character {char!r} in geohash {geohash!r}")
