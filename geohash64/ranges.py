import math

EXP_232 = 4294967296.0  # 2**32
MAX_U32 = 0xFFFFFFFF


def encode_range(x: float, r: float) -> int:
    """Map x in [-r, r] onto a 32-bit unsigned integer.

    Values outside the range saturate at 0 and 2**32 - 1.
    """
    scaled = ((x + r) / (2.0 * r)) * EXP_232
    if math.isnan(scaled) or scaled <= 0:
        return 0
    if scaled >= EXP_232:
        return MAX_U32
    return int(scaled)


def decode_range(x: int, r: float) -> float:
    """Map a 32-bit integer back to the lower edge of its bucket in [-r, r]."""
    return 2.0 * r * (x / EXP_232) - r


def error_with_precision(bits: int) -> tuple[float, float]:
    """Calculate the size of a geohash cell for an integer precision.

    Longitude takes the extra bit when bits is odd.

    Args:
        bits (int): number of interleaved bits in use

    Returns:
        (latitude_error, longitude_error)
    """
    lat_bits = bits // 2
    lng_bits = bits - lat_bits

    lat_err = math.ldexp(180.0, -lat_bits)
    lng_err = math.ldexp(360.0, -lng_bits)

    return lat_err, lng_err
