"""Morton-order bit interleaving of two 32-bit words into one 64-bit word."""


def spread(x: int) -> int:
    """Spread the 32 bits of x out so they occupy the even bit positions."""
    x &= 0xFFFFFFFF
    x = (x | (x << 16)) & 0x0000FFFF0000FFFF
    x = (x | (x << 8)) & 0x00FF00FF00FF00FF
    x = (x | (x << 4)) & 0x0F0F0F0F0F0F0F0F
    x = (x | (x << 2)) & 0x3333333333333333
    x = (x | (x << 1)) & 0x5555555555555555
    return x


def interleave(x: int, y: int) -> int:
    """Interleave x and y: x takes the even bits, y the odd bits."""
    return spread(x) | (spread(y) << 1)


def squash(x: int) -> int:
    """Collect the even bits of x into a 32-bit word. Odd bits are ignored."""
    x &= 0x5555555555555555
    x = (x | (x >> 1)) & 0x3333333333333333
    x = (x | (x >> 2)) & 0x0F0F0F0F0F0F0F0F
    x = (x | (x >> 4)) & 0x00FF00FF00FF00FF
    x = (x | (x >> 8)) & 0x0000FFFF0000FFFF
    x = (x | (x >> 16)) & 0x00000000FFFFFFFF
    return x


def deinterleave(x: int) -> tuple[int, int]:
    """Split x into its even and odd bits, in that order."""
    return squash(x), squash(x >> 1)
