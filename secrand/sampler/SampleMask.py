def fill_down(top_byte: int) -> int:
    """Smallest all-ones bit pattern covering the given byte.

    Args:
        top_byte (int): Most significant byte of the bound, 0..255

    Returns:
        int: top_byte with every bit below its highest set bit switched on
    """
    mask = top_byte
    mask |= mask >> 1
    mask |= mask >> 2
    mask |= mask >> 4
    return mask
