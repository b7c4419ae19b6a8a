"""Small bit-twiddling helpers for 32-bit values."""

_MASK32 = 0xFFFFFFFF

_DEBRUIJN_POSITIONS = (
    0x00, 0x01, 0x1C, 0x02, 0x1D, 0x0E, 0x18, 0x03, 0x1E, 0x16, 0x14, 0x0F, 0x19, 0x11, 0x04, 0x08,
    0x1F, 0x1B, 0x0D, 0x17, 0x15, 0x13, 0x10, 0x07, 0x1A, 0x0C, 0x12, 0x06, 0x0B, 0x05, 0x0A, 0x09,
)


def _check_uint32(value: int) -> int:
    if not 0 <= value <= _MASK32:
        raise ValueError(f"value {value!r} is not an unsigned 32-bit integer")
    return value


def lowest_set_bit(value: int) -> int:
    """Zero-based index of the least significant set bit; 0 for a value of 0."""
    value = _check_uint32(value)
    isolated = value & (-value) & _MASK32
    return _DEBRUIJN_POSITIONS[((isolated * 0x077CB531) & _MASK32) >> 27]


def num_set_bits(value: int) -> int:
    """Number of set bits in a 32-bit value."""
    return bin(_check_uint32(value)).count("1")


def is_power_of_two(value: int) -> bool:
    """True if at most one bit is set (so 0 counts as a power of two)."""
    return not (value & (value - 1))