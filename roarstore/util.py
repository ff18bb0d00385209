"""Helpers for splitting 32-bit values into container keys and indices."""

U32_MAX = 0xFFFF_FFFF


def _check_u32(value):
    if not 0 <= value <= U32_MAX:
        raise ValueError(f"{value} is not a 32-bit unsigned integer")
    return value


def _check_u16(value):
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"{value} is not a 16-bit unsigned integer")
    return value


def split(value):
    """Return the container key and the index inside the container for ``value``."""
    _check_u32(value)
    return value >> 16, value & 0xFFFF


def join(high, low):
    """Rebuild a 32-bit value from its container key and container index."""
    _check_u16(high)
    _check_u16(low)
    return (high << 16) + low


def convert_range_to_inclusive(start=None, end=None, end_inclusive=False):
    """Turn a range over 32-bit values into an inclusive ``(start, end)`` pair.

    ``None`` for ``start`` or ``end`` means unbounded on that side. Returns
    ``None`` when the range is empty.
    """
    first = 0 if start is None else _check_u32(start)
    if end is None:
        last = U32_MAX
    else:
        _check_u32(end)
        if end_inclusive:
            last = end
        elif end == 0:
            return None
        else:
            last = end - 1
    if last < first:
        return None
    return first, last