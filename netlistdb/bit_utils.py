"""Bit manipulation helpers on arbitrary-precision integers."""


def mask(length: int) -> int:
    """Return an integer with the lowest ``length`` bits set."""
    return (1 << length) - 1


def select_bits(val: int, start: int, length: int) -> int:
    """Return ``length`` bits of ``val`` starting at bit ``start``."""
    return (val >> start) & mask(length)


def set_bits(val: int, start: int, length: int, new_bits: int) -> int:
    """Return ``val`` with the field of ``length`` bits at ``start`` replaced.

    The new bits are masked with the positioned field mask before being
    shifted into place.
    """
    field_mask = mask(length) << start
    placed = (new_bits & field_mask) << start
    return (val & ~field_mask) | placed