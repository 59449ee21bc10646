"""Bit counting, scanning and rotation over fixed-width unsigned integers."""

from __future__ import annotations

import sys
from collections.abc import MutableSequence
from enum import IntEnum


class Width(IntEnum):
    """Bit widths of the unsigned integer types."""

    UCHAR = 8
    USHORT = 16
    UINT = 32
    ULLONG = 64
    ULONG = 32 if sys.platform.startswith(("win32", "cygwin")) else 64


def _bits(width: int) -> int:
    bits = int(width)
    if bits <= 0:
        raise ValueError(f"width must be positive, got {width!r}")
    return bits


def _checked(value: int, width: int) -> tuple[int, int]:
    bits = _bits(width)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{value!r} does not fit in an unsigned {bits}-bit integer")
    return value, bits


def _invert(value: int, bits: int) -> int:
    return ~value & ((1 << bits) - 1)


def _ctz(value: int, bits: int) -> int:
    if value == 0:
        return bits
    return (value & -value).bit_length() - 1


def count_ones(value: int, width: int = Width.UINT) -> int:
    """Number of set bits."""
    value, _ = _checked(value, width)
    return bin(value).count("1")


def count_zeros(value: int, width: int = Width.UINT) -> int:
    """Number of clear bits within ``width``."""
    value, bits = _checked(value, width)
    return bits - bin(value).count("1")


def count_leading_zeros(value: int, width: int = Width.UINT) -> int:
    """Clear bits above the highest set bit; ``width`` for zero."""
    value, bits = _checked(value, width)
    return bits - value.bit_length()


def count_trailing_zeros(value: int, width: int = Width.UINT) -> int:
    """Clear bits below the lowest set bit; ``width`` for zero."""
    value, bits = _checked(value, width)
    return _ctz(value, bits)


def count_leading_ones(value: int, width: int = Width.UINT) -> int:
    """Set bits running down from the most significant bit."""
    value, bits = _checked(value, width)
    return bits - _invert(value, bits).bit_length()


def count_trailing_ones(value: int, width: int = Width.UINT) -> int:
    """Set bits running up from the least significant bit."""
    value, bits = _checked(value, width)
    return _ctz(_invert(value, bits), bits)


def first_leading_zero(value: int, width: int = Width.UINT) -> int:
    """1-based position, from the top, of the first clear bit; 0 if none."""
    value, bits = _checked(value, width)
    ones = bits - _invert(value, bits).bit_length()
    return 0 if ones == bits else ones + 1


def first_trailing_zero(value: int, width: int = Width.UINT) -> int:
    """1-based position, from the bottom, of the first clear bit; 0 if none."""
    value, bits = _checked(value, width)
    ones = _ctz(_invert(value, bits), bits)
    return 0 if ones == bits else ones + 1


def first_leading_one(value: int, width: int = Width.UINT) -> int:
    """1-based position, from the top, of the first set bit; 0 if none."""
    value, bits = _checked(value, width)
    return 0 if value == 0 else bits - value.bit_length() + 1


def first_trailing_one(value: int, width: int = Width.UINT) -> int:
    """1-based position, from the bottom, of the first set bit; 0 if none."""
    value, bits = _checked(value, width)
    return 0 if value == 0 else _ctz(value, bits) + 1


def rotate_left(value: int, count: int, width: int = Width.UINT) -> int:
    """Rotate ``value`` left by ``count`` bits within ``width``."""
    value, bits = _checked(value, width)
    shift = count % bits
    if shift == 0:
        return value
    mask = (1 << bits) - 1
    return ((value << shift) | (value >> (bits - shift))) & mask


def rotate_right(value: int, count: int, width: int = Width.UINT) -> int:
    """Rotate ``value`` right by ``count`` bits within ``width``."""
    bits = _bits(width)
    return rotate_left(value, -(count % bits), width)


def has_single_bit(value: int, width: int = Width.UINT) -> bool:
    """True when exactly one bit is set."""
    value, _ = _checked(value, width)
    return value != 0 and (value & (value - 1)) == 0


def bit_width(value: int, width: int = Width.UINT) -> int:
    """Bits needed to represent ``value``."""
    value, _ = _checked(value, width)
    return value.bit_length()


def bit_ceil(value: int, width: int = Width.UINT) -> int:
    """Smallest power of two not below ``value``.

    Raises ``OverflowError`` when that power does not fit in ``width``.
    """
    value, bits = _checked(value, width)
    if value <= 1:
        return 1
    result = 1 << (value - 1).bit_length()
    if result >= (1 << bits):
        raise OverflowError(f"bit_ceil({value}) does not fit in {bits} bits")
    return result


def bit_floor(value: int, width: int = Width.UINT) -> int:
    """Largest power of two not above ``value``; 0 for zero."""
    value, _ = _checked(value, width)
    return 0 if value == 0 else 1 << (value.bit_length() - 1)


def memreverse8(data: MutableSequence[int]) -> None:
    """Reverse the order of the bytes in ``data`` in place."""
    if isinstance(data, (bytes, str)) or not isinstance(data, (MutableSequence, memoryview)):
        raise TypeError(f"cannot reverse {type(data).__name__} in place")
    data[:] = data[::-1]