"""Integer power with 64-bit unsigned wrap-around."""

from __future__ import annotations

_MODULUS = 1 << 64


def ipow(base: int, exp: int) -> int:
    """Raise ``base`` to ``exp`` by squaring, wrapping modulo 2**64."""
    if base < 0 or exp < 0:
        raise ValueError("base and exponent must be non-negative")
    return pow(base, exp, _MODULUS)