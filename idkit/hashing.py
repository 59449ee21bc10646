"""FNV-1a hashing over the elements of an iterable."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

_PRIMES = {
    32: 16777619,
    64: 1099511628211,
}

_OFFSET_BASES = {
    32: 2166136261,
    64: 14695981039346656037,
}


def _check_width(width: int) -> int:
    if width not in _PRIMES:
        raise ValueError(f"unsupported hash width {width!r}; expected 32 or 64")
    return (1 << width) - 1


def _element_hash(element: Any, mask: int) -> int:
    """Hash one element the way an identity integer hash would."""
    if isinstance(element, int):
        return element & mask
    if isinstance(element, str) and len(element) == 1:
        return ord(element)
    return hash(element) & mask


def fnv1a_hash_if(
    values: Iterable[Any],
    predicate: Callable[[Any], bool],
    seed: int | None = None,
    width: int = 64,
) -> int:
    """Mix the hash of every element for which ``predicate`` is true.

    ``seed`` defaults to the FNV offset basis for the chosen ``width``.
    """
    mask = _check_width(width)
    prime = _PRIMES[width]
    hash_value = (_OFFSET_BASES[width] if seed is None else seed) & mask
    for element in values:
        if not predicate(element):
            continue
        hash_value = ((hash_value ^ _element_hash(element, mask)) * prime) & mask
    return hash_value


def fnv1a_hash(values: Iterable[Any], seed: int | None = None, width: int = 64) -> int:
    """Mix the hash of every element of ``values`` into one FNV-1a value."""
    return fnv1a_hash_if(values, lambda _element: True, seed=seed, width=width)