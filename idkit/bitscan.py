"""Counting and locating set bits in packed words.

Bits are packed least-significant first: flag ``i`` lives in word
``i // word_bits`` at bit ``i % word_bits``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from idkit.bitops import count_ones, first_trailing_one

SAMPLE_SIZE = 100032
HARDCODED_INDEX = 95000
BENCHMARK_LOOP_LIMIT = 400000
DEFAULT_WORD_BITS = 64


def _word_bits(word_bits: int) -> int:
    if isinstance(word_bits, bool) or not isinstance(word_bits, int) or word_bits <= 0:
        raise ValueError(f"word_bits must be a positive integer, got {word_bits!r}")
    return word_bits


def pack_bits(flags: Iterable[object], word_bits: int = DEFAULT_WORD_BITS) -> list[int]:
    """Pack truthy/falsy ``flags`` into a list of ``word_bits``-wide words."""
    bits = _word_bits(word_bits)
    words: list[int] = []
    for position, flag in enumerate(flags):
        word_index, bit_index = divmod(position, bits)
        if word_index == len(words):
            words.append(0)
        if flag:
            words[word_index] |= 1 << bit_index
    return words


def count_set_bits(words: Iterable[int], word_bits: int = DEFAULT_WORD_BITS) -> int:
    """Total number of set bits across all ``words``."""
    bits = _word_bits(word_bits)
    return sum(count_ones(word, bits) for word in words)


def find_first_set(words: Iterable[int], word_bits: int = DEFAULT_WORD_BITS) -> int | None:
    """Index of the lowest set bit across ``words``, or ``None`` if none is set."""
    bits = _word_bits(word_bits)
    for word_index, word in enumerate(words):
        position = first_trailing_one(word, bits)
        if position:
            return word_index * bits + position - 1
    return None


def make_sample(
    size: int = SAMPLE_SIZE,
    index: int = HARDCODED_INDEX,
    word_bits: int = DEFAULT_WORD_BITS,
) -> list[int]:
    """Packed words holding ``size`` bits, all clear except bit ``index``."""
    bits = _word_bits(word_bits)
    if size < 0:
        raise ValueError(f"size must not be negative, got {size!r}")
    if not 0 <= index < size:
        raise IndexError(f"bit index {index} is outside a sample of {size} bits")
    words = [0] * ((size + bits - 1) // bits)
    word_index, bit_index = divmod(index, bits)
    words[word_index] |= 1 << bit_index
    return words


def _as_sequence(words: Iterable[int]) -> Sequence[int]:
    return words if isinstance(words, Sequence) else list(words)