# idkit

Small, dependency-free, low-level helpers for Python 3.10 and later.

## Modules

- **`idkit.hashing`**: FNV-1a hashing over the elements of an iterable.
  - `fnv1a_hash(values, seed=None, width=64)` hashes every element.
  - `fnv1a_hash_if(values, predicate, seed=None, width=64)` hashes only the
    elements for which `predicate` returns true.

  `width` is 32 or 64, and any other value raises `ValueError`. The seed
  defaults to the FNV offset basis for that width. An integer element
  contributes its own value, masked to the width. A one-character string
  contributes its code point. Any other element contributes Python's `hash()`,
  masked to the width.
- **`idkit.intmath`**: `ipow(base, exp)` raises `base` to `exp` and wraps the
  result modulo 2**64. A negative argument raises `ValueError`.
- **`idkit.versioning`**:
  - `Version` is a frozen, ordered `major.minor.patch` value.
    `Version.parse("1.2.3")` reads one from text, `str()` writes it back, and
    `.number()` packs it into one integer.
  - `version_number(major, minor, patch)` computes
    `major * 100000 + minor * 100 + patch`.
  - `IDK_VERSION` and `RANGES_VERSION` are both `0.0.0`.
- **`idkit.bitops`**: bit operations on unsigned integers of a fixed width.
  - The widths are given by `Width`: `UCHAR` (8), `USHORT` (16), `UINT` (32),
    `ULLONG` (64) and `ULONG`. `ULONG` is 32 on Windows and Cygwin and 64
    elsewhere. Functions default to `Width.UINT`.
  - Counting: `count_ones`, `count_zeros`, `count_leading_zeros`,
    `count_trailing_zeros`, `count_leading_ones`, `count_trailing_ones`.
  - Finding: `first_leading_zero`, `first_trailing_zero`, `first_leading_one`,
    `first_trailing_one`. These return 1-based positions, and 0 when no such
    bit exists.
  - Rotating and testing: `rotate_left`, `rotate_right`, `has_single_bit`.
  - Rounding to powers of two: `bit_width`, `bit_ceil`, `bit_floor`.
    `bit_ceil` raises `OverflowError` when the result does not fit in the
    width.
  - `memreverse8(data)` reverses a mutable byte sequence, such as a
    `bytearray` or a list, in place.
  - A value that does not fit in the width raises `ValueError`. A non-integer
    value raises `TypeError`.
- **`idkit.bitscan`**: works on flags packed least-significant bit first into
  words.
  - `pack_bits(flags, word_bits=64)` packs truthy and falsy flags into words.
  - `count_set_bits(words, word_bits=64)` counts the set bits across the words.
  - `find_first_set(words, word_bits=64)` returns the index of the lowest set
    bit, or `None` if no bit is set.
  - `make_sample(size=100032, index=95000, word_bits=64)` builds words with
    exactly one bit set.

## Installation

```
pip install idkit
```

To install the test tools and run the tests:

```
pip install "idkit[test]"
pytest
```

## Examples

```python
from idkit.bitops import Width, count_ones, first_trailing_one, rotate_left, memreverse8

count_ones(0b1011, Width.UCHAR)           # 3
first_trailing_one(0b1000, Width.UINT)    # 4
rotate_left(0x81, 1, Width.UCHAR)         # 0x03

buf = bytearray(b"abc")
memreverse8(buf)                          # buf == bytearray(b"cba")
```

```python
from idkit.bitscan import make_sample, count_set_bits, find_first_set

words = make_sample(100032, 95000, 64)
count_set_bits(words, 64)                 # 1
find_first_set(words, 64)                 # 95000
```

```python
from idkit.hashing import fnv1a_hash_if
from idkit.intmath import ipow
from idkit.versioning import Version

fnv1a_hash_if([1, 2, 3, 4], lambda x: x % 2 == 0, width=32)  # hashes only 2 and 4
ipow(3, 4)                                # 81
Version.parse("1.2.3").number()           # 100203
```

## Scope

`idkit` offers no text-encoding helpers, such as UTF-8 or UTF-16 decoding or
surrogate handling. It has no assertion or debug-check facility and no helpers
for sentinel-terminated sequences. It also has no command-line interface.