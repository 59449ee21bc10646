"""Small low-level utilities: FNV-1a hashing, bit operations, packed bit scanning, integer power and versions."""

__version__ = "0.0.0"

__all__ = [
    "bitops",
    "bitscan",
    "hashing",
    "intmath",
    "versioning",
]