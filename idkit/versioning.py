"""Library version values and their packed integer form."""

from __future__ import annotations

from dataclasses import dataclass


def version_number(major: int, minor: int, patch: int) -> int:
    """Pack a version as ``major * 100000 + minor * 100 + patch``."""
    return major * 100000 + minor * 100 + patch


@dataclass(frozen=True, order=True)
class Version:
    """A major.minor.patch version."""

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        for part in (self.major, self.minor, self.patch):
            if isinstance(part, bool) or not isinstance(part, int) or part < 0:
                raise ValueError(f"invalid version component {part!r}")

    @classmethod
    def parse(cls, text: str) -> Version:
        """Read a version from ``"MAJOR.MINOR.PATCH"`` text."""
        parts = text.strip().split(".")
        if len(parts) != 3 or not all(part.isdigit() for part in parts):
            raise ValueError(f"malformed version string {text!r}")
        major, minor, patch = (int(part) for part in parts)
        return cls(major, minor, patch)

    def number(self) -> int:
        """The packed integer form of this version."""
        return version_number(self.major, self.minor, self.patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


IDK_VERSION = Version.parse("0.0.0")
RANGES_VERSION = Version.parse("0.0.0")