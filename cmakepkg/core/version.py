# SPDX-License-Identifier: MIT
"""Three-component versions as reported by CMake packages."""

from __future__ import annotations

import re
from dataclasses import dataclass

from cmakepkg.core.errors import InvalidVersionError, VersionTooOldError

_COMPONENT_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True, order=True)
class Version:
    """A ``major.minor.patch`` version.

    Versions order lexicographically by (major, minor, patch). Missing
    trailing components parse as zero, so ``Version.parse("1.2")`` equals
    ``Version(1, 2, 0)`` and renders as ``"1.2.0"``.

    Example:
        >>> Version.parse("3.19") < Version.parse("3.19.1")
        True
        >>> str(Version.parse("6"))
        '6.0.0'
    """

    major: int
    minor: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, value: str) -> Version:
        """Parse a dot-separated version string.

        Args:
            value: String with one to three numeric components.

        Returns:
            The parsed version.

        Raises:
            InvalidVersionError: On an empty string, more than three
                components, or a component that is not a plain number.
        """
        parts = value.split(".")
        if not value or len(parts) > 3:
            raise InvalidVersionError(value)
        for part in parts:
            if not _COMPONENT_RE.fullmatch(part):
                raise InvalidVersionError(value)

        numbers = [int(part) for part in parts] + [0] * (3 - len(parts))
        return cls(*numbers)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def compare(a: Version, b: Version) -> int:
    """Three-way comparison: -1 if a < b, 0 if equal, 1 if a > b."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def require_version(found: Version, minimum: Version) -> None:
    """Check that ``found`` is at least ``minimum``.

    Raises:
        VersionTooOldError: If ``found`` is lower than ``minimum``.
    """
    if found < minimum:
        raise VersionTooOldError(found, minimum)
