# SPDX-License-Identifier: MIT
"""Custom exceptions for cmakepkg.

All cmakepkg exceptions inherit from CmakePkgError, which carries the
formatted message as an attribute for callers that want to report it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cmakepkg.core.version import Version


class CmakePkgError(Exception):
    """Base class for all cmakepkg exceptions.

    Attributes:
        message: The error message.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidVersionError(CmakePkgError, ValueError):
    """A version string could not be parsed.

    Attributes:
        value: The string that failed to parse.
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"invalid version: {value!r}")


class VersionTooOldError(CmakePkgError):
    """A found version is lower than the required minimum.

    Attributes:
        found: The version that was found.
        minimum: The minimum version that was required.
    """

    def __init__(self, found: Version, minimum: Version) -> None:
        self.found = found
        self.minimum = minimum
        super().__init__(f"version {found} is older than required {minimum}")


class CyclicDependencyError(CmakePkgError):
    """A target (transitively) links to itself.

    Attributes:
        cycle: Target names forming the cycle, first and last are equal.
    """

    def __init__(self, cycle: list[str]) -> None:
        self.cycle = cycle
        cycle_str = " -> ".join(cycle)
        super().__init__(f"dependency cycle: {cycle_str}")


class PackageNotFoundError(CmakePkgError):
    """CMake did not find the requested package.

    Attributes:
        name: Package name, if known.
    """

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        if name:
            super().__init__(f"package not found: {name}")
        else:
            super().__init__("package not found")


class TargetNotFoundError(CmakePkgError):
    """A target description is missing or could not be understood.

    Attributes:
        name: Target name, if known.
        reason: What was wrong with the description.
    """

    def __init__(self, name: str | None, reason: str) -> None:
        self.name = name
        self.reason = reason
        if name:
            super().__init__(f"target not found: {name}: {reason}")
        else:
            super().__init__(f"target not found: {reason}")
