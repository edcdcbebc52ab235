# SPDX-License-Identifier: MIT
"""Imported targets for external dependencies.

This module provides ImportedTarget, which turns a resolved CMake target
into the compiler and linker flags a consumer needs. Unlike targets built
from source, imported targets represent pre-built libraries.
"""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cmakepkg.core.resolver import ResolvedTarget
    from cmakepkg.packages.description import PackageDescription

# /usr/lib/libfoo.so.5 -> foo
_SHARED_LIBRARY_RE = re.compile(r"lib([^/]+)\.so(\.[^/]*)?$")


def link_name(library: str) -> str | None:
    """Library name to pass with -l, or None to pass the library as is.

    On Linux-like hosts, ``/usr/lib/libfoo.so.5`` becomes ``foo`` so the
    linker gets ``-lfoo`` rather than a full path. Windows import
    libraries are always passed as is.
    """
    if sys.platform == "win32":
        return None
    match = _SHARED_LIBRARY_RE.search(library)
    if match is None:
        return None
    return match.group(1)


class ImportedTarget:
    """A target representing an external dependency.

    ImportedTarget wraps a ResolvedTarget and provides the flags expected
    by a compiler driver. When something depends on an imported target,
    the compile and link flags are added to its build.

    Attributes:
        name: Target name (e.g. "OpenSSL::SSL").
        resolved: The resolved target with all transitive requirements.
        package: Package the target belongs to, if known.
        is_imported: Always True for imported targets.
        requested_components: Which components were requested.

    Example:
        resolved = resolve(load_target(path), get_build_configuration())
        ssl = ImportedTarget(resolved, package=openssl)

        env.cc.flags += ssl.compile_flags
        env.link.flags += ssl.link_flags
    """

    __slots__ = ("name", "resolved", "package", "is_imported", "requested_components")

    def __init__(
        self,
        resolved: ResolvedTarget,
        *,
        package: PackageDescription | None = None,
        requested_components: list[str] | None = None,
    ) -> None:
        """Create an imported target.

        Args:
            resolved: The resolved target.
            package: Package the target belongs to.
            requested_components: Which components were requested. Defaults
                to the package's components.
        """
        self.name = resolved.name
        self.resolved = resolved
        self.package = package
        self.is_imported = True
        if requested_components is None and package is not None:
            requested_components = list(package.components or ())
        self.requested_components = requested_components or []

    @property
    def compile_flags(self) -> list[str]:
        """Get compile flags for this target."""
        flags = [f"-D{define}" for define in self.resolved.compile_definitions]
        flags.extend(self.resolved.compile_options)
        flags.extend(f"-I{inc}" for inc in self.resolved.include_directories)
        return flags

    @property
    def link_flags(self) -> list[str]:
        """Get link flags for this target."""
        flags = [f"-L{d}" for d in self.resolved.link_directories]
        flags.extend(self.resolved.link_options)
        for lib in self.resolved.link_libraries:
            name = link_name(lib)
            flags.append(f"-l{name}" if name is not None else lib)
        return flags

    @property
    def include_dirs(self) -> list[Path]:
        """Get include directories."""
        return [Path(d) for d in self.resolved.include_directories]

    @property
    def library_dirs(self) -> list[Path]:
        """Get library directories."""
        return [Path(d) for d in self.resolved.link_directories]

    @property
    def libraries(self) -> list[str]:
        """Get libraries to link."""
        return list(self.resolved.link_libraries)

    @property
    def defines(self) -> list[str]:
        """Get preprocessor definitions."""
        return list(self.resolved.compile_definitions)

    @property
    def version(self) -> str:
        """Get package version."""
        if self.package is None or self.package.version is None:
            return ""
        return str(self.package.version)

    def __repr__(self) -> str:
        comp_str = ""
        if self.requested_components:
            comp_str = f", components={self.requested_components}"
        return f"ImportedTarget({self.name!r}, version={self.version!r}{comp_str})"
