# SPDX-License-Identifier: MIT
"""Imported CMake targets and their interface properties.

A Target describes one imported target of a CMake package, as reported
by CMake after find_package(). Besides the artifact to link, it carries
CMake "interface" properties: requirements that propagate to everything
that links to the target. INTERFACE_LINK_LIBRARIES may name other
targets, which are stored as nested Target instances, so a Target is the
root of a dependency graph.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import ClassVar, Union

from cmakepkg.core.build_type import BuildConfiguration


@dataclass(frozen=True)
class ArtifactLocator:
    """Path of a target's artifact, with optional per-configuration overrides.

    Subclasses name the CMake property family they were read from. The
    resolver only calls resolve(), so it does not care which one it gets.

    Attributes:
        path: Configuration-independent path, if any.
        overrides: Configuration-specific paths, as (configuration, path)
            pairs sorted by configuration name. A mapping passed in is
            copied into this form.
    """

    property_name: ClassVar[str] = ""

    path: str | None = None
    overrides: tuple[tuple[BuildConfiguration, str], ...] = ()

    def __post_init__(self) -> None:
        items = self.overrides
        if isinstance(items, Mapping):
            items = items.items()
        object.__setattr__(
            self, "overrides", tuple(sorted(items, key=lambda item: item[0].value))
        )

    @classmethod
    def config_property(cls, config: BuildConfiguration) -> str:
        """Name of the per-configuration property, e.g. ``LOCATION_Debug``."""
        return f"{cls.property_name}_{config.value}"

    def resolve(self, config: BuildConfiguration) -> str | None:
        """Return the override for ``config``, else the base path, else None."""
        for override_config, override in self.overrides:
            if override_config is config:
                return override
        return self.path


@dataclass(frozen=True)
class Location(ArtifactLocator):
    """Artifact located directly by the LOCATION properties."""

    property_name: ClassVar[str] = "LOCATION"


@dataclass(frozen=True)
class ImportLibrary(ArtifactLocator):
    """Artifact located by the IMPORTED_IMPLIB properties (Windows DLLs)."""

    property_name: ClassVar[str] = "IMPORTED_IMPLIB"


@dataclass(frozen=True)
class Target:
    """An imported target with its interface properties.

    Interface properties default to empty. Lists passed in are stored as
    tuples, so a Target graph can be shared without being modified.

    Example:
        crypto = Target("OpenSSL::Crypto", artifact=Location("/usr/lib/libcrypto.so"))
        ssl = Target(
            "OpenSSL::SSL",
            artifact=Location("/usr/lib/libssl.so"),
            interface_include_directories=["/usr/include"],
            interface_link_libraries=[crypto, "dl"],
        )

    Attributes:
        name: Target name, e.g. "OpenSSL::SSL".
        artifact: Where the target's library is.
        interface_compile_definitions: Preprocessor definitions.
        interface_compile_options: Compiler options.
        interface_include_directories: Include directories.
        interface_link_directories: Library search directories.
        interface_link_options: Linker options.
        interface_link_libraries: Libraries (strings) and targets to link.
    """

    name: str
    artifact: ArtifactLocator = field(default_factory=Location)
    interface_compile_definitions: tuple[str, ...] = ()
    interface_compile_options: tuple[str, ...] = ()
    interface_include_directories: tuple[str, ...] = ()
    interface_link_directories: tuple[str, ...] = ()
    interface_link_options: tuple[str, ...] = ()
    interface_link_libraries: tuple[PropertyValue, ...] = ()

    def __post_init__(self) -> None:
        for name in (
            "interface_compile_definitions",
            "interface_compile_options",
            "interface_include_directories",
            "interface_link_directories",
            "interface_link_options",
            "interface_link_libraries",
        ):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def location_for(self, config: BuildConfiguration) -> str | None:
        """Artifact path to use when building in ``config``."""
        return self.artifact.resolve(config)

    @property
    def dependencies(self) -> list[Target]:
        """Targets listed directly in interface_link_libraries, in order."""
        return [v for v in self.interface_link_libraries if isinstance(v, Target)]

    def __repr__(self) -> str:
        deps = ", ".join(d.name for d in self.dependencies)
        return f"Target({self.name!r}, deps=[{deps}])"


# A link library entry: a plain library reference or a nested target
PropertyValue = Union[str, Target]
