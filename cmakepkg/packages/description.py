# SPDX-License-Identifier: MIT
"""Package and target descriptions read from CMake's JSON output.

The CMake side of cmakepkg runs find_package() and writes two kinds of
JSON documents:

- a package document: ``{"name": "OpenSSL", "version": "3.0.2"}``, or
  ``{}`` when the package was not found;
- a target document per queried target, keyed by CMake property name
  (NAME, LOCATION, LOCATION_<Config>, IMPORTED_IMPLIB..., INTERFACE_*),
  where INTERFACE_LINK_LIBRARIES entries are either strings or nested
  target documents.

This module turns those documents into PackageDescription and Target
values. Malformed documents are reported as PackageNotFoundError or
TargetNotFoundError, never as resolution failures.
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from cmakepkg.core.build_type import BuildConfiguration
from cmakepkg.core.errors import (
    InvalidVersionError,
    PackageNotFoundError,
    TargetNotFoundError,
)
from cmakepkg.core.target import (
    ArtifactLocator,
    ImportLibrary,
    Location,
    PropertyValue,
    Target,
)
from cmakepkg.core.version import Version, require_version

logger = logging.getLogger(__name__)

_LIST_PROPERTIES = {
    "interface_compile_definitions": "INTERFACE_COMPILE_DEFINITIONS",
    "interface_compile_options": "INTERFACE_COMPILE_OPTIONS",
    "interface_include_directories": "INTERFACE_INCLUDE_DIRECTORIES",
    "interface_link_directories": "INTERFACE_LINK_DIRECTORIES",
    "interface_link_options": "INTERFACE_LINK_OPTIONS",
}


def uses_import_library() -> bool:
    """Whether the host links DLLs through import libraries (Windows)."""
    return sys.platform == "win32"


@dataclass(frozen=True)
class PackageDescription:
    """A package found by CMake.

    Attributes:
        name: Package name as passed to find_package().
        version: Package version, if the package reports one.
        components: Components that were requested, if any.
    """

    name: str
    version: Version | None = None
    components: tuple[str, ...] | None = None


@dataclass(frozen=True)
class FindPackageRequest:
    """What to look for: the arguments of a find_package() call.

    Example:
        request = FindPackageRequest("Qt6", version=Version.parse("6.2"),
                                     components=("Core", "Gui"))
        request.check(load_package(output_file))
    """

    name: str
    version: Version | None = None
    components: tuple[str, ...] | None = None
    verbose: bool = False

    def check(self, package: PackageDescription) -> PackageDescription:
        """Check that a found package satisfies the requested minimum version.

        A package that does not report its version is accepted.

        Returns:
            The package, for chaining.

        Raises:
            VersionTooOldError: If the package version is too old.
        """
        if self.version is not None and package.version is not None:
            require_version(package.version, self.version)
        return package


def target_output_name(target_name: str) -> str:
    """File name of the JSON document describing ``target_name``."""
    return f"target_{target_name.lower().replace(':', '_')}.json"


def package_from_dict(
    data: Any, components: tuple[str, ...] | None = None
) -> PackageDescription:
    """Build a PackageDescription from a package document.

    Args:
        data: Decoded JSON document.
        components: Components that were requested.

    Raises:
        PackageNotFoundError: If the document has no package name.
        InvalidVersionError: If the reported version is not a string or
            does not parse.
    """
    if not isinstance(data, dict) or not isinstance(data.get("name"), str):
        raise PackageNotFoundError()

    version = data.get("version")
    if version is not None and not isinstance(version, str):
        raise InvalidVersionError(str(version))
    if components is None and isinstance(data.get("components"), list):
        components = tuple(str(c) for c in data["components"])

    return PackageDescription(
        name=data["name"],
        version=Version.parse(version) if isinstance(version, str) else None,
        components=components,
    )


def load_package(
    path: Path | str, components: tuple[str, ...] | None = None
) -> PackageDescription:
    """Read a package document from ``path``.

    Raises:
        PackageNotFoundError: If the file is missing or not a package document.
        InvalidVersionError: If the reported version does not parse.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise PackageNotFoundError() from e

    package = package_from_dict(data, components)
    logger.debug(
        "Loaded package %s (version %s) from %s", package.name, package.version, path
    )
    return package


def _scalar(data: dict[str, Any], key: str, name: str | None) -> str | None:
    """Read a single string; CMake may write it as a one-element list."""
    value = data.get(key)
    if isinstance(value, list):
        if len(value) != 1:
            raise TargetNotFoundError(name, f"{key} must hold a single value")
        value = value[0]
    if value is not None and not isinstance(value, str):
        raise TargetNotFoundError(name, f"{key} must be a string")
    return value


def _strings(data: dict[str, Any], key: str, name: str | None) -> tuple[str, ...]:
    """Read a list of strings; a bare string counts as a one-element list."""
    value = data.get(key)
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise TargetNotFoundError(name, f"{key} must be a list of strings")
    return tuple(value)


def _locator(
    data: dict[str, Any], cls: type[ArtifactLocator], name: str | None
) -> ArtifactLocator:
    overrides: dict[BuildConfiguration, str] = {}
    for config in BuildConfiguration:
        path = _scalar(data, cls.config_property(config), name)
        if path is not None:
            overrides[config] = path
    return cls(_scalar(data, cls.property_name, name), overrides)


def target_from_dict(data: Any, *, import_library: bool | None = None) -> Target:
    """Build a Target graph from a target document.

    Args:
        data: Decoded JSON document.
        import_library: Read IMPORTED_IMPLIB instead of LOCATION properties.
            None means decide from the host platform.

    Raises:
        TargetNotFoundError: If the document (or a nested one) is malformed.
    """
    if import_library is None:
        import_library = uses_import_library()
    locator_cls = ImportLibrary if import_library else Location

    def _build(node: Any) -> Target:
        if not isinstance(node, dict):
            raise TargetNotFoundError(None, "target description must be an object")
        name = _scalar(node, "NAME", None)
        if not name:
            raise TargetNotFoundError(None, "target description has no NAME")

        links: list[PropertyValue] = []
        raw_links = node.get("INTERFACE_LINK_LIBRARIES")
        if isinstance(raw_links, (str, dict)):
            raw_links = [raw_links]
        elif raw_links is not None and not isinstance(raw_links, list):
            raise TargetNotFoundError(name, "INTERFACE_LINK_LIBRARIES must be a list")
        for entry in raw_links or []:
            if isinstance(entry, str):
                links.append(entry)
            else:
                links.append(_build(entry))

        fields = {
            attr: _strings(node, key, name) for attr, key in _LIST_PROPERTIES.items()
        }
        return Target(
            name,
            artifact=_locator(node, locator_cls, name),
            interface_link_libraries=tuple(links),
            **fields,
        )

    target = _build(data)
    logger.debug("Read target %s (%s)", target.name, locator_cls.property_name)
    return target


def load_target(path: Path | str, *, import_library: bool | None = None) -> Target:
    """Read a target document from ``path``.

    Raises:
        TargetNotFoundError: If the file is missing, is not valid JSON,
            or does not describe a target.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise TargetNotFoundError(None, f"cannot read {path}: {e}") from e
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise TargetNotFoundError(None, f"invalid JSON in {path}: {e}") from e

    return target_from_dict(data, import_library=import_library)
