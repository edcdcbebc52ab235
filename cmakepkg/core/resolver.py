# SPDX-License-Identifier: MIT
"""Resolution of a target's transitive interface properties.

The Resolver flattens a Target graph into a ResolvedTarget for one build
configuration, following CMake's model of interface properties: when a
consumer links to a target, it reads the target's INTERFACE_* properties
and those of every target reachable through INTERFACE_LINK_LIBRARIES.

Properties are finished in one of two ways:
- Order-sensitive values (compile and link options) are kept exactly as
  collected, duplicates included, since reordering them can change what
  the compiler or linker does.
- Set-like values (definitions, include and link directories) are sorted
  and deduplicated.

Link libraries are flattened separately (artifact paths plus plain
library references) and ordered by a LinkOrder policy. The default sorts
them, which is wrong for linkers that resolve symbols in a single pass,
so the stable policy is available for those.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from cmakepkg.core.build_type import BuildConfiguration
from cmakepkg.core.errors import CyclicDependencyError
from cmakepkg.core.target import Target

logger = logging.getLogger(__name__)

PropertySelector = Callable[[Target], tuple[str, ...]]


class LinkOrder(Enum):
    """How the flattened link library list is ordered."""

    SORTED = "sorted"  # sort lexicographically, drop duplicates
    STABLE = "stable"  # keep declaration order, drop later duplicates


@dataclass(frozen=True)
class ResolvedTarget:
    """Effective build requirements of a target for one configuration.

    Attributes:
        name: Target name.
        location: Artifact path of the target itself, if it has one.
        compile_definitions: Preprocessor definitions (sorted, unique).
        compile_options: Compiler options (as declared).
        include_directories: Include directories (sorted, unique).
        link_directories: Library search directories (sorted, unique).
        link_options: Linker options (as declared).
        link_libraries: Libraries to link, ordered by the LinkOrder used.
    """

    name: str
    location: str | None = None
    compile_definitions: tuple[str, ...] = ()
    compile_options: tuple[str, ...] = ()
    include_directories: tuple[str, ...] = ()
    link_directories: tuple[str, ...] = ()
    link_options: tuple[str, ...] = ()
    link_libraries: tuple[str, ...] = ()


def _enter(target: Target, visiting: list[Target]) -> None:
    """Push ``target`` on the visiting path, failing if it is already on it."""
    for index, active in enumerate(visiting):
        if active is target:
            cycle = [t.name for t in visiting[index:]] + [target.name]
            raise CyclicDependencyError(cycle)
    visiting.append(target)


def collect(target: Target, prop: PropertySelector) -> list[str]:
    """Collect a property from a target and all targets it links to.

    The target's own values come first, followed by the collected values
    of each linked target in declaration order (depth-first pre-order).
    Plain string link entries contribute nothing. A target reached more
    than once through different paths contributes each time.

    Args:
        target: Root of the target graph.
        prop: Selects the property, e.g. ``lambda t: t.interface_compile_options``.

    Returns:
        The collected values, unsorted and with duplicates.

    Raises:
        CyclicDependencyError: If a target links to itself, directly or not.
    """
    result: list[str] = []
    visiting: list[Target] = []

    def _collect(current: Target) -> None:
        _enter(current, visiting)
        result.extend(prop(current))
        for dep in current.dependencies:
            _collect(dep)
        visiting.pop()

    _collect(target)
    return result


def collect_unique(target: Target, prop: PropertySelector) -> list[str]:
    """Like collect(), but sorted and without duplicates."""
    return sorted(set(collect(target, prop)))


def stable_unique(values: list[str]) -> list[str]:
    """Drop duplicates, keeping the first occurrence of each value."""
    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def flatten_link_libraries(
    target: Target, configuration: BuildConfiguration
) -> list[str]:
    """Flatten a target's artifact and link libraries into one list.

    The target's own artifact (if any) comes first. Each string entry of
    interface_link_libraries contributes itself, each target entry
    contributes its flattened list, recursively.

    Raises:
        CyclicDependencyError: If a target links to itself, directly or not.
    """
    result: list[str] = []
    visiting: list[Target] = []

    def _flatten(current: Target) -> None:
        _enter(current, visiting)
        location = current.location_for(configuration)
        if location is not None:
            result.append(location)
        for value in current.interface_link_libraries:
            if isinstance(value, Target):
                _flatten(value)
            else:
                result.append(value)
        visiting.pop()

    _flatten(target)
    return result


def order_link_libraries(libraries: list[str], link_order: LinkOrder) -> list[str]:
    """Apply a LinkOrder policy to a flattened link library list."""
    if link_order is LinkOrder.STABLE:
        return stable_unique(libraries)
    return sorted(set(libraries))


def resolve(
    target: Target,
    configuration: BuildConfiguration,
    *,
    link_order: LinkOrder = LinkOrder.SORTED,
) -> ResolvedTarget:
    """Compute the effective build requirements of a target.

    Args:
        target: Root of the target graph.
        configuration: Build configuration selecting artifact paths.
        link_order: Ordering policy for the link library list.

    Returns:
        The resolved target.

    Raises:
        CyclicDependencyError: If the target graph contains a cycle.

    Example:
        resolved = resolve(ssl, BuildConfiguration.Release)
        print(resolved.include_directories)
    """
    logger.debug(
        "Resolving %s for %s (link order: %s)",
        target.name,
        configuration.value,
        link_order.value,
    )

    libraries = flatten_link_libraries(target, configuration)
    resolved = ResolvedTarget(
        name=target.name,
        location=target.location_for(configuration),
        compile_definitions=tuple(
            collect_unique(target, lambda t: t.interface_compile_definitions)
        ),
        compile_options=tuple(collect(target, lambda t: t.interface_compile_options)),
        include_directories=tuple(
            collect_unique(target, lambda t: t.interface_include_directories)
        ),
        link_directories=tuple(
            collect_unique(target, lambda t: t.interface_link_directories)
        ),
        link_options=tuple(collect(target, lambda t: t.interface_link_options)),
        link_libraries=tuple(order_link_libraries(libraries, link_order)),
    )

    logger.debug(
        "Resolved %s: %d include dirs, %d link libraries",
        resolved.name,
        len(resolved.include_directories),
        len(resolved.link_libraries),
    )
    return resolved
