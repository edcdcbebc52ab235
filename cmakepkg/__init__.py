# SPDX-License-Identifier: MIT
"""
cmakepkg: consume CMake packages from Python build scripts.

cmakepkg takes the description CMake produces for an imported target of a
package found with find_package(), and computes the compile and link
requirements of that target (including everything it transitively links
to) for one build configuration.
"""

from __future__ import annotations

import json
import logging
import os

from cmakepkg.core.build_type import (
    BuildConfiguration,
    build_configuration_from_env,
    select_build_configuration,
)
from cmakepkg.core.errors import (
    CmakePkgError,
    CyclicDependencyError,
    InvalidVersionError,
    PackageNotFoundError,
    TargetNotFoundError,
    VersionTooOldError,
)
from cmakepkg.core.resolver import LinkOrder, ResolvedTarget, resolve
from cmakepkg.core.target import ImportLibrary, Location, Target
from cmakepkg.core.version import Version, compare
from cmakepkg.packages.description import (
    FindPackageRequest,
    PackageDescription,
    load_package,
    load_target,
)
from cmakepkg.packages.imported import ImportedTarget

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

# Variables passed by a build driver, overriding the environment
_driver_vars: dict[str, object] | None = None


def get_var(name: str, default: str | None = None) -> str | None:
    """Get a build variable set by the build driver or from environment.

    A build driver can pass variables as a JSON object in CMAKEPKG_VARS:
        CMAKEPKG_VARS='{"PROFILE": "release"}' python build.py

    Precedence (highest to lowest):
        1. CMAKEPKG_VARS
        2. Environment variable
        3. default

    Non-string values in CMAKEPKG_VARS are returned as their JSON text,
    and a null value counts as unset.

    Args:
        name: Variable name.
        default: Default value if not set.

    Returns:
        The variable value, or default if not set.
    """
    global _driver_vars

    # Lazy-load driver vars from environment on first access
    if _driver_vars is None:
        raw = os.environ.get("CMAKEPKG_VARS")
        if raw:
            try:
                _driver_vars = json.loads(raw)
            except json.JSONDecodeError:
                logger.warning("Ignoring CMAKEPKG_VARS: not valid JSON")
                _driver_vars = {}
            if not isinstance(_driver_vars, dict):
                logger.warning("Ignoring CMAKEPKG_VARS: not a JSON object")
                _driver_vars = {}
        else:
            _driver_vars = {}

    value = _driver_vars.get(name)
    if value is not None:
        # Numbers and booleans keep their JSON spelling ("1", "true")
        return value if isinstance(value, str) else json.dumps(value)

    return os.environ.get(name, default)


def _clear_vars() -> None:
    """Forget cached driver variables (used by tests)."""
    global _driver_vars
    _driver_vars = None


def get_build_configuration() -> BuildConfiguration:
    """Get the CMake build configuration for this build.

    Precedence (highest to lowest):
        1. CMAKEPKG_BUILD_TYPE (a configuration name, any case)
        2. Derived from PROFILE, OPT_LEVEL and DEBUG

    Returns:
        The build configuration.
    """
    forced = get_var("CMAKEPKG_BUILD_TYPE")
    if forced:
        config = BuildConfiguration.from_name(forced)
        if config is not None:
            return config
        logger.warning("Ignoring unknown CMAKEPKG_BUILD_TYPE=%s", forced)

    return select_build_configuration(
        get_var("PROFILE"), get_var("OPT_LEVEL"), get_var("DEBUG")
    )


def get_link_order(default: LinkOrder = LinkOrder.SORTED) -> LinkOrder:
    """Get the link library ordering policy from CMAKEPKG_LINK_ORDER.

    Args:
        default: Policy to use when the variable is unset or unknown.

    Returns:
        The link order policy.
    """
    value = get_var("CMAKEPKG_LINK_ORDER")
    if not value:
        return default
    try:
        return LinkOrder(value.lower())
    except ValueError:
        logger.warning("Ignoring unknown CMAKEPKG_LINK_ORDER=%s", value)
        return default


# Public API exports
__all__ = [
    # Version
    "__version__",
    # Build variable access
    "get_var",
    "get_build_configuration",
    "get_link_order",
    # Build configurations
    "BuildConfiguration",
    "build_configuration_from_env",
    "select_build_configuration",
    # Versions
    "Version",
    "compare",
    # Targets and resolution
    "Target",
    "Location",
    "ImportLibrary",
    "ResolvedTarget",
    "LinkOrder",
    "resolve",
    # Package descriptions
    "FindPackageRequest",
    "PackageDescription",
    "ImportedTarget",
    "load_package",
    "load_target",
    # Errors
    "CmakePkgError",
    "CyclicDependencyError",
    "InvalidVersionError",
    "PackageNotFoundError",
    "TargetNotFoundError",
    "VersionTooOldError",
]
