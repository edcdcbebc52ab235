# SPDX-License-Identifier: MIT
"""Mapping of build profile signals to CMake build configurations.

Cargo-style build scripts describe the build with three environment
variables: PROFILE ("release" or "debug"), OPT_LEVEL ("0"-"3", "s", "z")
and DEBUG (debug info level or "false"/"none"). CMake knows four build
configurations instead. This module picks the closest one.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

# Optimization levels that request a small binary
SIZE_OPT_LEVELS = frozenset({"s", "z"})

# DEBUG values that mean "no debug info"
NO_DEBUG_VALUES = frozenset({"", "0", "false", "none"})


class BuildConfiguration(Enum):
    """The four standard CMake build configurations.

    The value is CMake's own spelling, which is also the suffix of the
    per-configuration target properties (e.g. ``LOCATION_RelWithDebInfo``).
    """

    Debug = "Debug"
    Release = "Release"
    RelWithDebInfo = "RelWithDebInfo"
    MinSizeRel = "MinSizeRel"

    @classmethod
    def from_name(cls, name: str) -> BuildConfiguration | None:
        """Look up a configuration by name, ignoring case."""
        for config in cls:
            if config.value.lower() == name.lower():
                return config
        return None


def select_build_configuration(
    profile: str | None,
    opt_level: str | None,
    debug: str | None,
) -> BuildConfiguration:
    """Pick the build configuration matching the build profile.

    Anything but the release profile is Debug. For release builds,
    size optimization wins over debug info, since CMake has no
    configuration combining MinSizeRel and RelWithDebInfo.

    Args:
        profile: Profile name; only "release" is treated specially.
        opt_level: Optimization level; "s" and "z" mean optimize for size.
        debug: Debug info setting; None, "", "0", "false" and "none"
            mean disabled.

    Returns:
        The selected configuration. Never raises.
    """
    if profile != "release":
        return BuildConfiguration.Debug

    if opt_level in SIZE_OPT_LEVELS:
        return BuildConfiguration.MinSizeRel

    if debug is not None and debug not in NO_DEBUG_VALUES:
        return BuildConfiguration.RelWithDebInfo

    return BuildConfiguration.Release


def build_configuration_from_env(environ: Mapping[str, str]) -> BuildConfiguration:
    """Select the configuration from PROFILE, OPT_LEVEL and DEBUG in ``environ``."""
    return select_build_configuration(
        environ.get("PROFILE"),
        environ.get("OPT_LEVEL"),
        environ.get("DEBUG"),
    )
