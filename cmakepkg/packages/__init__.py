# SPDX-License-Identifier: MIT
"""Package and target descriptions produced by CMake."""
