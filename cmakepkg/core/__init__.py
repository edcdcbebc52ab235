# SPDX-License-Identifier: MIT
"""Core model: versions, build configurations, targets and resolution."""
