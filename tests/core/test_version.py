# SPDX-License-Identifier: MIT
"""Tests for cmakepkg.core.version."""

import pytest

from cmakepkg.core.errors import InvalidVersionError, VersionTooOldError
from cmakepkg.core.version import Version, compare, require_version


class TestVersionParse:
    def test_three_components(self):
        assert Version.parse("1.2.3") == Version(1, 2, 3)

    def test_missing_components_default_to_zero(self):
        assert Version.parse("1.2") == Version(1, 2, 0)
        assert Version.parse("1") == Version(1, 0, 0)

    @pytest.mark.parametrize(
        "value", ["", "1.2.3.4", "a.b.c", "1..2", "1.2.", "-1.0", " 1.2", "1.x"]
    )
    def test_invalid(self, value):
        with pytest.raises(InvalidVersionError) as excinfo:
            Version.parse(value)
        assert excinfo.value.value == value

    def test_invalid_is_value_error(self):
        """Callers can treat a bad version like any other bad value."""
        with pytest.raises(ValueError):
            Version.parse("not-a-version")


class TestVersionOrdering:
    def test_less_than(self):
        v1 = Version(1, 0, 0)
        v2 = Version(1, 1, 0)
        v3 = Version(1, 1, 1)

        assert v1 < v2
        assert v2 < v3
        assert v1 < v3
        assert v3 > v2
        assert v3 > v1

    def test_lexicographic_not_componentwise(self):
        """2.0.0 is newer than 1.9.9 even though minor and patch are lower."""
        assert Version(2, 0, 0) > Version(1, 9, 9)
        assert Version(2, 0, 0) >= Version(1, 9, 9)
        assert Version(1, 9, 9) <= Version(2, 0, 0)

    def test_equality(self):
        assert Version(1, 0, 0) == Version.parse("1")
        assert Version(1, 0, 0) != Version(1, 1, 0)

    def test_compare(self):
        assert compare(Version(1, 2, 3), Version(1, 2, 4)) == -1
        assert compare(Version(1, 2, 3), Version(1, 2, 3)) == 0
        assert compare(Version(3, 0, 0), Version(2, 99, 99)) == 1

    def test_sorting(self):
        versions = [Version.parse(v) for v in ["3.19", "3.2", "3.19.1", "2"]]
        assert [str(v) for v in sorted(versions)] == [
            "2.0.0",
            "3.2.0",
            "3.19.0",
            "3.19.1",
        ]


class TestVersionString:
    def test_str(self):
        assert str(Version(1, 2, 3)) == "1.2.3"

    @pytest.mark.parametrize("value", ["7", "7.1", "7.1.2"])
    def test_always_three_components(self, value):
        parts = str(Version.parse(value)).split(".")
        assert len(parts) == 3
        assert all(p.isdigit() for p in parts)

    def test_short_form_renders_full(self):
        assert str(Version.parse("1.2")) == "1.2.0"


class TestRequireVersion:
    def test_new_enough(self):
        require_version(Version(3, 0, 2), Version(1, 0, 0))
        require_version(Version(1, 0, 0), Version(1, 0, 0))

    def test_too_old(self):
        with pytest.raises(VersionTooOldError, match="1.1.1 is older than") as excinfo:
            require_version(Version(1, 1, 1), Version(3, 0, 0))
        assert excinfo.value.found == Version(1, 1, 1)
        assert excinfo.value.minimum == Version(3, 0, 0)
