# SPDX-License-Identifier: MIT
"""Tests for cmakepkg.core.target."""

import dataclasses

import pytest

from cmakepkg.core.build_type import BuildConfiguration
from cmakepkg.core.target import ImportLibrary, Location, Target


class TestArtifactLocator:
    def test_base_path(self):
        loc = Location("/x")
        for config in BuildConfiguration:
            assert loc.resolve(config) == "/x"

    def test_override(self):
        loc = Location("/x", {BuildConfiguration.Debug: "/x/dbg"})
        assert loc.resolve(BuildConfiguration.Debug) == "/x/dbg"
        assert loc.resolve(BuildConfiguration.Release) == "/x"

    def test_override_without_base(self):
        loc = Location(overrides={BuildConfiguration.Release: "/rel.so"})
        assert loc.resolve(BuildConfiguration.Release) == "/rel.so"
        assert loc.resolve(BuildConfiguration.Debug) is None

    def test_empty(self):
        assert Location().resolve(BuildConfiguration.MinSizeRel) is None

    def test_property_names(self):
        assert Location.property_name == "LOCATION"
        assert ImportLibrary.property_name == "IMPORTED_IMPLIB"
        assert Location.config_property(BuildConfiguration.Debug) == "LOCATION_Debug"
        assert (
            ImportLibrary.config_property(BuildConfiguration.RelWithDebInfo)
            == "IMPORTED_IMPLIB_RelWithDebInfo"
        )

    def test_overrides_copied(self):
        """Changing the mapping passed in does not change the locator."""
        overrides = {BuildConfiguration.Debug: "/d"}
        loc = Location("/x", overrides)

        overrides[BuildConfiguration.Debug] = "/changed"
        overrides[BuildConfiguration.Release] = "/changed"

        assert loc.resolve(BuildConfiguration.Debug) == "/d"
        assert loc.resolve(BuildConfiguration.Release) == "/x"

    def test_overrides_normalized(self):
        a = Location(
            "/x",
            {BuildConfiguration.Release: "/r", BuildConfiguration.Debug: "/d"},
        )
        b = Location(
            "/x",
            [(BuildConfiguration.Debug, "/d"), (BuildConfiguration.Release, "/r")],
        )
        assert a == b
        assert a.overrides == (
            (BuildConfiguration.Debug, "/d"),
            (BuildConfiguration.Release, "/r"),
        )

    def test_hashable(self):
        loc = Location("/x", {BuildConfiguration.Debug: "/d"})
        assert hash(loc) == hash(Location("/x", {BuildConfiguration.Debug: "/d"}))
        assert len({loc, Location("/x", {BuildConfiguration.Debug: "/d"})}) == 1

    def test_variants_not_equal(self):
        assert Location("/a.lib") != ImportLibrary("/a.lib")


class TestTarget:
    def test_creation(self):
        target = Target("mylib")
        assert target.name == "mylib"
        assert target.interface_compile_definitions == ()
        assert target.interface_link_libraries == ()
        assert target.location_for(BuildConfiguration.Debug) is None

    def test_lists_stored_as_tuples(self):
        target = Target("mylib", interface_include_directories=["/inc"])
        assert target.interface_include_directories == ("/inc",)

    def test_immutable(self):
        target = Target("mylib")
        with pytest.raises(dataclasses.FrozenInstanceError):
            target.name = "other"

    def test_hashable(self):
        dep = Target("dep", artifact=Location("/dep.so"))
        target = Target(
            "mylib",
            artifact=Location("/x", {BuildConfiguration.Debug: "/x/dbg"}),
            interface_link_libraries=["m", dep],
        )
        assert isinstance(hash(target), int)

    def test_location_for(self):
        target = Target(
            "mylib",
            artifact=Location("/x", {BuildConfiguration.Debug: "/x/dbg"}),
        )
        assert target.location_for(BuildConfiguration.Debug) == "/x/dbg"
        assert target.location_for(BuildConfiguration.Release) == "/x"

    def test_dependencies(self):
        dep1 = Target("dep1")
        dep2 = Target("dep2")
        target = Target("mylib", interface_link_libraries=["m", dep1, "pthread", dep2])

        assert target.dependencies == [dep1, dep2]

    def test_repr(self):
        target = Target("app", interface_link_libraries=[Target("lib"), "m"])
        assert repr(target) == "Target('app', deps=[lib])"
