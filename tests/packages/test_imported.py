# SPDX-License-Identifier: MIT
"""Tests for cmakepkg.packages.imported."""

from pathlib import Path

import pytest

from cmakepkg.core.resolver import ResolvedTarget
from cmakepkg.core.version import Version
from cmakepkg.packages.description import PackageDescription
from cmakepkg.packages.imported import ImportedTarget, link_name


@pytest.fixture
def resolved():
    return ResolvedTarget(
        name="foo",
        location="/usr/lib64/libfoo.so.5",
        compile_definitions=("FOO_SHARED",),
        compile_options=("-pthread",),
        include_directories=("/usr/include/foo",),
        link_directories=("/usr/lib64",),
        link_options=("-Wl,--as-needed",),
        link_libraries=("/usr/lib/libbar.so", "/usr/lib64/libfoo.so.5", "/opt/libbaz.a"),
    )


class TestLinkName:
    def test_shared_object(self, monkeypatch):
        monkeypatch.setattr("sys.platform", "linux")
        assert link_name("/usr/lib/libbar.so") == "bar"
        assert link_name("/usr/lib64/libfoo.so.5") == "foo"
        assert link_name("/usr/lib/libssl.so.3.0.2") == "ssl"

    def test_not_shared_object(self, monkeypatch):
        monkeypatch.setattr("sys.platform", "linux")
        assert link_name("/opt/libbaz.a") is None
        assert link_name("pthread") is None

    def test_windows(self, monkeypatch):
        monkeypatch.setattr("sys.platform", "win32")
        assert link_name("/usr/lib/libbar.so") is None


class TestImportedTarget:
    def test_compile_flags(self, resolved):
        target = ImportedTarget(resolved)
        assert target.compile_flags == ["-DFOO_SHARED", "-pthread", "-I/usr/include/foo"]

    def test_link_flags(self, resolved, monkeypatch):
        monkeypatch.setattr("sys.platform", "linux")
        target = ImportedTarget(resolved)
        assert target.link_flags == [
            "-L/usr/lib64",
            "-Wl,--as-needed",
            "-lbar",
            "-lfoo",
            "/opt/libbaz.a",
        ]

    def test_accessors(self, resolved):
        target = ImportedTarget(resolved)
        assert target.name == "foo"
        assert target.is_imported is True
        assert target.include_dirs == [Path("/usr/include/foo")]
        assert target.library_dirs == [Path("/usr/lib64")]
        assert target.defines == ["FOO_SHARED"]
        assert len(target.libraries) == 3

    def test_version_from_package(self, resolved):
        package = PackageDescription("Foo", Version(2, 1, 0), components=("Core",))
        target = ImportedTarget(resolved, package=package)

        assert target.version == "2.1.0"
        assert target.requested_components == ["Core"]
        assert repr(target) == "ImportedTarget('foo', version='2.1.0', components=['Core'])"

    def test_without_package(self, resolved):
        target = ImportedTarget(resolved)
        assert target.version == ""
        assert target.requested_components == []
        assert repr(target) == "ImportedTarget('foo', version='')"
