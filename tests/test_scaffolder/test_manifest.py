"""Tests for package.json generation."""

from __future__ import annotations

import pytest

from acul_cli.scaffolder.manifest import (
    BASE_DEPENDENCIES,
    HOST_SDK_PACKAGE,
    UI_LIBRARY_DEPENDENCIES,
    build_manifest,
    ui_library_dependencies,
)
from acul_cli.scaffolder.options import UiLibrary


pytestmark = pytest.mark.unit


class TestBuildManifest:
    def test_shape(self):
        manifest = build_manifest("my-app", UiLibrary.NONE, "^1.0.0")
        assert manifest["name"] == "my-app"
        assert manifest["private"] is True
        assert manifest["type"] == "module"
        assert list(manifest) == [
            "name",
            "version",
            "private",
            "type",
            "scripts",
            "dependencies",
            "devDependencies",
        ]

    def test_scripts(self):
        scripts = build_manifest("a", "none", "^1")["scripts"]
        assert scripts["acul:dev"] == "vite --mode acul-dev"
        assert scripts["build"] == "vite build"
        assert scripts["dev"] == "vite"

    def test_no_ui_library(self):
        deps = build_manifest("a", UiLibrary.NONE, "^1.0.0")["dependencies"]
        assert deps == {**BASE_DEPENDENCIES, HOST_SDK_PACKAGE: "^1.0.0"}

    def test_mantine_adds_exactly_mantine_packages(self):
        deps = build_manifest("a", UiLibrary.MANTINE, "^1.0.0")["dependencies"]
        extra = set(deps) - set(BASE_DEPENDENCIES) - {HOST_SDK_PACKAGE}
        assert extra == {"@mantine/core", "@mantine/hooks", "@mantine/form"}

    @pytest.mark.parametrize("library", list(UiLibrary))
    def test_every_library_merges_its_bundle(self, library):
        deps = build_manifest("a", library, "^1.0.0")["dependencies"]
        for name, version in UI_LIBRARY_DEPENDENCIES[library].items():
            assert deps[name] == version

    def test_ui_library_dependencies_returns_copy(self):
        deps = ui_library_dependencies("chakra")
        deps["left-pad"] = "1.0.0"
        assert "left-pad" not in UI_LIBRARY_DEPENDENCIES[UiLibrary.CHAKRA]
