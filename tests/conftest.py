"""Shared pytest fixtures for the acul-cli test suite.

Provides reusable fixtures for:
- Temporary output directories wired into a ``Config``
- Option models for the default and minimal screen selections
- A fully composed project on disk
"""

from __future__ import annotations

from pathlib import Path

import pytest

from acul_cli.config import Config
from acul_cli.scaffolder import ProjectComposer, ProjectOptions, ProjectTree, Screen, UiLibrary


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Directory in which generated projects are created (auto-cleanup)."""
    out = tmp_path / "workspace"
    out.mkdir()
    return out


@pytest.fixture
def config(output_dir: Path) -> Config:
    """A Config pointing at the temporary output directory."""
    return Config(output_dir=output_dir)


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

@pytest.fixture
def default_options() -> ProjectOptions:
    """The option set produced by accepting every prompt default."""
    return ProjectOptions(
        screens=[Screen.LOGIN, Screen.SIGNUP, Screen.PASSWORD_RESET, Screen.PASSKEY],
    )


@pytest.fixture
def all_screens_options() -> ProjectOptions:
    """Every screen, with a UI library and local development enabled."""
    return ProjectOptions(screens=list(Screen), ui_library=UiLibrary.MANTINE)


# ---------------------------------------------------------------------------
# Composed projects
# ---------------------------------------------------------------------------

@pytest.fixture
async def composed_project(default_options: ProjectOptions, config: Config) -> ProjectTree:
    """A project generated with the default options."""
    return await ProjectComposer(default_options, config).compose("my-acul-app")


@pytest.fixture
async def full_project(all_screens_options: ProjectOptions, config: Config) -> ProjectTree:
    """A project generated with every screen selected."""
    return await ProjectComposer(all_screens_options, config).compose("full-app")
