"""ACUL project scaffolder -- generates Auth0 ACUL screen projects.

This package turns a ``ProjectOptions`` into a ready-to-run Vite + React
project whose screens are loaded by the Auth0 Universal Login host.

Quick usage::

    from acul_cli.scaffolder import ProjectComposer, ProjectOptions

    options = ProjectOptions(screens=["login", "passkey"], ui_library="mantine")
    tree = await ProjectComposer(options).compose("my-acul-app")
"""

from acul_cli.scaffolder.catalog import TemplateCatalog, TemplateKind
from acul_cli.scaffolder.composer import ProjectComposer, ProjectTree
from acul_cli.scaffolder.errors import ProjectExistsError, ScaffoldError
from acul_cli.scaffolder.options import Framework, ProjectOptions, Screen, UiLibrary
from acul_cli.scaffolder.planner import plan_directories
from acul_cli.scaffolder.templates import TemplateRenderer

__all__ = [
    "Framework",
    "ProjectComposer",
    "ProjectExistsError",
    "ProjectOptions",
    "ProjectTree",
    "ScaffoldError",
    "Screen",
    "TemplateCatalog",
    "TemplateKind",
    "TemplateRenderer",
    "UiLibrary",
    "plan_directories",
]
