"""Main scaffolding orchestrator.

Takes a ``ProjectOptions`` and generates a complete ACUL project directory:
Vite + React screens for the selected authentication flows, Tailwind styling,
a mock ACUL context for local development, and the configuration that ties
each screen's HTML shell, entry script and bundle name together.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from acul_cli.config import Config

from .catalog import TemplateCatalog, TemplateKind
from .emitter import FileEmitter
from .errors import ProjectExistsError, ScaffoldError
from .manifest import build_manifest
from .options import ProjectOptions, UiLibrary
from .planner import plan_directories
from .screens import resolve_screens

StepCallback = Callable[[str], None]

DEV_INDEX_SCRIPT = "/src/index.jsx"
PAGE_TITLE = "Auth0 ACUL"


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


@dataclass
class ProjectTree:
    """What a composition produced on disk."""

    root: Path
    directories: list[Path] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)

    def relative_files(self) -> list[str]:
        """Return written files as POSIX paths relative to the root."""
        return [p.relative_to(self.root).as_posix() for p in self.files]

    def screen_directories(self) -> list[str]:
        """Return the slugs of the screen directories that were planned."""
        screens_root = self.root / "src" / "screens"
        return [p.name for p in self.directories if p.parent == screens_root]


# ---------------------------------------------------------------------------
# Composer
# ---------------------------------------------------------------------------


class ProjectComposer:
    """Generates an ACUL project from a validated option model.

    Steps run strictly in order and every write is awaited before the next
    begins.  Any failure aborts the remaining steps and leaves what was
    already written in place.
    """

    def __init__(
        self,
        options: ProjectOptions,
        config: Config | None = None,
        catalog: TemplateCatalog | None = None,
    ) -> None:
        self.options = options
        self.config = config or Config()
        self.catalog = catalog or TemplateCatalog()

    # -- Public API --------------------------------------------------------

    async def compose(
        self,
        project_name: str,
        on_step: StepCallback | None = None,
    ) -> ProjectTree:
        """Generate the complete project structure.

        Args:
            project_name: Name of the folder created inside
                ``config.output_dir``; also the npm package name.
            on_step: Optional callback receiving a short description before
                each step (used by the CLI spinner).

        Returns:
            The ``ProjectTree`` describing every directory and file written.

        Raises:
            ScaffoldError: If *project_name* is not a plain folder name.
            ProjectExistsError: If the target directory already exists.
            OSError: On any file-system failure.
        """
        report = on_step or (lambda _msg: None)
        project_name = validate_project_name(project_name)

        root = self.config.project_path(project_name)
        context = self._build_context(project_name)

        # 1. Create the root directory (never merge into an existing one)
        report("Creating project directory")
        await _create_root(root)
        emitter = FileEmitter(root)

        # 2. Create the planned directory structure
        report("Creating directory structure")
        await emitter.ensure_directories(plan_directories(self.options.screens))

        # 3. Package manifest
        report("Writing package.json")
        await self._emit(emitter, TemplateKind.CONFIG, "package", context)

        # 4. Build tool config, HTML shells, env file
        report("Writing Vite configuration")
        await self._emit_build_config(emitter, context)

        # 5. ACUL app config
        report("Writing ACUL configuration")
        await self._emit(emitter, TemplateKind.CONFIG, "acul", context)

        # 6. Styles and tooling config
        report("Writing style configuration")
        await self._emit_styles(emitter, context)

        # 7. UI library placeholder
        if self.options.ui_library != UiLibrary.NONE:
            report(f"Setting up {self.options.ui_library.value} UI library")
            await self._emit(emitter, TemplateKind.UI, "placeholder", context)

        # 8. Shared collaborators (must precede the screens importing them)
        report("Writing shared components")
        for key in self.catalog.keys(TemplateKind.SHARED):
            await self._emit(emitter, TemplateKind.SHARED, key, context)

        # 9. Screen bundles
        for screen in context["screens"]:
            report(f"Generating {screen.slug} screen")
            await self._emit(
                emitter, TemplateKind.SCREEN, screen.slug, {**context, "screen": screen}
            )

        # 10. README
        report("Writing README")
        await self._emit(emitter, TemplateKind.DOCS, "readme", context)

        return ProjectTree(
            root=root,
            directories=list(emitter.directories),
            files=list(emitter.written),
        )

    # -- Context building --------------------------------------------------

    def _build_context(self, project_name: str) -> dict[str, Any]:
        """Build the template context shared by every step."""
        screens = resolve_screens(self.options.screens)
        return {
            "project_name": project_name,
            "framework": self.options.framework.value,
            "ui_library": self.options.ui_library.value,
            "local_dev": self.options.local_dev,
            "screens": screens,
            "manifest": build_manifest(
                project_name, self.options.ui_library, self.config.sdk_version
            ),
            "mock_screens": {s.slug: s.mock_context() for s in screens},
            "dev_server_port": self.config.dev_server_port,
            "auth0_domain": self.config.auth0_domain,
            "auth0_client_id": self.config.auth0_client_id,
        }

    # -- Steps -------------------------------------------------------------

    async def _emit(
        self,
        emitter: FileEmitter,
        kind: TemplateKind,
        key: str,
        context: dict[str, Any],
    ) -> list[Path]:
        """Render a catalog bundle and write each file in order."""
        written: list[Path] = []
        for rendered in self.catalog.render(kind, key, context):
            written.append(await emitter.emit(rendered.path, rendered.content))
        return written

    async def _emit_build_config(
        self, emitter: FileEmitter, ctx: dict[str, Any]
    ) -> None:
        """Render vite.config.js, the HTML shells, .env and the logo."""
        await self._emit(emitter, TemplateKind.CONFIG, "vite", ctx)
        await self._emit(
            emitter,
            TemplateKind.SHELL,
            "index",
            {**ctx, "page_title": PAGE_TITLE, "entry_script": DEV_INDEX_SCRIPT},
        )
        for screen in ctx["screens"]:
            await self._emit(
                emitter,
                TemplateKind.SHELL,
                "screen",
                {
                    **ctx,
                    "screen": screen,
                    "page_title": f"{screen.title} | {PAGE_TITLE}",
                    "entry_script": screen.script_path,
                },
            )
        await self._emit(emitter, TemplateKind.CONFIG, "env", ctx)
        await self._emit(emitter, TemplateKind.SHELL, "logo", ctx)

    async def _emit_styles(self, emitter: FileEmitter, ctx: dict[str, Any]) -> None:
        """Render Tailwind/PostCSS config, stylesheets and lint config."""
        await self._emit(emitter, TemplateKind.CONFIG, "tailwind", ctx)
        for key in self.catalog.keys(TemplateKind.STYLE):
            await self._emit(emitter, TemplateKind.STYLE, key, ctx)
        await self._emit(emitter, TemplateKind.CONFIG, "lint", ctx)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def validate_project_name(name: str) -> str:
    """Reject names that would not create exactly one new child folder."""
    stripped = name.strip()
    if not stripped:
        raise ScaffoldError("Project name must not be empty")
    if stripped in (".", "..") or "/" in stripped or "\\" in stripped:
        raise ScaffoldError(
            f"Invalid project name '{name}': use a plain folder name"
        )
    return stripped


async def _create_root(root: Path) -> None:
    """Create *root*, refusing to reuse an existing directory."""
    try:
        await asyncio.to_thread(root.mkdir, parents=True, exist_ok=False)
    except FileExistsError:
        raise ProjectExistsError(root) from None
