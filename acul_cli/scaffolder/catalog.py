"""Template catalog: every output file the scaffolder knows how to produce.

Templates are registered under a ``(TemplateKind, key)`` pair.  Each key maps
to a *bundle* of one or more :class:`TemplateEntry` records; global files are
single-entry bundles, while a screen bundle holds the screen's main component
followed by its auxiliary components.

An entry declares the context keys its template reads.  The catalog renders
each entry with only those keys, so a template can never silently depend on
an option it was not meant to see.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import TemplateContextError, UnknownTemplateError
from .screens import SCREEN_DEFINITIONS, ScreenDefinition
from .templates import TemplateRenderer


class TemplateKind(str, Enum):
    """Groups of templates, emitted at different composer steps."""
    CONFIG = "config"
    SHELL = "shell"
    STYLE = "style"
    UI = "ui"
    SHARED = "shared"
    SCREEN = "screen"
    DOCS = "docs"


@dataclass(frozen=True)
class TemplateEntry:
    """One template and where its rendered output lives.

    ``output`` is relative to the project root and may contain a ``{slug}``
    placeholder, filled from the ``screen`` context value.
    """

    template: str
    output: str
    params: tuple[str, ...] = ()


@dataclass(frozen=True)
class RenderedFile:
    """Rendered text paired with its project-relative output path."""

    path: str
    content: str


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

# Auxiliary components rendered from one template into several screens.
_SHARED_PARTS: frozenset[str] = frozenset({"SocialLogins"})


def _screen_bundle(definition: ScreenDefinition) -> tuple[TemplateEntry, ...]:
    entries = [
        TemplateEntry(
            f"screens/{definition.slug}/index.jsx.j2",
            "src/screens/{slug}/index.jsx",
            ("screen",),
        )
    ]
    for part in definition.parts:
        folder = "_shared" if part in _SHARED_PARTS else definition.slug
        entries.append(
            TemplateEntry(
                f"screens/{folder}/{part}.jsx.j2",
                f"src/screens/{{slug}}/{part}.jsx",
                ("screen",),
            )
        )
    return tuple(entries)


_CATALOG: dict[TemplateKind, dict[str, tuple[TemplateEntry, ...]]] = {
    TemplateKind.CONFIG: {
        "package": (
            TemplateEntry("package.json.j2", "package.json", ("manifest",)),
        ),
        "vite": (
            TemplateEntry(
                "vite.config.js.j2", "vite.config.js", ("screens", "dev_server_port")
            ),
        ),
        "env": (
            TemplateEntry(
                "env.j2", ".env", ("local_dev", "auth0_domain", "auth0_client_id")
            ),
        ),
        "acul": (
            TemplateEntry("acul.config.js.j2", "acul.config.js", ("screens", "local_dev")),
        ),
        "tailwind": (
            TemplateEntry("tailwind.config.js.j2", "tailwind.config.js"),
            TemplateEntry("postcss.config.js.j2", "postcss.config.js"),
        ),
        "lint": (
            TemplateEntry("eslintrc.cjs.j2", ".eslintrc.cjs"),
            TemplateEntry("prettierrc.json.j2", ".prettierrc.json"),
        ),
    },
    TemplateKind.SHELL: {
        "index": (
            TemplateEntry("index.html.j2", "index.html", ("page_title", "entry_script")),
        ),
        "screen": (
            TemplateEntry("index.html.j2", "{slug}.html", ("page_title", "entry_script")),
        ),
        "logo": (
            TemplateEntry("acul-logo.svg.j2", "public/acul-logo.svg"),
        ),
    },
    TemplateKind.STYLE: {
        "tailwind": (
            TemplateEntry("styles/tailwind.css.j2", "src/styles/tailwind.css"),
        ),
        "basic": (
            TemplateEntry("styles/basic.css.j2", "src/styles/basic.css"),
        ),
    },
    TemplateKind.UI: {
        "placeholder": (
            TemplateEntry("ui/README.md.j2", "src/ui/README.md", ("ui_library",)),
        ),
    },
    TemplateKind.SHARED: {
        "debug-panel": (
            TemplateEntry("components/DebugPanel.jsx.j2", "src/components/DebugPanel.jsx"),
        ),
        "auth-utils": (
            TemplateEntry("utils/auth-utils.js.j2", "src/utils/auth-utils.js"),
        ),
        "mock-service": (
            TemplateEntry(
                "utils/mock-acul-service.js.j2",
                "src/utils/mock-acul-service.js",
                ("mock_screens", "auth0_domain", "auth0_client_id"),
            ),
        ),
        "dev-index": (
            TemplateEntry("index.jsx.j2", "src/index.jsx", ("screens",)),
        ),
    },
    TemplateKind.SCREEN: {
        definition.slug: _screen_bundle(definition)
        for definition in SCREEN_DEFINITIONS.values()
    },
    TemplateKind.DOCS: {
        "readme": (
            TemplateEntry(
                "README.md.j2",
                "README.md",
                ("project_name", "screens", "ui_library", "local_dev", "dev_server_port"),
            ),
        ),
    },
}


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class TemplateCatalog:
    """Looks up and renders template bundles."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def keys(self, kind: TemplateKind) -> list[str]:
        """Return the registered keys for *kind* in registration order."""
        return list(_CATALOG[TemplateKind(kind)])

    def bundle(self, kind: TemplateKind, key: str) -> tuple[TemplateEntry, ...]:
        """Return the entries registered under ``(kind, key)``.

        Raises:
            UnknownTemplateError: If nothing is registered for the pair.
        """
        try:
            return _CATALOG[TemplateKind(kind)][key]
        except (KeyError, ValueError):
            raise UnknownTemplateError(getattr(kind, "value", str(kind)), key) from None

    def render(
        self,
        kind: TemplateKind,
        key: str,
        context: dict[str, Any],
    ) -> list[RenderedFile]:
        """Render every entry of a bundle.

        Args:
            kind: Template group.
            key: Global key (``"vite"``) or screen slug (``"login-id"``).
            context: Superset of values; each entry only sees the keys it
                declares.

        Returns:
            Rendered files in bundle order.

        Raises:
            UnknownTemplateError: If ``(kind, key)`` is not registered.
            TemplateContextError: If *context* lacks a declared parameter.
        """
        return [self.render_entry(entry, context) for entry in self.bundle(kind, key)]

    def render_entry(self, entry: TemplateEntry, context: dict[str, Any]) -> RenderedFile:
        """Render a single entry and resolve its output path."""
        missing = [p for p in entry.params if p not in context]
        if missing:
            raise TemplateContextError(entry.template, missing)

        params = {p: context[p] for p in entry.params}
        content = self.renderer.render(entry.template, params)
        return RenderedFile(path=_output_path(entry, context), content=content)


def _output_path(entry: TemplateEntry, context: dict[str, Any]) -> str:
    if "{slug}" not in entry.output:
        return entry.output
    screen = context.get("screen")
    if screen is None:
        raise TemplateContextError(entry.template, ["screen"])
    return entry.output.format(slug=screen.slug)
