"""Exceptions raised by the scaffolder."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every scaffolding failure reported to the user."""


class ProjectExistsError(ScaffoldError):
    """Raised when the target project directory is already present."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"The directory {path.name} already exists. Please choose a "
            "different name or delete the existing directory."
        )


class UnknownTemplateError(ScaffoldError, KeyError):
    """Raised when the catalog has no bundle for a ``(kind, key)`` pair."""

    def __init__(self, kind: str, key: str) -> None:
        self.kind = kind
        self.key = key
        super().__init__(f"No template registered for {kind}:{key}")

    def __str__(self) -> str:
        return str(self.args[0])


class TemplateContextError(ScaffoldError):
    """Raised when a template is rendered without a parameter it declares."""

    def __init__(self, template: str, missing: list[str]) -> None:
        self.template = template
        self.missing = missing
        super().__init__(
            f"Template {template} is missing context: {', '.join(missing)}"
        )
