"""Directory planning for a generated project."""

from __future__ import annotations

from .options import Screen
from .screens import resolve_screens

BASE_DIRECTORIES: tuple[str, ...] = (
    "src/screens",
    "src/components",
    "src/hooks",
    "src/utils",
    "src/styles",
    "public",
)


def plan_directories(screens: list[Screen] | set[Screen]) -> list[str]:
    """Return every directory that must exist before any file is written.

    The fixed base directories come first, followed by one directory per
    selected screen in canonical order.  The result never contains
    duplicates and does not depend on the order *screens* were selected in.
    """
    dirs = list(BASE_DIRECTORIES)
    for definition in resolve_screens(screens):
        if definition.directory not in dirs:
            dirs.append(definition.directory)
    return dirs
