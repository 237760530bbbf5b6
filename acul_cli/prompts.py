"""Interactive option collection for ``acul init``.

Four questions are asked in a fixed order (framework, screens, UI library,
local development) and the answers are returned as a validated
:class:`~acul_cli.scaffolder.options.ProjectOptions`.
"""

from __future__ import annotations

import re
from typing import TextIO

from rich.console import Console
from rich.prompt import Confirm, InvalidResponse, Prompt, PromptBase
from rich.table import Table
from rich.text import Text

from acul_cli.scaffolder.options import (
    DEFAULT_SCREENS,
    SUPPORTED_FRAMEWORKS,
    Framework,
    ProjectOptions,
    Screen,
    UiLibrary,
)
from acul_cli.scaffolder.screens import SCREEN_DEFINITIONS, screen_slug
from acul_cli.utils import console as default_console

NO_SCREEN_MESSAGE = "You must choose at least one screen."

_FRAMEWORK_LABELS: dict[Framework, str] = {
    Framework.REACT: "React",
    Framework.VUE: "Vue",
    Framework.ANGULAR: "Angular",
    Framework.PLAIN: "Plain JavaScript",
}

_UI_LIBRARY_LABELS: dict[UiLibrary, str] = {
    UiLibrary.NONE: "None",
    UiLibrary.SHADCN: "shadcn/ui",
    UiLibrary.RADIX: "Radix UI",
    UiLibrary.CHAKRA: "Chakra UI",
    UiLibrary.MUI: "Material UI",
    UiLibrary.MANTINE: "Mantine",
}


# ---------------------------------------------------------------------------
# Screen selection
# ---------------------------------------------------------------------------


def parse_screen_selection(value: str) -> list[Screen]:
    """Parse a comma or space separated list of screens.

    Each token may be a 1-based position in the screen menu, a screen name
    (``passkey``) or a screen slug (``passkey-enrollment``).

    Raises:
        InvalidResponse: On an unknown token or an empty selection.
    """
    menu = list(Screen)
    by_name = {s.value: s for s in menu}
    by_name.update({screen_slug(s): s for s in menu})

    selected: list[Screen] = []
    for token in re.split(r"[,\s]+", value.strip().lower()):
        if not token:
            continue
        if token.isdigit():
            index = int(token)
            if not 1 <= index <= len(menu):
                raise InvalidResponse(
                    f"[prompt.invalid]Choose a number between 1 and {len(menu)}"
                )
            screen = menu[index - 1]
        elif token in by_name:
            screen = by_name[token]
        else:
            raise InvalidResponse(f"[prompt.invalid]Unknown screen '{token}'")
        if screen not in selected:
            selected.append(screen)

    if not selected:
        raise InvalidResponse(f"[prompt.invalid]{NO_SCREEN_MESSAGE}")
    return selected


class ScreenPrompt(PromptBase[list]):
    """Multi-select prompt returning a non-empty list of screens."""

    response_type = list

    def render_default(self, default: list[Screen]) -> Text:
        return Text(f"({', '.join(s.value for s in default)})", "prompt.default")

    def process_response(self, value: str) -> list[Screen]:
        return parse_screen_selection(value)


# ---------------------------------------------------------------------------
# Prompt flow
# ---------------------------------------------------------------------------


def _print_menu(console: Console, title: str, rows: list[tuple[str, str]]) -> None:
    table = Table(title=title, show_header=False, box=None, padding=(0, 2))
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Option")
    for number, label in rows:
        table.add_row(number, label)
    console.print(table)


def collect_options(
    console: Console | None = None,
    stream: TextIO | None = None,
) -> ProjectOptions:
    """Ask the four init questions and return the validated options.

    Args:
        console: Console used for menus and prompts (defaults to the shared
            ``acul_cli.utils.console``).
        stream: Optional file to read answers from instead of stdin.

    Raises:
        KeyboardInterrupt: If the user aborts a prompt.
    """
    console = console or default_console

    # 1. Framework (only supported frameworks are selectable)
    _print_menu(
        console,
        "Frameworks",
        [
            (
                f.value,
                _FRAMEWORK_LABELS[f]
                if f in SUPPORTED_FRAMEWORKS
                else f"[dim]{_FRAMEWORK_LABELS[f]} (coming soon)[/dim]",
            )
            for f in Framework
        ],
    )
    framework = Prompt.ask(
        "Which framework would you like to use?",
        console=console,
        choices=[f.value for f in Framework if f in SUPPORTED_FRAMEWORKS],
        default=Framework.REACT.value,
        stream=stream,
    )

    # 2. Screens (multi-select, at least one)
    _print_menu(
        console,
        "Screens",
        [
            (str(i), f"{SCREEN_DEFINITIONS[s].label} [dim]({s.value})[/dim]")
            for i, s in enumerate(Screen, start=1)
        ],
    )
    screens = ScreenPrompt.ask(
        "Which screens would you like to include? (comma separated)",
        console=console,
        default=list(DEFAULT_SCREENS),
        stream=stream,
    )

    # 3. UI library
    _print_menu(
        console,
        "UI libraries",
        [(lib.value, _UI_LIBRARY_LABELS[lib]) for lib in UiLibrary],
    )
    ui_library = Prompt.ask(
        "Which UI library would you like to use?",
        console=console,
        choices=[lib.value for lib in UiLibrary],
        default=UiLibrary.NONE.value,
        stream=stream,
    )

    # 4. Local development with mock data
    local_dev = Confirm.ask(
        "Enable local development with mock data?",
        console=console,
        default=True,
        stream=stream,
    )

    return ProjectOptions(
        framework=framework,
        screens=screens,
        ui_library=ui_library,
        local_dev=local_dev,
    )
