"""Option model: the validated set of user choices driving generation."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Framework(str, Enum):
    """Target UI framework. Only React can be generated today."""
    REACT = "react"
    VUE = "vue"
    ANGULAR = "angular"
    PLAIN = "plain"


class Screen(str, Enum):
    """Authentication screens the generated project can render.

    Declaration order is the canonical order used everywhere a list of
    screens is emitted.
    """
    LOGIN = "login"
    SIGNUP = "signup"
    PASSWORD_RESET = "password-reset"
    MFA = "mfa"
    PASSWORDLESS = "passwordless"
    PASSKEY = "passkey"


class UiLibrary(str, Enum):
    """UI component library bundled into the generated manifest."""
    NONE = "none"
    SHADCN = "shadcn"
    RADIX = "radix"
    CHAKRA = "chakra"
    MUI = "mui"
    MANTINE = "mantine"


SUPPORTED_FRAMEWORKS: frozenset[Framework] = frozenset({Framework.REACT})

DEFAULT_SCREENS: tuple[Screen, ...] = (
    Screen.LOGIN,
    Screen.SIGNUP,
    Screen.PASSWORD_RESET,
    Screen.PASSKEY,
)


def canonical_order(screens) -> list[Screen]:
    """Deduplicate *screens* and sort them in declaration order."""
    selected = {Screen(s) for s in screens}
    return [s for s in Screen if s in selected]


# ---------------------------------------------------------------------------
# Option model
# ---------------------------------------------------------------------------

class ProjectOptions(BaseModel):
    """Choices collected once per ``acul init`` invocation."""

    framework: Framework = Field(default=Framework.REACT, description="Target framework")
    screens: list[Screen] = Field(
        ..., min_length=1, description="Screens to generate (at least one)"
    )
    ui_library: UiLibrary = Field(default=UiLibrary.NONE, description="UI component library")
    local_dev: bool = Field(default=True, description="Enable mock-data local development")

    @field_validator("framework")
    @classmethod
    def _framework_supported(cls, value: Framework) -> Framework:
        if value not in SUPPORTED_FRAMEWORKS:
            raise ValueError(f"framework '{value.value}' is not available yet")
        return value

    @field_validator("screens")
    @classmethod
    def _screens_canonical(cls, value: list[Screen]) -> list[Screen]:
        ordered = canonical_order(value)
        if not ordered:
            raise ValueError("at least one screen must be selected")
        return ordered
