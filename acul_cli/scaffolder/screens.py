"""Fixed descriptors for every authentication screen.

Each :class:`ScreenDefinition` is the single source of a screen's slug and the
names derived from it (HTML shell, entry script, bundle file names, component
directory).  Every template that references a screen receives these
descriptors, so the build input map, the HTML shells, the app config and the
screen directories cannot drift apart.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .options import Screen, canonical_order


@dataclass(frozen=True)
class ScreenDefinition:
    """Everything the templates need to know about one screen."""

    screen: Screen
    slug: str
    component: str
    title: str
    label: str
    parts: tuple[str, ...] = ()
    api_methods: tuple[str, ...] = ()
    mock_data: dict[str, Any] = field(default_factory=dict)

    @property
    def html_file(self) -> str:
        return f"{self.slug}.html"

    @property
    def directory(self) -> str:
        return f"src/screens/{self.slug}"

    @property
    def script_path(self) -> str:
        """Absolute (site-root) path of the screen entry module."""
        return f"/{self.directory}/index.jsx"

    @property
    def js_file(self) -> str:
        return f"{self.slug}.js"

    @property
    def css_file(self) -> str:
        return f"{self.slug}.css"

    def mock_context(self) -> dict[str, Any]:
        """Canned data served by the generated mock ACUL service."""
        return {"data": self.mock_data, "methods": list(self.api_methods)}


_SOCIAL_PROVIDERS = ["google", "facebook", "apple"]

SCREEN_DEFINITIONS: dict[Screen, ScreenDefinition] = {
    Screen.LOGIN: ScreenDefinition(
        screen=Screen.LOGIN,
        slug="login-id",
        component="LoginIdScreen",
        title="Log In",
        label="Login Screen",
        parts=("LoginForm", "SocialLogins"),
        api_methods=("continueWithEmail", "continueWithProvider"),
        mock_data={
            "alternateLoginMethods": _SOCIAL_PROVIDERS,
            "passkey": {"public_key": {"challenge": "mock-challenge-string"}},
        },
    ),
    Screen.SIGNUP: ScreenDefinition(
        screen=Screen.SIGNUP,
        slug="signup-id",
        component="SignupIdScreen",
        title="Sign Up",
        label="Signup Screen",
        parts=("SignupForm", "SocialLogins"),
        api_methods=("continueWithSignup", "continueWithProvider"),
        mock_data={
            "alternateLoginMethods": _SOCIAL_PROVIDERS,
            "supportedFields": ["email", "password", "name"],
        },
    ),
    Screen.PASSWORD_RESET: ScreenDefinition(
        screen=Screen.PASSWORD_RESET,
        slug="password-reset",
        component="PasswordResetScreen",
        title="Reset Your Password",
        label="Password Reset Screen",
        parts=("ResetForm",),
        api_methods=("resetPassword",),
        mock_data={"email": "user@example.com"},
    ),
    Screen.MFA: ScreenDefinition(
        screen=Screen.MFA,
        slug="mfa",
        component="MfaScreen",
        title="Verify Your Identity",
        label="MFA Screen",
        parts=("OtpForm",),
        api_methods=("verifyCode", "resendCode"),
        mock_data={"factor": "otp", "codeLength": 6, "phoneNumber": "+1 ***-***-1234"},
    ),
    Screen.PASSWORDLESS: ScreenDefinition(
        screen=Screen.PASSWORDLESS,
        slug="passwordless",
        component="PasswordlessScreen",
        title="Sign In Without a Password",
        label="Passwordless Screen",
        parts=("PasswordlessForm",),
        api_methods=("sendMagicLink",),
        mock_data={"connection": "email", "deliveryMethods": ["link", "code"]},
    ),
    Screen.PASSKEY: ScreenDefinition(
        screen=Screen.PASSKEY,
        slug="passkey-enrollment",
        component="PasskeyEnrollmentScreen",
        title="Set Up Passkey",
        label="Passkey Enrollment Screen",
        parts=("PasskeyForm",),
        api_methods=("enrollPasskey", "skipPasskey"),
        mock_data={
            "user": {"email": "user@example.com"},
            "passkey": {"public_key": {"challenge": "mock-enrollment-challenge"}},
        },
    ),
}


def screen_slug(screen: Screen | str) -> str:
    """Return the canonical directory slug for *screen*."""
    return SCREEN_DEFINITIONS[Screen(screen)].slug


def resolve_screens(screens) -> list[ScreenDefinition]:
    """Return the descriptors for *screens* in canonical order."""
    return [SCREEN_DEFINITIONS[s] for s in canonical_order(screens)]
