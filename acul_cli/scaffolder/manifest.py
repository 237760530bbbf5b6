"""``package.json`` generation for ACUL projects.

The manifest is assembled as a plain dict and serialised by the template
catalog, so dependency selection stays data rather than string surgery.
"""

from __future__ import annotations

from typing import Any

from .options import UiLibrary

HOST_SDK_PACKAGE = "@auth0/auth0-acul-js"

BASE_DEPENDENCIES: dict[str, str] = {
    "react": "^18.2.0",
    "react-dom": "^18.2.0",
}

DEV_DEPENDENCIES: dict[str, str] = {
    "@types/react": "^18.0.37",
    "@types/react-dom": "^18.0.11",
    "@vitejs/plugin-react": "^4.0.0",
    "autoprefixer": "^10.4.14",
    "eslint": "^8.38.0",
    "eslint-plugin-react": "^7.32.2",
    "eslint-plugin-react-hooks": "^4.6.0",
    "eslint-plugin-react-refresh": "^0.3.4",
    "postcss": "^8.4.24",
    "prettier": "^2.8.7",
    "tailwindcss": "^3.3.2",
    "vite": "^4.3.9",
}

SCRIPTS: dict[str, str] = {
    "dev": "vite",
    "acul:dev": "vite --mode acul-dev",
    "build": "vite build",
    "preview": "vite preview",
    "lint": "eslint src --ext js,jsx --report-unused-disable-directives --max-warnings 0",
}

UI_LIBRARY_DEPENDENCIES: dict[UiLibrary, dict[str, str]] = {
    UiLibrary.NONE: {},
    UiLibrary.SHADCN: {
        "class-variance-authority": "^0.6.0",
        "clsx": "^1.2.1",
        "tailwind-merge": "^1.13.0",
        "@radix-ui/react-dialog": "^1.0.4",
        "@radix-ui/react-slot": "^1.0.2",
        "@radix-ui/react-label": "^2.0.2",
        "@radix-ui/react-checkbox": "^1.0.4",
    },
    UiLibrary.RADIX: {
        "@radix-ui/react-dialog": "^1.0.4",
        "@radix-ui/react-form": "^0.0.3",
        "@radix-ui/react-label": "^2.0.2",
        "@radix-ui/react-checkbox": "^1.0.4",
        "@radix-ui/react-slot": "^1.0.2",
    },
    UiLibrary.CHAKRA: {
        "@chakra-ui/react": "^2.8.0",
        "@emotion/react": "^11.11.0",
        "@emotion/styled": "^11.11.0",
        "framer-motion": "^10.12.16",
    },
    UiLibrary.MUI: {
        "@mui/material": "^5.13.5",
        "@mui/icons-material": "^5.11.16",
        "@emotion/react": "^11.11.0",
        "@emotion/styled": "^11.11.0",
    },
    UiLibrary.MANTINE: {
        "@mantine/core": "^6.0.13",
        "@mantine/hooks": "^6.0.13",
        "@mantine/form": "^6.0.13",
    },
}


def ui_library_dependencies(ui_library: UiLibrary | str) -> dict[str, str]:
    """Return a copy of the extra dependencies for *ui_library*."""
    return dict(UI_LIBRARY_DEPENDENCIES[UiLibrary(ui_library)])


def build_manifest(
    project_name: str,
    ui_library: UiLibrary | str,
    sdk_version: str,
) -> dict[str, Any]:
    """Build the ``package.json`` payload for a generated project.

    Args:
        project_name: Used verbatim as the npm package name.
        ui_library: Selected UI library; its bundle is merged into
            ``dependencies``.
        sdk_version: Version range of the ACUL host SDK.

    Returns:
        A JSON-serialisable dict with keys in npm's conventional order.
    """
    dependencies = {
        **BASE_DEPENDENCIES,
        HOST_SDK_PACKAGE: sdk_version,
        **ui_library_dependencies(ui_library),
    }
    return {
        "name": project_name,
        "version": "0.1.0",
        "private": True,
        "type": "module",
        "scripts": dict(SCRIPTS),
        "dependencies": dependencies,
        "devDependencies": dict(DEV_DEPENDENCIES),
    }
