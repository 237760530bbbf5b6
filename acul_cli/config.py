"""ACUL CLI configuration.

Typed settings for the scaffolder.  All values have sensible defaults so the
CLI works with no configuration at all; ``Config.from_env`` lets CI jobs and
power users override them without extra flags.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


DEFAULT_SDK_VERSION = "^0.1.0-beta.4"


class Config(BaseModel):
    """Global ACUL CLI configuration.

    Instances are created once by the CLI entry point and passed to the
    project composer.
    """

    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory in which new project folders are created",
    )
    dev_server_port: int = Field(
        default=8080, ge=1024, le=65535, description="Vite dev server port"
    )
    auth0_domain: str = Field(
        default="your-tenant.auth0.com",
        description="Placeholder tenant domain written to the generated .env",
    )
    auth0_client_id: str = Field(
        default="your-client-id",
        description="Placeholder client id written to the generated .env",
    )
    sdk_version: str = Field(
        default=DEFAULT_SDK_VERSION,
        description="Version range of @auth0/auth0-acul-js in the generated manifest",
    )

    def project_path(self, project_name: str) -> Path:
        """Return the directory a project called *project_name* is created in."""
        return self.output_dir / project_name

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            ACUL_OUTPUT_DIR, ACUL_DEV_SERVER_PORT, ACUL_AUTH0_DOMAIN,
            ACUL_AUTH0_CLIENT_ID, ACUL_SDK_VERSION.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("ACUL_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["ACUL_OUTPUT_DIR"])
        if os.environ.get("ACUL_DEV_SERVER_PORT"):
            kwargs["dev_server_port"] = int(os.environ["ACUL_DEV_SERVER_PORT"])
        if os.environ.get("ACUL_AUTH0_DOMAIN"):
            kwargs["auth0_domain"] = os.environ["ACUL_AUTH0_DOMAIN"]
        if os.environ.get("ACUL_AUTH0_CLIENT_ID"):
            kwargs["auth0_client_id"] = os.environ["ACUL_AUTH0_CLIENT_ID"]
        if os.environ.get("ACUL_SDK_VERSION"):
            kwargs["sdk_version"] = os.environ["ACUL_SDK_VERSION"]
        return cls(**kwargs)
