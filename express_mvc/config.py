"""Express MVC scaffolder configuration.

Typed configuration for a scaffolding run.  Settings use a Pydantic v2 model
so they are validated at construction time and can be overridden from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_PROJECT_NAME = "my-express-app"

_TRUTHY = {"1", "true", "yes", "on"}


class ScaffoldConfig(BaseModel):
    """Global scaffolder configuration.

    Created once by the CLI entry point and passed to the generator.
    """

    default_project_name: str = Field(
        default=DEFAULT_PROJECT_NAME,
        description="Project name used when none is given on the command line",
    )
    output_dir: Path = Field(
        default=Path("."),
        description="Parent directory the project folder is created in",
    )
    package_manager: str = Field(
        default="npm", min_length=1, description="Executable that installs dependencies"
    )
    skip_install: bool = Field(
        default=False, description="Write the project but do not run the installer"
    )
    port: int = Field(
        default=3000, ge=1, le=65535, description="Fallback port written into the generated project"
    )

    def install_command(self) -> list[str]:
        """Return the argv used to install the generated project's dependencies."""
        return [self.package_manager, "install"]

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            EXPRESS_MVC_PROJECT_NAME, EXPRESS_MVC_OUTPUT_DIR,
            EXPRESS_MVC_PACKAGE_MANAGER, EXPRESS_MVC_SKIP_INSTALL,
            EXPRESS_MVC_PORT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("EXPRESS_MVC_PROJECT_NAME"):
            kwargs["default_project_name"] = os.environ["EXPRESS_MVC_PROJECT_NAME"]
        if os.environ.get("EXPRESS_MVC_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["EXPRESS_MVC_OUTPUT_DIR"])
        if os.environ.get("EXPRESS_MVC_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["EXPRESS_MVC_PACKAGE_MANAGER"]
        if os.environ.get("EXPRESS_MVC_PORT"):
            kwargs["port"] = os.environ["EXPRESS_MVC_PORT"]

        skip = os.environ.get("EXPRESS_MVC_SKIP_INSTALL", "")
        kwargs["skip_install"] = skip.strip().lower() in _TRUTHY

        return cls(**kwargs)
