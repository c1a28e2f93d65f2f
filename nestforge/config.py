"""nestforge configuration.

Centralised, typed settings for the CLI.  All settings use Pydantic v2 models
so they are validated at construction time and can be read from JSON or
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class BinaryConfig(BaseModel):
    """Executables invoked by the runners."""

    schematics: str = Field(default="schematics", description="Schematics CLI used for generation")
    git: str = Field(default="git")
    npx: str = Field(default="npx", description="Launcher for the tsc/webpack/swc compilers")


class Config(BaseModel):
    """Global nestforge configuration.

    Created once by the CLI entry point and passed to the commands, which hand
    it on to the actions and runners.
    """

    default_project_name: str = Field(default="nest-app", min_length=1)
    default_collection: str = Field(default="@nestjs/schematics", min_length=1)
    default_language: str = Field(default="ts")
    command_timeout: int = Field(
        default=600, ge=1, description="Per child-process timeout in seconds"
    )
    binaries: BinaryConfig = Field(default_factory=BinaryConfig)

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a configuration from JSON.

        Args:
            path: The JSON file to read.

        Returns:
            A validated ``Config`` instance.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        When ``NESTFORGE_CONFIG`` names a JSON file it is loaded first; the
        remaining variables (all optional) override it:
            NESTFORGE_PROJECT_NAME, NESTFORGE_COLLECTION, NESTFORGE_LANGUAGE,
            NESTFORGE_COMMAND_TIMEOUT, NESTFORGE_SCHEMATICS_BIN,
            NESTFORGE_GIT_BIN, NESTFORGE_NPX_BIN.
        """
        base = cls.load(Path(os.environ["NESTFORGE_CONFIG"])) if os.environ.get(
            "NESTFORGE_CONFIG"
        ) else cls()
        data: dict[str, Any] = base.model_dump()

        if os.environ.get("NESTFORGE_PROJECT_NAME"):
            data["default_project_name"] = os.environ["NESTFORGE_PROJECT_NAME"]
        if os.environ.get("NESTFORGE_COLLECTION"):
            data["default_collection"] = os.environ["NESTFORGE_COLLECTION"]
        if os.environ.get("NESTFORGE_LANGUAGE"):
            data["default_language"] = os.environ["NESTFORGE_LANGUAGE"]
        if os.environ.get("NESTFORGE_COMMAND_TIMEOUT"):
            data["command_timeout"] = int(os.environ["NESTFORGE_COMMAND_TIMEOUT"])

        binaries = data["binaries"]
        if os.environ.get("NESTFORGE_SCHEMATICS_BIN"):
            binaries["schematics"] = os.environ["NESTFORGE_SCHEMATICS_BIN"]
        if os.environ.get("NESTFORGE_GIT_BIN"):
            binaries["git"] = os.environ["NESTFORGE_GIT_BIN"]
        if os.environ.get("NESTFORGE_NPX_BIN"):
            binaries["npx"] = os.environ["NESTFORGE_NPX_BIN"]

        return cls.model_validate(data)
