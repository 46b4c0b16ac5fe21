"""Blacksmith configuration.

Typed configuration for the generators and the command line.  Settings use a
Pydantic v2 model so they are validated at construction time and can be
serialised to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


class Config(BaseModel):
    """Global Blacksmith configuration.

    Instances are typically created once by the CLI entry point and passed to
    every generator it constructs.
    """

    output_dir: Path = Field(
        default=Path("."),
        description="Root directory rendered destination directories are placed under",
    )
    template_dir: Path | None = Field(
        default=None,
        description="Directory searched for artifact templates before the built-in ones",
    )
    entity_separator: str = Field(
        default=".",
        min_length=1,
        description="Character splitting an entity identifier into base segments",
    )
    namespace_separator: str = Field(
        default=".",
        min_length=1,
        description="Separator used to join base segments into the Namespace variable",
    )
    default_extension: str | None = Field(
        default=None,
        description="Overrides the generator's extension for default filenames",
    )

    @field_validator("default_extension")
    @classmethod
    def _dotted_extension(cls, value: str | None) -> str | None:
        if value and not value.startswith("."):
            return f".{value}"
        return value

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file.  Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON.

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

        Recognised variables (all optional):
            BLACKSMITH_OUTPUT_DIR, BLACKSMITH_TEMPLATE_DIR,
            BLACKSMITH_ENTITY_SEPARATOR, BLACKSMITH_NAMESPACE_SEPARATOR,
            BLACKSMITH_DEFAULT_EXTENSION.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("BLACKSMITH_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["BLACKSMITH_OUTPUT_DIR"])
        if os.environ.get("BLACKSMITH_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["BLACKSMITH_TEMPLATE_DIR"])
        if os.environ.get("BLACKSMITH_ENTITY_SEPARATOR"):
            kwargs["entity_separator"] = os.environ["BLACKSMITH_ENTITY_SEPARATOR"]
        if os.environ.get("BLACKSMITH_NAMESPACE_SEPARATOR"):
            kwargs["namespace_separator"] = os.environ["BLACKSMITH_NAMESPACE_SEPARATOR"]
        if os.environ.get("BLACKSMITH_DEFAULT_EXTENSION"):
            kwargs["default_extension"] = os.environ["BLACKSMITH_DEFAULT_EXTENSION"]
        return cls(**kwargs)
