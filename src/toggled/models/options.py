"""Option models for the document checker."""

from __future__ import annotations

import os
from pathlib import Path

from cyclopts import Parameter
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .defaults import DEFAULT_OUTPUT_FORMAT, LOG_LEVEL_ENV
from .types import DocumentFormat
from .verbosity import Verbosity


def default_verbosity() -> Verbosity:
    """Read the default verbosity from ``TOGGLED_LOG_LEVEL``."""
    raw = os.getenv(LOG_LEVEL_ENV)
    if not raw:
        return Verbosity.QUIET
    return Verbosity.parse(raw)


@Parameter(name="*")
class CheckOptions(BaseModel):
    """Options for checking a configuration document against a model."""

    document: Path = Field(description="Path to the YAML, JSON or TOML document to check.")
    model: str = Field(description="Model to validate against, as 'package.module:Name'.")
    output_format: DocumentFormat | None = Field(
        default=None,
        description=(
            "Format of the normalized output. Defaults to the input format, "
            f"or {DEFAULT_OUTPUT_FORMAT.value} for TOML input."
        ),
    )
    verbosity: Verbosity = Field(
        default_factory=default_verbosity,
        description=f"Logging verbosity: quiet, info or debug. [env: {LOG_LEVEL_ENV}]",
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("document")
    @classmethod
    def validate_document(cls, v: Path) -> Path:
        """Ensure the document exists and has a recognized suffix."""
        path = Path(v).expanduser().absolute()
        if not path.is_file():
            raise ValueError(f"Document is not a file: {path}")
        DocumentFormat.from_path(path)
        return path

    @field_validator("model")
    @classmethod
    def validate_model(cls, v: str) -> str:
        """Require a ``module:Name`` reference."""
        module, sep, name = v.partition(":")
        if not sep or not module or not name:
            raise ValueError(f"Model must look like 'package.module:Name', got '{v}'")
        return v

    @field_validator("verbosity", mode="before")
    @classmethod
    def _parse_verbosity(cls, v: object) -> Verbosity:
        """Accept numeric values or case-insensitive enum names."""
        return Verbosity.parse(v)

    @model_validator(mode="after")
    def resolve_output_format(self) -> CheckOptions:
        """Default the output format to the input's, falling back for read-only formats."""
        if self.output_format is None:
            source_format = DocumentFormat.from_path(self.document)
            self.output_format = source_format if source_format.can_render else DEFAULT_OUTPUT_FORMAT
        elif not self.output_format.can_render:
            raise ValueError(f"Cannot render documents as {self.output_format.value}")
        return self


__all__ = ["CheckOptions", "default_verbosity"]
