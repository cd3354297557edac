"""Default constants for switchable sections and the checker."""

from __future__ import annotations

from toggled.models.types import DocumentFormat

DISCRIMINATOR = "enable"
DEFAULT_OUTPUT_FORMAT = DocumentFormat.JSON
LOG_LEVEL_ENV = "TOGGLED_LOG_LEVEL"

__all__ = [
    "DEFAULT_OUTPUT_FORMAT",
    "DISCRIMINATOR",
    "LOG_LEVEL_ENV",
]
