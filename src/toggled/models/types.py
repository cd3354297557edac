"""Document format definitions."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from toggled.errors import DocumentError


class DocumentFormat(str, Enum):
    """Self-describing map formats understood by the document helpers."""

    YAML = "yaml"
    JSON = "json"
    TOML = "toml"

    @property
    def can_render(self) -> bool:
        """Whether documents can be written back in this format."""
        return self is not DocumentFormat.TOML

    @property
    def suffixes(self) -> tuple[str, ...]:
        """Filename suffixes recognized for this format, including dot."""
        return _SUFFIXES[self]

    @classmethod
    def from_path(cls, path: Path | str) -> DocumentFormat:
        """Infer the format of ``path`` from its suffix.

        Raises:
            DocumentError: If the suffix is not a recognized format.

        """
        suffix = Path(path).suffix.lower()
        for fmt in cls:
            if suffix in fmt.suffixes:
                return fmt
        raise DocumentError(f"Unsupported document suffix '{suffix}': {path}")


_SUFFIXES: dict[DocumentFormat, tuple[str, ...]] = {
    DocumentFormat.YAML: (".yaml", ".yml"),
    DocumentFormat.JSON: (".json",),
    DocumentFormat.TOML: (".toml",),
}

__all__ = ["DocumentFormat"]
