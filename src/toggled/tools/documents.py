"""Parse and render self-describing map documents."""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

import yaml

from toggled.errors import DocumentError
from toggled.models.types import DocumentFormat

logger = logging.getLogger(__name__)


def parse_document(text: str, fmt: DocumentFormat) -> dict[str, Any]:
    """Parse ``text`` as a ``fmt`` document.

    An empty YAML document parses as an empty mapping.

    Raises:
        DocumentError: If ``text`` is malformed or its top level is not a mapping.

    """
    try:
        if fmt is DocumentFormat.YAML:
            data = yaml.safe_load(text)
            if data is None:
                data = {}
        elif fmt is DocumentFormat.JSON:
            data = json.loads(text)
        else:
            data = tomllib.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise DocumentError(f"Invalid {fmt.value} document: {e}") from e
    if not isinstance(data, dict):
        raise DocumentError(f"Top level of a {fmt.value} document must be a mapping, got {type(data).__name__}")
    return data


def render_document(data: dict[str, Any], fmt: DocumentFormat) -> str:
    """Render ``data`` as ``fmt`` text, keeping key order.

    Raises:
        DocumentError: If ``fmt`` is read-only.

    """
    if fmt is DocumentFormat.YAML:
        return yaml.safe_dump(data, sort_keys=False, default_flow_style=False, allow_unicode=True)
    if fmt is DocumentFormat.JSON:
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    raise DocumentError(f"Cannot render documents as {fmt.value}")


def load_document(path: Path | str) -> dict[str, Any]:
    """Read ``path`` and parse it according to its suffix."""
    path = Path(path)
    fmt = DocumentFormat.from_path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentError(f"Cannot read document {path}: {e}") from e
    logger.debug("Loaded %s document %s", fmt.value, path)
    return parse_document(text, fmt)


__all__ = ["load_document", "parse_document", "render_document"]
