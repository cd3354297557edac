"""Document and import helpers used by the checker."""

from .documents import load_document, parse_document, render_document
from .imports import resolve_model

__all__ = [
    "load_document",
    "parse_document",
    "render_document",
    "resolve_model",
]
