"""Switchable configuration sections for pydantic models."""

from .checker import check, run_check
from .errors import DocumentError, ModelLookupError
from .models import Enable, MustBeFalse, MustBeTrue

__all__ = [
    "DocumentError",
    "Enable",
    "ModelLookupError",
    "MustBeFalse",
    "MustBeTrue",
    "check",
    "run_check",
]
