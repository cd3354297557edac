"""Expose models and type definitions."""

from .enable import Enable
from .literals import BoolLiteral, MustBeFalse, MustBeTrue
from .options import CheckOptions
from .payload import OffMarker, OnPayload
from .types import DocumentFormat
from .verbosity import Verbosity

__all__ = [
    "BoolLiteral",
    "CheckOptions",
    "DocumentFormat",
    "Enable",
    "MustBeFalse",
    "MustBeTrue",
    "OffMarker",
    "OnPayload",
    "Verbosity",
]
