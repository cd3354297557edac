"""Error types raised while decoding switchable sections and documents.

Validation problems surface through pydantic so callers can branch on
``ValidationError.errors()[i]["type"]``:

* ``enable_missing`` - the ``enable`` field is absent.
* ``enable_type`` - ``enable`` is present but not a boolean.
* ``enable_literal`` - ``enable`` holds the other boolean than the one required.
* ``enable_section_type`` - the section itself is not a mapping.

Errors from the inner type keep their own types and locations.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError
from pydantic_core import PydanticCustomError

ENABLE_MISSING = "enable_missing"
ENABLE_TYPE = "enable_type"
ENABLE_LITERAL = "enable_literal"
ENABLE_SECTION_TYPE = "enable_section_type"


class DocumentError(ValueError):
    """A configuration document could not be read, parsed or rendered."""


class ModelLookupError(LookupError):
    """A ``module:Name`` reference could not be imported."""


def discriminator_missing() -> PydanticCustomError:
    """Return the error for a section without an ``enable`` field."""
    return PydanticCustomError(ENABLE_MISSING, "Field 'enable' is required")


def discriminator_type() -> PydanticCustomError:
    """Return the error for a non-boolean ``enable`` value."""
    return PydanticCustomError(ENABLE_TYPE, "Field 'enable' should be a valid boolean")


def discriminator_literal(expected: bool) -> PydanticCustomError:
    """Return the error for an ``enable`` value other than ``expected``."""
    return PydanticCustomError(
        ENABLE_LITERAL,
        "Expected a {expected} value",
        {"expected": "true" if expected else "false"},
    )


def section_type() -> PydanticCustomError:
    """Return the error for a section that is not a mapping."""
    return PydanticCustomError(ENABLE_SECTION_TYPE, "Input should be a mapping with an 'enable' field")


def at_key(key: str, error: PydanticCustomError, value: Any) -> ValidationError:
    """Wrap ``error`` so pydantic reports it at ``key`` below the current location."""
    return ValidationError.from_exception_data(
        "Enable",
        [{"type": error, "loc": (key,), "input": value}],
    )


__all__ = [
    "ENABLE_LITERAL",
    "ENABLE_MISSING",
    "ENABLE_SECTION_TYPE",
    "ENABLE_TYPE",
    "DocumentError",
    "ModelLookupError",
    "at_key",
    "discriminator_literal",
    "discriminator_missing",
    "discriminator_type",
    "section_type",
]
