"""Sample models with a switchable section.

``Outside`` holds a switchable ``Inside`` section, mirroring a typical
configuration file layout.
"""

from pydantic import BaseModel, Field

from toggled import Enable


class Inside(BaseModel):
    """Inner section with required fields."""

    thing: int = Field(ge=0)
    other: str


class FrozenInside(BaseModel, frozen=True):
    """Hashable inner section."""

    thing: int


class Outside(BaseModel):
    """Document with a single switchable section."""

    inside: Enable[Inside]


__all__ = ["FrozenInside", "Inside", "Outside"]
