"""On and off shapes of a switchable section.

The on shape keeps the inner value's fields at the same level as ``enable``
instead of nesting them under a sub-key. The off shape only looks at
``enable`` and ignores everything else.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic_core import PydanticCustomError

from toggled import errors

from .defaults import DISCRIMINATOR
from .literals import BoolLiteral, MustBeFalse, MustBeTrue

T = TypeVar("T")
L = TypeVar("L", bound=BoolLiteral)

logger = logging.getLogger(__name__)


def read_discriminator(data: Mapping[str, Any]) -> object:
    """Return the raw ``enable`` value of ``data``.

    Raises:
        ValidationError: ``enable_missing`` reported at the ``enable`` key.

    """
    if DISCRIMINATOR not in data:
        raise errors.at_key(DISCRIMINATOR, errors.discriminator_missing(), data)
    return data[DISCRIMINATOR]


def _check_discriminator(literal: type[L], data: Mapping[str, Any]) -> L:
    raw = read_discriminator(data)
    try:
        return literal.validate(raw)
    except PydanticCustomError as exc:
        raise errors.at_key(DISCRIMINATOR, exc, raw) from exc


@dataclass(frozen=True)
class OnPayload(Generic[T]):
    """An enabled section: the ``true`` discriminator plus the flattened inner value."""

    enable: MustBeTrue
    inner: T

    @classmethod
    def decode(cls, data: Mapping[str, Any], decode_inner: Callable[[dict[str, Any]], T]) -> OnPayload[T]:
        """Decode ``data`` as an enabled section.

        ``decode_inner`` receives every field except ``enable``. Its errors
        propagate unchanged.
        """
        enable = _check_discriminator(MustBeTrue, data)
        fields = {key: value for key, value in data.items() if key != DISCRIMINATOR}
        logger.debug("Decoding enabled section with fields %s", sorted(fields))
        return cls(enable=enable, inner=decode_inner(fields))

    def encode(self, encode_inner: Callable[[T], Any]) -> dict[str, Any]:
        """Return ``{"enable": True, **encode_inner(inner)}`` with ``enable`` first.

        Raises:
            TypeError: If the inner value does not encode as a mapping or
                already carries an ``enable`` field.

        """
        fields = encode_inner(self.inner)
        if not isinstance(fields, Mapping):
            raise TypeError(f"Enabled section must encode as a mapping, got {type(fields).__name__}")
        if DISCRIMINATOR in fields:
            raise TypeError(f"Inner value of an enabled section cannot define '{DISCRIMINATOR}'")
        return {DISCRIMINATOR: self.enable.encode(), **fields}


@dataclass(frozen=True)
class OffMarker:
    """A disabled section. Only the ``false`` discriminator is kept."""

    enable: MustBeFalse = field(default_factory=MustBeFalse)

    @classmethod
    def decode(cls, data: Mapping[str, Any]) -> OffMarker:
        """Decode ``data`` as a disabled section, ignoring every other field."""
        enable = _check_discriminator(MustBeFalse, data)
        ignored = len(data) - 1
        if ignored:
            logger.debug("Ignoring %d field(s) of disabled section", ignored)
        return cls(enable=enable)

    def encode(self) -> dict[str, Any]:
        """Return exactly ``{"enable": False}``."""
        return {DISCRIMINATOR: self.enable.encode()}


__all__ = ["OffMarker", "OnPayload", "read_discriminator"]
