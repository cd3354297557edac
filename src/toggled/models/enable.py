"""Switchable configuration sections.

``Enable[T]`` wraps a section that is turned on or off by a single ``enable``
field. The inner fields are required only while the section is on::

    class Outside(BaseModel):
        inside: Enable[Inside]

    Outside.model_validate({"inside": {"enable": False}})
    Outside.model_validate({"inside": {"enable": True, "thing": 1, "other": "Great"}})

Decoding reads ``enable`` first and branches on its literal value. Errors
raised by ``T`` while the section is on are reported as ``T``'s own errors.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar, get_args

from pydantic_core import core_schema

from toggled import errors

from .defaults import DISCRIMINATOR
from .literals import MustBeFalse, MustBeTrue
from .payload import OffMarker, OnPayload, read_discriminator

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue

T = TypeVar("T")


class Enable(Generic[T]):
    """A configuration section that is either on, holding ``T``, or off.

    Values are immutable. Build them with :meth:`on` and :meth:`off` or by
    validating a document with pydantic. Like a tuple, a value is hashable
    only when its payload is.
    """

    __slots__ = ("_enabled", "_inner")

    _enabled: bool
    _inner: T | None

    def __init__(self, *, enabled: bool, inner: T | None = None) -> None:
        if not enabled and inner is not None:
            raise ValueError("A disabled section carries no payload")
        object.__setattr__(self, "_enabled", enabled)
        object.__setattr__(self, "_inner", inner)

    @classmethod
    def on(cls, value: T) -> Enable[T]:
        """Return an enabled section holding ``value``."""
        return cls(enabled=True, inner=value)

    @classmethod
    def off(cls) -> Enable[T]:
        """Return a disabled section."""
        return cls(enabled=False)

    def into_inner(self) -> T | None:
        """Return the payload, or ``None`` when disabled."""
        return self._inner if self._enabled else None

    def as_ref(self) -> T | None:
        """Return the payload without copying, or ``None`` when disabled."""
        return self._inner if self._enabled else None

    def is_enabled(self) -> bool:
        """Whether the section is on."""
        return self._enabled

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Enable):
            return NotImplemented
        return (self._enabled, self._inner) == (other._enabled, other._inner)

    def __hash__(self) -> int:
        return hash((self._enabled, self._inner))

    def __reduce__(self) -> tuple[Any, tuple[Any, ...]]:
        if self._enabled:
            return (type(self).on, (self._inner,))
        return (type(self).off, ())

    def __deepcopy__(self, memo: dict[int, Any]) -> Enable[T]:
        if self._enabled:
            return type(self).on(copy.deepcopy(self._inner, memo))
        return type(self).off()

    def __repr__(self) -> str:
        if self._enabled:
            return f"Enable.on({self._inner!r})"
        return "Enable.off()"

    @classmethod
    def _validate(cls, value: Any, handler: core_schema.ValidatorFunctionWrapHandler) -> Enable[Any]:
        if isinstance(value, Enable):
            return value
        if not isinstance(value, Mapping):
            raise errors.section_type()
        # Branch on the literal first so a payload error on an enabled
        # section is never masked by the off shape failing too.
        if read_discriminator(value) is True:
            return cls.on(OnPayload.decode(value, handler).inner)
        OffMarker.decode(value)
        return cls.off()

    @staticmethod
    def _serialize(value: Enable[Any], handler: core_schema.SerializerFunctionWrapHandler) -> dict[str, Any]:
        if value.is_enabled():
            return OnPayload(enable=MustBeTrue(), inner=value.as_ref()).encode(handler)
        return OffMarker().encode()

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        args = get_args(source)
        inner_type = args[0] if args else Any
        return core_schema.no_info_wrap_validator_function(
            cls._validate,
            handler.generate_schema(inner_type),
            serialization=core_schema.wrap_serializer_function_ser_schema(
                cls._serialize,
                info_arg=False,
                schema=handler.generate_schema(inner_type),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        inner = handler(schema)
        return {
            "oneOf": [
                {"allOf": [_discriminator_json_schema(MustBeTrue), inner]},
                _discriminator_json_schema(MustBeFalse),
            ]
        }


def _discriminator_json_schema(literal: type[MustBeTrue] | type[MustBeFalse]) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {DISCRIMINATOR: literal.json_schema()},
        "required": [DISCRIMINATOR],
    }


__all__ = ["Enable"]
