"""Boolean literal types that accept exactly one value.

``MustBeTrue`` and ``MustBeFalse`` carry no data. Decoding checks the literal
as part of structural validation, so a wrong ``enable`` value fails the shape
it was tried against. Encoding always emits the constant.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Self

from pydantic_core import core_schema

from toggled import errors

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue


class BoolLiteral:
    """Base for marker types bound to a single boolean literal."""

    __slots__ = ()

    literal: ClassVar[bool]

    @classmethod
    def validate(cls, raw: object) -> Self:
        """Return a marker if ``raw`` is exactly :attr:`literal`.

        Raises:
            PydanticCustomError: ``enable_type`` when ``raw`` is not a boolean,
                ``enable_literal`` when it is the other boolean.

        """
        if isinstance(raw, cls):
            return raw
        # bool only; 1, "yes" and "true" are rejected
        if not isinstance(raw, bool):
            raise errors.discriminator_type()
        if raw is not cls.literal:
            raise errors.discriminator_literal(cls.literal)
        return cls()

    def encode(self) -> bool:
        """Return the constant literal."""
        return self.literal

    @classmethod
    def json_schema(cls) -> dict[str, Any]:
        """JSON schema accepting only :attr:`literal`."""
        return {"type": "boolean", "const": cls.literal}

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.encode,
                info_arg=False,
                return_schema=core_schema.bool_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return cls.json_schema()

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.literal))

    def __bool__(self) -> bool:
        return self.literal

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MustBeTrue(BoolLiteral):
    """Accepts only ``true``."""

    __slots__ = ()

    literal = True


class MustBeFalse(BoolLiteral):
    """Accepts only ``false``."""

    __slots__ = ()

    literal = False


__all__ = ["BoolLiteral", "MustBeFalse", "MustBeTrue"]
