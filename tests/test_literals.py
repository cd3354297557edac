"""Tests for boolean literal types."""

import pytest
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticCustomError

from toggled.errors import ENABLE_LITERAL, ENABLE_TYPE
from toggled.models import MustBeFalse, MustBeTrue


class Flag(BaseModel):
    """Model using a literal as a plain field type."""

    enable: MustBeTrue


def test_must_be_true_accepts_true() -> None:
    """Accept the ``true`` literal."""
    assert MustBeTrue.validate(True) == MustBeTrue()


def test_must_be_false_accepts_false() -> None:
    """Accept the ``false`` literal."""
    assert MustBeFalse.validate(False) == MustBeFalse()


@pytest.mark.parametrize(
    ("literal", "raw", "message"),
    [
        (MustBeTrue, False, "Expected a true value"),
        (MustBeFalse, True, "Expected a false value"),
    ],
)
def test_opposite_literal_rejected(literal: type, raw: bool, message: str) -> None:
    """Reject the opposite boolean with a message naming the expected one."""
    with pytest.raises(PydanticCustomError) as exc_info:
        literal.validate(raw)
    assert exc_info.value.type == ENABLE_LITERAL
    assert exc_info.value.message() == message


@pytest.mark.parametrize("raw", ["yes", "true", 1, 0, None, [True]])
def test_non_boolean_rejected(raw: object) -> None:
    """Reject values that are not booleans, even truthy ones."""
    with pytest.raises(PydanticCustomError) as exc_info:
        MustBeTrue.validate(raw)
    assert exc_info.value.type == ENABLE_TYPE


def test_encode_is_constant() -> None:
    """Always encode the fixed literal."""
    assert MustBeTrue().encode() is True
    assert MustBeFalse().encode() is False


def test_markers_compare_by_type() -> None:
    """Markers of the same literal are interchangeable."""
    assert MustBeTrue() == MustBeTrue()
    assert MustBeTrue() != MustBeFalse()
    assert hash(MustBeFalse()) == hash(MustBeFalse())
    assert bool(MustBeTrue())
    assert not MustBeFalse()


def test_literal_as_model_field() -> None:
    """Use a literal directly as a pydantic field type."""
    flag = Flag.model_validate({"enable": True})
    assert flag.enable == MustBeTrue()
    assert flag.model_dump() == {"enable": True}
    prop = Flag.model_json_schema()["properties"]["enable"]
    assert prop["type"] == "boolean"
    assert prop["const"] is True


def test_literal_field_rejects_false() -> None:
    """Report a literal mismatch at the field location."""
    with pytest.raises(ValidationError) as exc_info:
        Flag.model_validate({"enable": False})
    (error,) = exc_info.value.errors()
    assert error["type"] == ENABLE_LITERAL
    assert error["loc"] == ("enable",)
