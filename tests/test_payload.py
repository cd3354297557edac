"""Tests for the flattened on/off shapes."""

import pytest
from pydantic import ValidationError

from toggled.errors import ENABLE_LITERAL, ENABLE_MISSING
from toggled.models import MustBeTrue, OffMarker, OnPayload


def test_on_payload_passes_remaining_fields() -> None:
    """Hand every field except ``enable`` to the inner decoder."""
    seen: list[dict[str, object]] = []

    def decode_inner(fields: dict[str, object]) -> str:
        seen.append(fields)
        return "decoded"

    payload = OnPayload.decode({"enable": True, "thing": 1, "other": "Great"}, decode_inner)
    assert payload.inner == "decoded"
    assert payload.enable == MustBeTrue()
    assert seen == [{"thing": 1, "other": "Great"}]


def test_on_payload_propagates_inner_error() -> None:
    """Surface the inner decoder's own exception."""

    def decode_inner(_fields: dict[str, object]) -> object:
        raise KeyError("thing")

    with pytest.raises(KeyError):
        OnPayload.decode({"enable": True}, decode_inner)


def test_on_payload_rejects_false() -> None:
    """Refuse the ``false`` discriminator before touching the inner decoder."""
    with pytest.raises(ValidationError) as exc_info:
        OnPayload.decode({"enable": False}, lambda _fields: pytest.fail("inner decoded"))
    (error,) = exc_info.value.errors()
    assert error["type"] == ENABLE_LITERAL
    assert error["loc"] == ("enable",)


def test_on_payload_encodes_enable_first() -> None:
    """Emit ``enable`` first, followed by the inner fields in their own order."""
    payload = OnPayload(enable=MustBeTrue(), inner={"thing": 1, "other": "Great"})
    encoded = payload.encode(dict)
    assert encoded == {"enable": True, "thing": 1, "other": "Great"}
    assert list(encoded) == ["enable", "thing", "other"]


def test_on_payload_requires_mapping_encoding() -> None:
    """Reject inner values that do not encode as a field set."""
    payload = OnPayload(enable=MustBeTrue(), inner=[1, 2])
    with pytest.raises(TypeError):
        payload.encode(list)


def test_on_payload_rejects_inner_enable_field() -> None:
    """Refuse inner encodings that would overwrite the discriminator."""
    payload = OnPayload(enable=MustBeTrue(), inner={"enable": False})
    with pytest.raises(TypeError):
        payload.encode(dict)


def test_off_marker_ignores_extra_fields() -> None:
    """Decode the off shape without looking at other fields."""
    assert OffMarker.decode({"enable": False, "thing": "not a number"}) == OffMarker()


def test_off_marker_requires_discriminator() -> None:
    """Report a missing ``enable`` field."""
    with pytest.raises(ValidationError) as exc_info:
        OffMarker.decode({"thing": 1})
    (error,) = exc_info.value.errors()
    assert error["type"] == ENABLE_MISSING
    assert error["loc"] == ("enable",)


def test_off_marker_encodes_only_discriminator() -> None:
    """Emit exactly ``{"enable": False}``."""
    assert OffMarker().encode() == {"enable": False}
