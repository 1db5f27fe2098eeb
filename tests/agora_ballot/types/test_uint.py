"""Tests for the fixed-width unsigned integer types."""

from __future__ import annotations

import pytest
from pydantic import BaseModel, ValidationError

from agora_ballot.types import Uint8, Uint16, Uint32, Uint64
from agora_ballot.types.uint import BaseUint


@pytest.mark.parametrize(
    ("uint_type", "value", "expected"),
    [
        (Uint8, 0xAB, b"\xab"),
        (Uint16, 0x0102, b"\x02\x01"),
        (Uint32, 7, b"\x07\x00\x00\x00"),
        (Uint64, 1_700_000_000, b"\x00\xf1\x53\x65\x00\x00\x00\x00"),
    ],
)
def test_encode_bytes_is_fixed_width_little_endian(
    uint_type: type[BaseUint], value: int, expected: bytes
) -> None:
    assert uint_type(value).encode_bytes() == expected
    assert uint_type.decode_bytes(expected) == value


@pytest.mark.parametrize("uint_type", [Uint8, Uint16, Uint32, Uint64])
def test_bounds(uint_type: type[BaseUint]) -> None:
    top = 2**uint_type.BITS - 1
    assert uint_type(top) == top
    with pytest.raises(OverflowError):
        uint_type(top + 1)
    with pytest.raises(OverflowError):
        uint_type(-1)


def test_bool_is_rejected() -> None:
    with pytest.raises(TypeError):
        Uint32(True)


def test_decode_wrong_length_raises() -> None:
    with pytest.raises(ValueError, match="exactly 4 bytes"):
        Uint32.decode_bytes(b"\x00\x00\x00")


def test_repr_and_str() -> None:
    assert repr(Uint64(5)) == "Uint64(5)"
    assert str(Uint64(5)) == "5"


class _Model(BaseModel):
    value: Uint32


def test_pydantic_coerces_and_validates() -> None:
    model = _Model(value=12)
    assert isinstance(model.value, Uint32)
    assert model.model_dump(mode="json") == {"value": 12}
    assert _Model.model_validate_json('{"value": 12}').value == Uint32(12)

    with pytest.raises(ValidationError):
        _Model(value=2**32)
    with pytest.raises(ValidationError):
        _Model.model_validate_json('{"value": -1}')
