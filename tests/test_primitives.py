"""Tests for the primitive wire encoders."""

from __future__ import annotations

import pytest

from dpt.errors import LengthError
from dpt.primitives import (
    F16_MAX,
    F16_MIN,
    f16_components,
    f16_resolution,
    pack_b1,
    pack_f16,
    pack_u8,
    unpack_b1,
    unpack_f16,
    unpack_u8,
)


@pytest.mark.parametrize("value", [True, False])
def test_b1_roundtrip(value: bool):
    assert unpack_b1(pack_b1(value)) is value


def test_b1_pack_bytes():
    assert pack_b1(True) == b"\x01"
    assert pack_b1(False) == b"\x00"


def test_b1_ignores_upper_bits():
    assert unpack_b1(b"\xfe") is False
    assert unpack_b1(b"\x81") is True


@pytest.mark.parametrize("data", [b"", b"\x00\x01", None])
def test_b1_wrong_length(data):
    with pytest.raises(LengthError):
        unpack_b1(data)


@pytest.mark.parametrize("value", [0, 1, 127, 128, 255])
def test_u8_roundtrip(value: int):
    assert pack_u8(value) == bytes([value])
    assert unpack_u8(bytes([value])) == value


def test_u8_wrong_length():
    with pytest.raises(LengthError) as exc:
        unpack_u8(b"\x01\x02")
    assert exc.value.expected == 1
    assert exc.value.actual == 2


@pytest.mark.parametrize(
    "value,expected",
    [
        (0.0, b"\x00\x00"),
        (21.5, b"\x0c\x33"),
        (0.01, b"\x00\x01"),
        (-0.01, b"\x87\xff"),
        (-272.96, b"\xa1\x56"),
        (F16_MAX, b"\x7f\xff"),
        (F16_MIN, b"\xf8\x00"),
    ],
)
def test_f16_reference_encodings(value: float, expected: bytes):
    assert pack_f16(value) == expected


def test_f16_decode_reference_values():
    assert unpack_f16(b"\x0c\x33") == pytest.approx(21.5)
    assert unpack_f16(b"\x87\xff") == pytest.approx(-0.01)
    assert unpack_f16(b"\x7f\xff") == pytest.approx(670760.96)
    assert unpack_f16(b"\xf8\x00") == pytest.approx(-671088.64)


@pytest.mark.parametrize(
    "value",
    [0.01, 1.0, 100.0, 5000.0, 600000.0, -0.01, -1.0, -100.0, -5000.0, -600000.0],
)
def test_f16_roundtrip_within_resolution(value: float):
    decoded = unpack_f16(pack_f16(value))
    assert decoded == pytest.approx(value, abs=f16_resolution(value))


@pytest.mark.parametrize(
    "value,exponent",
    [(20.47, 0), (20.48, 1), (100.0, 3), (5000.0, 8), (600000.0, 15)],
)
def test_f16_picks_minimal_exponent(value: float, exponent: int):
    mantissa, chosen = f16_components(value)
    assert chosen == exponent
    assert -2048 <= mantissa <= 2047


def test_f16_clamps_instead_of_wrapping():
    assert pack_f16(1e9) == b"\x7f\xff"
    assert pack_f16(-1e9) == b"\xf8\x00"
    assert pack_f16(float("inf")) == b"\x7f\xff"


def test_f16_rejects_nan():
    with pytest.raises(ValueError):
        pack_f16(float("nan"))


@pytest.mark.parametrize("data", [b"", b"\x0c", b"\x0c\x33\x00"])
def test_f16_wrong_length(data: bytes):
    with pytest.raises(LengthError):
        unpack_f16(data)
