"""Primitive wire encoders shared by all datapoint types.

These convert between a byte buffer and one wire shape. They know nothing
about semantic ranges; clipping and range checks belong to the datapoint
types built on top of them.

    pack_b1(True)          # → b'\\x01'
    unpack_u8(b'\\xff')     # → 255
    pack_f16(21.5)         # → b'\\x0c\\x33'
"""

import math
import struct

from .errors import LengthError

F16_MANTISSA_MIN = -2048
F16_MANTISSA_MAX = 2047
F16_EXPONENT_MAX = 15

# Largest/smallest values the 2-byte float can carry (0x7FFF / 0xF800)
F16_MAX = 0.01 * F16_MANTISSA_MAX * 2**F16_EXPONENT_MAX
F16_MIN = 0.01 * F16_MANTISSA_MIN * 2**F16_EXPONENT_MAX


def _check_length(data: bytes, expected: int) -> None:
    if data is None or len(data) != expected:
        raise LengthError(expected, 0 if data is None else len(data))


# ---------------------------------------------------------------------------
# 1-bit boolean
# ---------------------------------------------------------------------------


def pack_b1(value: bool) -> bytes:
    """Boolean → one byte, only the lowest bit set or cleared."""
    return bytes([0x01 if value else 0x00])


def unpack_b1(data: bytes) -> bool:
    """One byte → boolean. Bits above bit 0 are ignored."""
    _check_length(data, 1)
    return bool(data[0] & 0x01)


# ---------------------------------------------------------------------------
# 1-byte unsigned
# ---------------------------------------------------------------------------


def pack_u8(value: int) -> bytes:
    return bytes([value])


def unpack_u8(data: bytes) -> int:
    _check_length(data, 1)
    return data[0]


# ---------------------------------------------------------------------------
# 2-byte KNX float
# ---------------------------------------------------------------------------


def f16_components(value: float) -> tuple[int, int]:
    """Split a real number into the KNX float (mantissa, exponent) pair.

    Picks the smallest exponent whose rounded mantissa fits the 12-bit signed
    range. Past exponent 15 the mantissa is clamped, never wrapped.
    """
    if math.isnan(value):
        raise ValueError("NaN has no 2-byte float encoding")
    if math.isinf(value):
        if value > 0:
            return F16_MANTISSA_MAX, F16_EXPONENT_MAX
        return F16_MANTISSA_MIN, F16_EXPONENT_MAX

    scaled = float(value) * 100.0
    exponent = 0
    mantissa = round(scaled)
    while not F16_MANTISSA_MIN <= mantissa <= F16_MANTISSA_MAX:
        if exponent == F16_EXPONENT_MAX:
            mantissa = max(F16_MANTISSA_MIN, min(F16_MANTISSA_MAX, mantissa))
            break
        exponent += 1
        mantissa = round(scaled / 2**exponent)
    return mantissa, exponent


def encode_f16(mantissa: int, exponent: int) -> bytes:
    """Pack a (mantissa, exponent) pair.

    Format: MEEEEMMM MMMMMMMM
      M = 12-bit two's complement mantissa, sign bit at bit 15
      E = 4-bit unsigned exponent
    """
    sign = 1 if mantissa < 0 else 0
    raw = (sign << 15) | ((exponent & 0x0F) << 11) | (mantissa & 0x7FF)
    return struct.pack("!H", raw)


def decode_f16(mantissa: int, exponent: int) -> float:
    return 0.01 * mantissa * 2**exponent


def pack_f16(value: float) -> bytes:
    return encode_f16(*f16_components(value))


def unpack_f16(data: bytes) -> float:
    """Two bytes → real number: 0.01 * M * 2^E."""
    _check_length(data, 2)
    (raw,) = struct.unpack("!H", data)
    exponent = (raw >> 11) & 0x0F
    mantissa = raw & 0x7FF
    if raw & 0x8000:
        mantissa -= 2048
    return decode_f16(mantissa, exponent)


def f16_resolution(value: float) -> float:
    """Step size of the 2-byte float at the exponent chosen for *value*."""
    _, exponent = f16_components(value)
    return 0.01 * 2**exponent
