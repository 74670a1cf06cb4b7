"""Datapoint type kinds and the built-in DPT declarations.

Every DPT is one of three generic kinds, configured by data:

  - BooleanType     1 bit,  labels for True/False
  - ScaledByteType  1 byte, semantic range mapped onto 0–255
  - Float16Type     2 bytes, KNX float with a semantic range

Packing clips out-of-range input to the nearest bound and never fails.
Unpacking is strict: wrong payload width raises LengthError, a decoded value
outside the semantic range raises RangeError.
"""

import math
from typing import Any

from . import primitives
from .errors import RangeError


class DPTInfo:
    """Metadata for a DPT."""

    __slots__ = ("id", "name", "unit", "min_val", "max_val", "encoding_size")

    def __init__(
        self,
        id: str,
        name: str,
        unit: str = "",
        min_val: Any = None,
        max_val: Any = None,
        encoding_size: int = 1,
    ):
        self.id = id
        self.name = name
        self.unit = unit
        self.min_val = min_val
        self.max_val = max_val
        self.encoding_size = encoding_size

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "unit": self.unit,
            "min": self.min_val,
            "max": self.max_val,
            "encoding_size": self.encoding_size,
        }

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id} {self.name}>"


class DatapointType(DPTInfo):
    """A DPT: metadata plus pack/unpack/render for one wire shape."""

    __slots__ = ()

    kind = ""

    def coerce(self, value: Any):
        """Normalise a semantic input to the scalar this type stores."""
        raise NotImplementedError

    def pack(self, value: Any) -> bytes:
        raise NotImplementedError

    def unpack(self, data: bytes):
        raise NotImplementedError

    def render(self, value: Any) -> str:
        raise NotImplementedError

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["kind"] = self.kind
        return result


# ---------------------------------------------------------------------------
# Boolean (DPT 1.x)
# ---------------------------------------------------------------------------


class BooleanType(DatapointType):
    __slots__ = ("true_label", "false_label")

    kind = "boolean"

    def __init__(self, id: str, name: str, true_label: str, false_label: str):
        super().__init__(id, name, "", False, True, 1)
        self.true_label = true_label
        self.false_label = false_label

    def coerce(self, value: Any) -> bool:
        return bool(value)

    def pack(self, value: Any) -> bytes:
        return primitives.pack_b1(bool(value))

    def unpack(self, data: bytes) -> bool:
        return primitives.unpack_b1(data)

    def render(self, value: Any) -> str:
        return self.true_label if value else self.false_label

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["labels"] = [self.true_label, self.false_label]
        return result


# ---------------------------------------------------------------------------
# Numeric kinds
# ---------------------------------------------------------------------------


class _RangedType(DatapointType):
    """Shared clipping, range check and fixed-precision rendering."""

    __slots__ = ("text_format",)

    def __init__(self, id, name, unit, min_val, max_val, encoding_size, text_format):
        super().__init__(id, name, unit, min_val, max_val, encoding_size)
        self.text_format = text_format

    def coerce(self, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"DPT {self.id} expects a number, got {value!r}")
        try:
            value = float(value)
        except OverflowError:
            # int too large for a float; clip() bounds it
            value = math.copysign(math.inf, value)
        if math.isnan(value):
            raise ValueError(f"DPT {self.id} cannot hold NaN")
        return value

    def clip(self, value: float) -> float:
        return max(self.min_val, min(self.max_val, value))

    def check_range(self, value: float) -> float:
        if value < self.min_val or value > self.max_val:
            raise RangeError(value, self.min_val, self.max_val)
        return value

    def render(self, value: Any) -> str:
        return self.text_format.format(value)


class ScaledByteType(_RangedType):
    """Semantic range [min, max] mapped linearly onto the byte 0–255.

    With ``truncate`` the scaled value is cut toward zero (a plain integer
    cast) instead of rounded to nearest.
    """

    __slots__ = ("truncate",)

    kind = "scaled"

    def __init__(
        self,
        id: str,
        name: str,
        unit: str,
        min_val: float,
        max_val: float,
        text_format: str,
        truncate: bool = False,
    ):
        super().__init__(id, name, unit, min_val, max_val, 1, text_format)
        self.truncate = truncate

    def pack(self, value: Any) -> bytes:
        value = self.clip(self.coerce(value))
        raw = (value - self.min_val) * 255.0 / (self.max_val - self.min_val)
        raw = int(raw) if self.truncate else round(raw)
        return primitives.pack_u8(max(0, min(255, raw)))

    def unpack(self, data: bytes) -> float:
        raw = primitives.unpack_u8(data)
        if raw == 255:
            value = float(self.max_val)
        else:
            value = self.min_val + raw * (self.max_val - self.min_val) / 255.0
        return self.check_range(value)

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["truncate"] = self.truncate
        return result


class Float16Type(_RangedType):
    """KNX 2-byte float with a semantic range."""

    __slots__ = ()

    kind = "float16"

    def __init__(
        self,
        id: str,
        name: str,
        unit: str,
        min_val: float,
        max_val: float,
        text_format: str,
    ):
        super().__init__(id, name, unit, min_val, max_val, 2, text_format)

    def pack(self, value: Any) -> bytes:
        value = self.clip(self.coerce(value))
        mantissa, exponent = primitives.f16_components(value)
        # Rounding may land one step past a bound; step back inside
        decoded = primitives.decode_f16(mantissa, exponent)
        if decoded > self.max_val and mantissa > primitives.F16_MANTISSA_MIN:
            mantissa -= 1
        elif decoded < self.min_val and mantissa < primitives.F16_MANTISSA_MAX:
            mantissa += 1
        return primitives.encode_f16(mantissa, exponent)

    def unpack(self, data: bytes) -> float:
        return self.check_range(primitives.unpack_f16(data))


# ---------------------------------------------------------------------------
# Built-in declarations
# ---------------------------------------------------------------------------

BUILTIN_TYPES: tuple[DatapointType, ...] = (
    # DPT 1.x — Boolean
    BooleanType("1", "Boolean", "True", "False"),
    BooleanType("1.001", "Switch", "On", "Off"),
    BooleanType("1.002", "Bool", "True", "False"),
    BooleanType("1.003", "Enable", "Enable", "Disable"),
    BooleanType("1.009", "OpenClose", "Close", "Open"),
    BooleanType("1.010", "Start", "Start", "Stop"),
    # DPT 5.x — Unsigned 8-bit
    ScaledByteType("5", "Unsigned 8-bit", "", 0, 255, "{:.2f}", truncate=True),
    ScaledByteType("5.001", "Scaling", "%", 0, 100, "{:.2f}%"),
    ScaledByteType("5.003", "Angle", "°", 0, 360, "{:.2f} °"),
    ScaledByteType("5.004", "Percent_U8", "%", 0, 255, "{:.2f} %", truncate=True),
    # DPT 9.x — 2-byte float
    Float16Type(
        "9", "2-byte Float", "", primitives.F16_MIN, primitives.F16_MAX, "{:.2f}"
    ),
    Float16Type("9.001", "Temperature", "°C", -273, 670760, "{:.2f} °C"),
    Float16Type("9.004", "Illumination", "lux", 0, 670760, "{:.2f} lux"),
)
