"""Immutable datapoint values.

    temp = DatapointValue("9.001", 21.5)
    temp.pack()                                   # → b'\\x0c\\x33'
    DatapointValue.unpack("9.001", b'\\x0c\\x33')   # → <DatapointValue 9.001 21.5>
    str(temp)                                     # → '21.50 °C'
"""

from typing import Any

from .codec import DPTCodec
from .types import DatapointType


class DatapointValue:
    """A semantic value tagged with its DPT.

    Holds exactly one scalar (bool or float). Values are never mutated;
    unpacking builds a new instance, so a failed unpack leaves nothing
    half-written.
    """

    __slots__ = ("_dpt_id", "_type", "_value")

    def __init__(self, dpt: str | DatapointType, value: Any):
        if isinstance(dpt, DatapointType):
            dpt_id, dpt_type = dpt.id, dpt
        else:
            # Keep the requested id even when it resolves to its main type
            dpt_id, dpt_type = str(dpt), DPTCodec.get_type(dpt)
        object.__setattr__(self, "_dpt_id", dpt_id)
        object.__setattr__(self, "_type", dpt_type)
        object.__setattr__(self, "_value", dpt_type.coerce(value))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def unpack(cls, dpt: str | DatapointType, data: bytes) -> "DatapointValue":
        """Decode *data* as *dpt*. Raises LengthError or RangeError."""
        dpt_type = dpt if isinstance(dpt, DatapointType) else DPTCodec.get_type(dpt)
        return cls(dpt, dpt_type.unpack(data))

    @property
    def dpt_id(self) -> str:
        """The id this value was created with, e.g. "9.007"."""
        return self._dpt_id

    @property
    def dpt_type(self) -> DatapointType:
        return self._type

    @property
    def value(self):
        return self._value

    @property
    def unit(self) -> str:
        return self._type.unit

    def pack(self) -> bytes:
        return self._type.pack(self._value)

    def __str__(self) -> str:
        return self._type.render(self._value)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.dpt_id} {self._value!r}>"

    def __eq__(self, other) -> bool:
        if not isinstance(other, DatapointValue):
            return NotImplemented
        return self.dpt_id == other.dpt_id and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.dpt_id, self._value))

    def __bool__(self) -> bool:
        return bool(self._value)
