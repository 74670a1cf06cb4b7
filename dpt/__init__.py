"""KNX Datapoint Type codec package."""

from .codec import DPTCodec, decode, encode, get_dpt_info, register_dpt
from .errors import DPTError, LengthError, RangeError, UnknownDPTError
from .types import BooleanType, DatapointType, DPTInfo, Float16Type, ScaledByteType
from .values import DatapointValue

__all__ = [
    "DPTCodec",
    "encode",
    "decode",
    "get_dpt_info",
    "register_dpt",
    "DatapointValue",
    "DatapointType",
    "DPTInfo",
    "BooleanType",
    "ScaledByteType",
    "Float16Type",
    "DPTError",
    "LengthError",
    "RangeError",
    "UnknownDPTError",
]
