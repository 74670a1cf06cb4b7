"""KNX Datapoint Type (DPT) registry and codec facade.

Each DPT defines how raw bytes on the KNX bus represent real-world values.
This module keeps the registry of datapoint types (built-ins plus anything a
catalog file adds at startup) and the lookup-by-id entry points.

Usage:
    from dpt import encode, decode, get_dpt_info

    raw = encode("9.001", 21.5)             # → b'\\x0c\\x33'
    value = decode("9.001", b'\\x0c\\x33')   # → 21.5
    info = get_dpt_info("9.001")            # → {"name": "Temperature", "unit": "°C", ...}

Ids without an exact registration fall back to their main type, so "9.007"
resolves to the generic "9" 2-byte float unless a catalog declares it.
"""

import logging
from typing import Any, Optional

from .errors import UnknownDPTError
from .types import BUILTIN_TYPES, DatapointType

logger = logging.getLogger("dptcodec.registry")


# ---------------------------------------------------------------------------
# DPT Registry
# ---------------------------------------------------------------------------

_REGISTRY: dict[str, DatapointType] = {}


def register_dpt(
    dpt_type: DatapointType,
    registry: Optional[dict] = None,
    replace: bool = False,
) -> bool:
    """Add a datapoint type. Returns False if the id is taken and not replaced."""
    if registry is None:
        registry = _REGISTRY
    if dpt_type.id in registry and not replace:
        logger.debug("DPT %s already registered, keeping existing", dpt_type.id)
        return False
    registry[dpt_type.id] = dpt_type
    logger.debug("Registered DPT %s (%s)", dpt_type.id, dpt_type.kind)
    return True


def _lookup(dpt_id: str, registry: Optional[dict] = None) -> Optional[DatapointType]:
    if registry is None:
        registry = _REGISTRY
    entry = registry.get(dpt_id)
    if entry is None:
        # Try main type fallback
        entry = registry.get(str(dpt_id).split(".")[0])
    return entry


for _builtin in BUILTIN_TYPES:
    register_dpt(_builtin)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


class DPTCodec:
    """Central access point for DPT encoding/decoding."""

    @staticmethod
    def get_type(dpt_id: str) -> DatapointType:
        """Resolve a DPT id to its datapoint type, raising if unknown."""
        entry = _lookup(dpt_id)
        if entry is None:
            raise UnknownDPTError(dpt_id)
        return entry

    @staticmethod
    def encode(dpt_id: str, value: Any) -> bytes:
        """Encode a Python value to KNX bytes for the given DPT."""
        return DPTCodec.get_type(dpt_id).pack(value)

    @staticmethod
    def decode(dpt_id: str, data: bytes) -> Any:
        """Decode KNX bytes to a Python value for the given DPT."""
        return DPTCodec.get_type(dpt_id).unpack(data)

    @staticmethod
    def render(dpt_id: str, value: Any) -> str:
        """Display string for a semantic value, e.g. '21.50 °C'."""
        dpt_type = DPTCodec.get_type(dpt_id)
        return dpt_type.render(dpt_type.coerce(value))

    @staticmethod
    def get_info(dpt_id: str) -> Optional[DatapointType]:
        """Get metadata for a DPT."""
        return _lookup(dpt_id)

    @staticmethod
    def list_dpts() -> list[dict]:
        """List all registered DPTs with metadata."""
        return [
            _REGISTRY[dpt_id].to_dict()
            for dpt_id in sorted(_REGISTRY, key=_sort_key)
        ]

    @staticmethod
    def is_supported(dpt_id: str) -> bool:
        """Check if a DPT is supported."""
        return _lookup(dpt_id) is not None


def _sort_key(dpt_id: str) -> tuple:
    main, _, sub = dpt_id.partition(".")
    return (int(main) if main.isdigit() else 0, main, sub)


# Module-level convenience functions
def encode(dpt_id: str, value: Any) -> bytes:
    return DPTCodec.encode(dpt_id, value)


def decode(dpt_id: str, data: bytes) -> Any:
    return DPTCodec.decode(dpt_id, data)


def get_dpt_info(dpt_id: str) -> Optional[dict]:
    info = DPTCodec.get_info(dpt_id)
    return info.to_dict() if info else None
