"""DPT catalog and encode/decode routes."""

import logging

from fastapi import APIRouter, HTTPException

from dpt import DPTCodec, DPTError, UnknownDPTError

from .models import (
    DecodeRequest,
    DecodeResponse,
    DPTResponse,
    EncodeRequest,
    EncodeResponse,
)

logger = logging.getLogger("dptcodec.api")

router = APIRouter(prefix="/api/v1/dpts", tags=["dpts"])


def _get_type(dpt_id: str):
    try:
        return DPTCodec.get_type(dpt_id)
    except UnknownDPTError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.get("", response_model=list[DPTResponse])
def list_dpts():
    """List every registered DPT with its metadata."""
    return DPTCodec.list_dpts()


@router.get("/{dpt_id}", response_model=DPTResponse)
def get_dpt(dpt_id: str):
    """Metadata for one DPT (falls back to the main type)."""
    return _get_type(dpt_id).to_dict()


@router.post("/{dpt_id}/encode", response_model=EncodeResponse)
def encode_value(dpt_id: str, body: EncodeRequest):
    """Encode a semantic value. Out-of-range input is clipped, never rejected."""
    dpt_type = _get_type(dpt_id)
    try:
        value = dpt_type.coerce(body.value)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    payload = dpt_type.pack(value)
    return {
        "dpt": dpt_type.id,
        "payload": payload.hex(),
        "text": dpt_type.render(value),
    }


@router.post("/{dpt_id}/decode", response_model=DecodeResponse)
def decode_payload(dpt_id: str, body: DecodeRequest):
    """Decode a hex payload. Wrong width or out-of-range values give 422."""
    dpt_type = _get_type(dpt_id)
    try:
        data = bytes.fromhex(body.payload)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Invalid hex payload: {e}") from e
    try:
        value = dpt_type.unpack(data)
    except DPTError as e:
        logger.debug("Decode of %s as %s failed: %s", body.payload, dpt_type.id, e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    return {
        "dpt": dpt_type.id,
        "value": value,
        "unit": dpt_type.unit,
        "text": dpt_type.render(value),
    }
