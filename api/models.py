"""Pydantic models for the DPT Reference API."""

from pydantic import BaseModel, Field


class DPTResponse(BaseModel):
    id: str
    name: str
    kind: str
    unit: str = ""
    min: float | bool | None = None
    max: float | bool | None = None
    encoding_size: int
    labels: list[str] | None = None
    truncate: bool | None = None


class EncodeRequest(BaseModel):
    value: float | bool = Field(..., description="Semantic value (number or bool)")


class EncodeResponse(BaseModel):
    dpt: str
    payload: str = Field(..., description="Wire bytes as lowercase hex")
    text: str = Field(..., description="Display string of the requested value")


class DecodeRequest(BaseModel):
    payload: str = Field(..., description="Wire bytes as hex (e.g., '0c33')")


class DecodeResponse(BaseModel):
    dpt: str
    value: bool | float
    unit: str
    text: str
