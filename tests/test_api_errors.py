"""API error-path tests for the DPT reference API."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.anyio


async def test_unknown_dpt(client):
    resp = await client.get("/api/v1/dpts/42.001")
    assert resp.status_code == 404

    resp = await client.post("/api/v1/dpts/42.001/encode", json={"value": 1})
    assert resp.status_code == 404

    resp = await client.post("/api/v1/dpts/42.001/decode", json={"payload": "00"})
    assert resp.status_code == 404


async def test_decode_wrong_length(client):
    resp = await client.post("/api/v1/dpts/9.001/decode", json={"payload": "0c"})
    assert resp.status_code == 422
    assert "expected 2 byte(s)" in resp.json()["detail"]


async def test_decode_out_of_range(client):
    resp = await client.post("/api/v1/dpts/9.001/decode", json={"payload": "7fff"})
    assert resp.status_code == 422
    assert "outside range" in resp.json()["detail"]


async def test_decode_bad_hex(client):
    resp = await client.post("/api/v1/dpts/5.001/decode", json={"payload": "zz"})
    assert resp.status_code == 422


async def test_request_validation(client):
    resp = await client.post("/api/v1/dpts/9.001/encode", json={})
    assert resp.status_code == 422

    resp = await client.post("/api/v1/dpts/9.001/encode", json={"value": "warm"})
    assert resp.status_code == 422
