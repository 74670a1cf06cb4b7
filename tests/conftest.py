"""Pytest configuration and shared fixtures for DPT codec tests."""

from __future__ import annotations

import os
import sys

import pytest

_TESTS_DIR = os.path.dirname(__file__)
_PROJECT_ROOT = os.path.abspath(os.path.join(_TESTS_DIR, ".."))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def registry():
    """A registry seeded with the built-in types, isolated from the global one."""
    from dpt.types import BUILTIN_TYPES

    return {t.id: t for t in BUILTIN_TYPES}


@pytest.fixture
def catalog_file(tmp_path):
    """Write a catalog YAML file and return its path."""

    def _write(text: str, name: str = "catalog.yaml") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def app():
    """Create a FastAPI test app."""
    from api.app import create_app

    return create_app()


@pytest.fixture
async def client(app):
    """Create an AsyncClient for HTTP testing against the ASGI app."""
    import httpx

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as client:
        yield client
