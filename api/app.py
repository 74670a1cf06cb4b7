"""FastAPI application factory for the DPT Reference API.

Exposes the datapoint registry for tooling and UIs: list and inspect DPTs,
encode semantic values, decode wire payloads.
"""

import logging

from fastapi import FastAPI

from dpt import DPTCodec

from .routes_dpts import router as dpts_router

logger = logging.getLogger("dptcodec.api")


def create_app() -> FastAPI:
    """Create the FastAPI application with all routes."""
    app = FastAPI(
        title="KNX DPT Codec",
        description="Reference API for KNX datapoint type encoding",
        version="1.0.0",
    )

    app.include_router(dpts_router)

    # Health endpoint
    @app.get("/api/v1/health", tags=["system"])
    def health():
        """Health check — returns the number of registered DPTs."""
        return {"status": "ok", "dpt_count": len(DPTCodec.list_dpts())}

    logger.info("FastAPI app created with %d routes", len(app.routes))
    return app
