"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from trilemma.config import settings
from trilemma.engine.layout import InvalidGeometryError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.trilemma_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _invalid_geometry_handler(request: Request, exc: InvalidGeometryError) -> JSONResponse:
    logger.info("Rejected geometry on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Trilemma",
        description="The Impossible Triangle — Speed, Quality, Cost circles with LLM trade-off analysis",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidGeometryError, _invalid_geometry_handler)

    from trilemma.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
