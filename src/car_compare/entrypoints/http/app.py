from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import AsyncIterator

from fastapi import FastAPI

from car_compare.entrypoints.http.dependencies import (
    build_compare_view_session,
    build_http_client,
)
from car_compare.entrypoints.http.exception_handlers import register_exception_handlers
from car_compare.entrypoints.http.routes.catalog import router as catalog_router
from car_compare.entrypoints.http.routes.comparison import router as comparison_router
from car_compare.entrypoints.http.routes.health import router as health_router
from car_compare.entrypoints.http.routes.labels import router as labels_router
from car_compare.entrypoints.http.spa import STATIC_DIR, SPAStaticFiles

logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Own the HTTP client and the view session for the app's lifetime.

    The initial catalog load runs in the background so the app answers
    requests (with an empty catalog) while the fetch is pending.
    """
    client = build_http_client()
    session = build_compare_view_session(client)
    app.state.compare_view_session = session

    initial_load = asyncio.create_task(session.load())
    try:
        yield
    finally:
        session.close()
        initial_load.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await initial_load
        await client.aclose()
        logger.info("Compare view session closed")


def build_app() -> FastAPI:
    app = FastAPI(
        title="Car Compare API",
        description="""
        Browse a car catalog grouped by maker and model, pick cars and
        compare them side by side.

        ## Features
        - Grouped catalog with search
        - Selection of cars for comparison
        - Side-by-side comparison of the selected cars
        - Localized labels for offer statuses and payment methods

        ## Authentication
        No authentication required.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=lifespan,
        license_info={
            "name": "Proprietary",
        },
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(catalog_router, prefix="/v1")
    app.include_router(comparison_router, prefix="/v1")
    app.include_router(labels_router, prefix="/v1")

    # SPA shell last so API routes win
    app.mount("/", SPAStaticFiles(directory=STATIC_DIR, html=True), name="spa")

    return app


app = build_app()
