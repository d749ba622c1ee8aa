"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flight_tracker.api.auth import router as auth_router
from flight_tracker.api.errors import register_error_handlers
from flight_tracker.api.flights import router as flights_router
from flight_tracker.app_logging import configure_logging
from flight_tracker.config import parse_cors_origins
from flight_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Proxying flights to record store",
            extra={"record_store_url": container.settings.record_store_url},
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Flight Tracker", lifespan=lifespan)
    app.state.container = container

    cors_origins = parse_cors_origins(container.settings.cors_origins)
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_error_handlers(app)
    app.include_router(auth_router)
    app.include_router(flights_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
