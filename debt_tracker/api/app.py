"""FastAPI application for the debt tracker."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from debt_tracker.api.debts import router as debts_router
from debt_tracker.config import get_settings
from debt_tracker.services.db import dispose_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Debt tracker API starting")
    yield
    dispose_engine()
    logger.info("Debt tracker API stopped")


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.api_title,
        description="Personal debt ledger: debts, payments and progress",
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(debts_router)

    @app.get("/health")
    def health_check() -> dict:
        """Health check endpoint for monitoring."""
        return {"status": "ok"}

    return app


app = create_app()
