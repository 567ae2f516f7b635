"""Agency API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map AgencyError → structured JSON responses
    - CORS configured from settings
    - Connection pool created on startup and disposed on shutdown via lifespan
    - OpenAPI docs served at /docs (Swagger UI) and /redoc
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agency_api.api.error_handlers import register_error_handlers
from agency_api.api.routes import agents, customers, health
from agency_api.config import get_settings
from agency_api.infrastructure import database
from agency_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"{settings.app_name} started")
    yield
    await manager.dispose()
    logger.info(f"{settings.app_name} shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=settings.app_description,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "service": settings.app_name,
            "status": "running",
            "docs": app.docs_url,
        }

    app.include_router(health.router)
    app.include_router(customers.router)
    app.include_router(agents.router)
    register_error_handlers(app)
    return app


app = create_app()
