"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from api.v1.dependencies import build_profile_service
from core.config import Settings, settings
from core.logging import setup_logging
from core.rate_limit import configure_rate_limits, limiter, rate_limit_exceeded_handler
from infrastructure.seed.mock_profiles import generate_mock_profiles

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Seed the directory on startup and let in-flight mutations settle on shutdown."""
    app_settings: Settings = app.state.settings
    service = app.state.profile_service

    if app_settings.seed_on_startup and service.count() == 0:
        loaded = service.seed(
            generate_mock_profiles(
                count=app_settings.seed_count,
                seed=app_settings.seed_random_seed,
            )
        )
        logger.info("directory_seeded", count=loaded)

    yield

    pending = service.pipeline.pending_count
    if pending:
        logger.info("draining_mutations", pending_count=pending)
    await service.pipeline.drain()


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Each app owns its own repository, selection and mutation pipeline.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings)
    configure_rate_limits(app_settings)

    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=app_settings.app_name,
        description=(
            "## Profile Directory\n\n"
            "Browse people by list, map and detail view, and manage them "
            "from the admin surface.\n\n"
            "### Features\n"
            "- **Search**: match name, description or interests\n"
            "- **Location filter**: match city, state or country\n"
            "- **Selection**: one profile in focus for the detail and map views\n"
            "- **Mutations**: create/update/delete settle after a simulated "
            "network delay; pass `wait=false` to poll `/api/v1/mutations/{id}`"
        ),
        version="1.0.0",
        debug=app_settings.debug,
        openapi_tags=[
            {"name": "health", "description": "Health check endpoints"},
            {"name": "profiles", "description": "Profile browsing and administration"},
            {"name": "mutations", "description": "Status of submitted mutations"},
            {"name": "selection", "description": "The profile currently in focus"},
        ],
    )

    app.state.settings = app_settings
    app.state.profile_service = build_profile_service(app_settings)

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
