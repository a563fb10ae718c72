"""Main FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from facts_api.core.errors import register_exception_handlers
from facts_api.core.logging import configure_logging
from facts_api.core.middleware import request_context_middleware
from facts_api.core.settings import get_settings
from facts_api.db.postgres.session import close_db_session, init_db_session
from facts_api.features.facts.router import router as facts_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.
    Creates the database engine on startup and disposes it on shutdown.
    """
    # Startup
    settings = get_settings()
    logger.info("Starting %s v%s", settings.app_name, settings.app_version)
    init_db_session()

    yield

    # Shutdown
    await close_db_session()
    logger.info("Shutting down application")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Extracts facts from text with a language model and caches them in Postgres",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_context_middleware)

    register_exception_handlers(app)

    # Include routers
    app.include_router(facts_router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Create the app instance
app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "facts_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
