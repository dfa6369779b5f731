# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the ExampleModel API.
# create_app() builds a configured FastAPI application: database engine,
# session factory, exception handlers and routers.
#
# Usage:
#   uvicorn app.main:app --reload
#   examplemodel-api                 (console script, uses API_HOST/API_PORT)
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from app import __version__
from app.config import Settings, get_settings
from app.exceptions import (
    ExampleApiException,
    example_api_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.routers import entities, health
from lib.database import create_db_engine, create_session_factory, init_database

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration to run with (defaults to environment settings)

    Returns:
        FastAPI: Application with engine and session factory on app.state
    """
    settings = settings or get_settings()
    configure_logging(settings)

    engine = create_db_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        - Startup: Create the schema if it doesn't exist
        - Shutdown: Release pooled connections
        """
        logger.info(f"Starting ExampleModel API in {settings.ENVIRONMENT} mode")
        init_database(engine)

        yield

        logger.info("Shutting down ExampleModel API")
        engine.dispose()

    app = FastAPI(
        title="ExampleModel API",
        description="CRUD API for ExampleModel records backed by a relational database.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Entities",
                "description": "Create, read, update and delete ExampleModel records",
            },
            {
                "name": "Health",
                "description": "API health and readiness checks",
            },
        ],
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    app.add_exception_handler(ExampleApiException, example_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    app.include_router(
        entities.router,
        prefix="/entities",
        tags=["Entities"]
    )

    app.include_router(
        health.router,
        tags=["Health"]
    )

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "ExampleModel API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app


def run() -> None:
    """Start uvicorn with the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.API_HOST, port=settings.API_PORT)


app = create_app()


if __name__ == "__main__":
    run()
