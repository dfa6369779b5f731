# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The session factory is built once by create_app() and kept on app.state;
# every request gets its own session, closed when the request finishes.
# =============================================================================

from collections.abc import Iterator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.config import Settings
from core.services.example_model_service import ExampleModelService


def get_settings_from_app(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def get_db(request: Request) -> Iterator[Session]:
    """
    Open a database session for the duration of one request.

    The session is closed on every exit path, including errors raised by
    the route handler.
    """
    session = request.app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings_from_app)]
DbSessionDep = Annotated[Session, Depends(get_db)]


def get_example_model_service(session: DbSessionDep) -> ExampleModelService:
    """Service bound to the request's database session."""
    return ExampleModelService(session)


ExampleModelServiceDep = Annotated[ExampleModelService, Depends(get_example_model_service)]
