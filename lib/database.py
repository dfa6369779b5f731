# =============================================================================
# lib/database.py - Relational Store Access
# =============================================================================
# This module owns everything that touches the SQLAlchemy engine:
# - ORM table definition for example_models
# - Engine creation (SQLite pragmas and in-memory pooling handled here)
# - Session factory used to open one session per request
# - Schema creation and connectivity checks
#
# Usage:
#   from lib.database import create_db_engine, create_session_factory
#   engine = create_db_engine("sqlite:///./example_models.db")
#   SessionFactory = create_session_factory(engine)
#   with SessionFactory() as session:
#       ...
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Integer, String, create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


# =============================================================================
# ORM Models
# =============================================================================

class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


class ExampleModelRecord(Base):
    """
    Row in the example_models table.

    The id is generated by the store on insert and never written afterwards.
    """

    __tablename__ = "example_models"
    # SQLite would otherwise reuse the id of a deleted last row
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    quantity: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<ExampleModelRecord id={self.id} name={self.name!r}>"


# =============================================================================
# Engine & Sessions
# =============================================================================

def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create the SQLAlchemy engine for the configured store.

    SQLite connections may be used from FastAPI's worker threads, so the
    same-thread check is disabled. An in-memory SQLite database lives only as
    long as its connection, so it is pinned to a single shared connection.
    """
    kwargs: dict[str, Any] = {"echo": echo}

    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    engine = create_engine(database_url, **kwargs)

    if engine.dialect.name == "sqlite":
        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    logger.info(f"Database engine created for dialect: {engine.dialect.name}")
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """
    Build the per-request session factory.

    expire_on_commit is off so rows returned by a committed statement can
    still be read while the response is being built.
    """
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_database(engine: Engine) -> None:
    """Create all tables that don't exist yet. Idempotent."""
    Base.metadata.create_all(engine)
    logger.info("Database schema ready")


def check_connection(session: Session) -> None:
    """
    Run a trivial query against the store.

    Raises:
        sqlalchemy.exc.SQLAlchemyError: If the store can't be reached
    """
    session.execute(text("SELECT 1"))
