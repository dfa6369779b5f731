# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable infrastructure:
# - database.py: SQLAlchemy engine, session factory and ORM models
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.database import (
    Base,
    ExampleModelRecord,
    check_connection,
    create_db_engine,
    create_session_factory,
    init_database,
)

__all__ = [
    "Base",
    "ExampleModelRecord",
    "check_connection",
    "create_db_engine",
    "create_session_factory",
    "init_database",
]
