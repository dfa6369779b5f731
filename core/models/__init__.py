# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - example_model.py: ExampleModel CRUD schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .example_model import (
    MAX_DB_INT,
    MIN_DB_INT,
    ExampleModelBase,
    ExampleModelCreate,
    ExampleModelResponse,
    ExampleModelUpdate,
)

__all__ = [
    "MAX_DB_INT",
    "MIN_DB_INT",
    "ExampleModelBase",
    "ExampleModelCreate",
    "ExampleModelResponse",
    "ExampleModelUpdate",
]
