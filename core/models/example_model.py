# =============================================================================
# core/models/example_model.py - ExampleModel Schemas
# =============================================================================
# These models define the API contract for ExampleModel operations:
# - ExampleModelCreate: Input for creating a record
# - ExampleModelUpdate: Input for replacing a record's fields
# - ExampleModelResponse: Output when returning a record to clients
#
# The id is assigned by the database. Clients never send it; if they do,
# it is ignored.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field

# Range of a signed 64-bit INTEGER column
MIN_DB_INT = -(2**63)
MAX_DB_INT = 2**63 - 1


class ExampleModelBase(BaseModel):
    """Fields shared by every ExampleModel schema."""

    model_config = ConfigDict(str_strip_whitespace=True)

    # Display name, required on every write
    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Human-readable name"
    )

    description: str | None = Field(
        default=None,
        max_length=500,
        description="Optional free-text description"
    )

    quantity: int | None = Field(
        default=None,
        ge=0,
        le=MAX_DB_INT,
        description="Optional non-negative quantity"
    )


class ExampleModelCreate(ExampleModelBase):
    """
    Schema for creating a new record.

    Example:
        {
            "name": "Widget",
            "description": "A small widget",
            "quantity": 3
        }
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "examples": [
                {"name": "Widget", "description": "A small widget", "quantity": 3},
                {"name": "A"},
            ]
        },
    )


class ExampleModelUpdate(ExampleModelBase):
    """
    Schema for updating a record.

    Only the fields present in the request body are written, so sending
    every field replaces the whole record. The id never changes.

    Example:
        {
            "name": "Renamed widget"
        }
    """


class ExampleModelResponse(ExampleModelBase):
    """
    Schema for returning a record to clients.

    Returned by every endpoint that yields a record. Built directly from
    ORM rows.

    Example:
        {
            "id": 1,
            "name": "Widget",
            "description": "A small widget",
            "quantity": 3
        }
    """

    model_config = ConfigDict(from_attributes=True)

    # Unique identifier assigned by the database
    id: int = Field(
        ...,
        ge=1,
        description="Unique record identifier"
    )
