# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error response carries a machine-readable code, a human-readable
# detail and, where it helps, a suggestion for how to fix the request.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ExampleApiException(Exception):
    """
    Base exception for the ExampleModel API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "EXAMPLE_API_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Validation Exceptions
# =============================================================================

class EntityValidationError(ExampleApiException):
    """
    Raised when input fields are missing or malformed.

    `errors` is a list of {"field", "message", "type"} dicts, one per
    failing field.
    """

    def __init__(self, errors: list[dict[str, Any]]):
        fields = sorted({error["field"] for error in errors})
        super().__init__(
            message=f"Validation failed for: {', '.join(fields)}" if fields else "Validation failed",
            code="VALIDATION_ERROR",
            status_code=400,
            suggestion="Correct the listed fields and resend the request",
            details={"errors": errors},
        )
        self.errors = errors

    @classmethod
    def from_pydantic(cls, errors: list[dict[str, Any]]) -> "EntityValidationError":
        """
        Build from pydantic/FastAPI error dicts.

        Location prefixes such as "body", "path" and "query" are dropped from
        the field name; a bare body error (e.g. invalid JSON) is reported
        against "body".
        """
        normalized = []
        for error in errors:
            loc = [str(part) for part in error.get("loc", ())]
            if error.get("type") == "json_invalid":
                # loc is ("body", <byte offset>)
                loc = ["body"]
            elif loc and loc[0] in ("body", "path", "query"):
                loc = loc[1:] or loc[:1]
            normalized.append({
                "field": ".".join(loc) or "body",
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "value_error"),
            })
        return cls(normalized)


# =============================================================================
# Lookup Exceptions
# =============================================================================

class NotFoundError(ExampleApiException):
    """Raised when an operation targets an identifier that doesn't exist."""

    def __init__(self, resource: str, resource_id: Any, code: str = "NOT_FOUND"):
        super().__init__(
            message=f"{resource} not found: {resource_id}",
            code=code,
            status_code=404,
            suggestion=f"Check that the {resource} id is correct and hasn't been deleted",
            details={"id": resource_id},
        )
        self.resource_id = resource_id


class ExampleModelNotFoundError(NotFoundError):
    """Raised when an ExampleModel id doesn't exist."""

    def __init__(self, model_id: int):
        super().__init__("ExampleModel", model_id, code="EXAMPLE_MODEL_NOT_FOUND")


# =============================================================================
# Store Exceptions
# =============================================================================

class StoreError(ExampleApiException):
    """Raised when the database is unreachable or a statement fails."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            message=f"Database operation failed: {operation}",
            code="STORE_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details={"operation": operation, "error": error},
        )
        self.operation = operation


# =============================================================================
# Exception Handlers
# =============================================================================

async def example_api_exception_handler(
    request: Request,
    exc: ExampleApiException
) -> JSONResponse:
    """
    Convert ExampleApiException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.details}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    FastAPI reports these as 422 by default; they are answered with 400 and
    the same field-level shape as EntityValidationError.
    """
    error = EntityValidationError.from_pydantic(list(exc.errors()))
    return await example_api_exception_handler(request, error)


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )
