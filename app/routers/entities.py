# =============================================================================
# app/routers/entities.py - ExampleModel CRUD Endpoints
# =============================================================================
# Exposes create/read/update/delete for ExampleModel records.
# Handlers only deal with HTTP concerns; persistence lives in
# core.services.example_model_service.
#
# Handlers are plain `def`: FastAPI runs them in its threadpool, off the
# event loop.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Query, Response, status

from app.dependencies import ExampleModelServiceDep
from core.models.example_model import (
    MAX_DB_INT,
    MIN_DB_INT,
    ExampleModelCreate,
    ExampleModelResponse,
    ExampleModelUpdate,
)

router = APIRouter()

ModelId = Annotated[int, Path(ge=MIN_DB_INT, le=MAX_DB_INT, description="ExampleModel id")]

ERROR_RESPONSES = {
    400: {"description": "Validation error"},
    500: {"description": "Database error"},
}
NOT_FOUND_RESPONSE = {404: {"description": "ExampleModel not found"}}


# =============================================================================
# Endpoints
# =============================================================================

@router.post(
    "",
    response_model=ExampleModelResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
def create_entity(request: ExampleModelCreate, service: ExampleModelServiceDep):
    """
    Create a new ExampleModel.

    The id is assigned by the database and returned in the response.
    """
    return service.create(request)


@router.get(
    "",
    response_model=list[ExampleModelResponse],
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
def list_entities(
    service: ExampleModelServiceDep,
    offset: Annotated[int, Query(ge=0, le=MAX_DB_INT, description="Number of records to skip")] = 0,
    limit: Annotated[int | None, Query(ge=1, le=1000, description="Maximum records to return")] = None,
):
    """
    List ExampleModels ordered by id.

    Returns an empty list when there are no records.
    """
    return service.list_all(offset=offset, limit=limit)


@router.get(
    "/{model_id}",
    response_model=ExampleModelResponse,
    response_model_exclude_none=True,
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
)
def get_entity(model_id: ModelId, service: ExampleModelServiceDep):
    """Get a single ExampleModel."""
    return service.get_by_id(model_id)


@router.put(
    "/{model_id}",
    response_model=ExampleModelResponse,
    response_model_exclude_none=True,
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
)
def update_entity(
    model_id: ModelId,
    request: ExampleModelUpdate,
    service: ExampleModelServiceDep,
):
    """
    Update an ExampleModel.

    Fields present in the body are written; the id never changes.
    """
    return service.update(model_id, request)


@router.delete(
    "/{model_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
)
def delete_entity(model_id: ModelId, service: ExampleModelServiceDep):
    """Permanently delete an ExampleModel."""
    service.delete(model_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
