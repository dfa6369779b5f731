# =============================================================================
# core/services/example_model_service.py - ExampleModel Data Access
# =============================================================================
# Handles ExampleModel CRUD operations against the relational store.
# Separates HTTP concerns from database logic.
#
# One service instance wraps one request-scoped SQLAlchemy session. Every
# mutation is a single statement committed immediately, so no partially
# written record is ever visible to other requests.
# =============================================================================

import logging
from collections.abc import Mapping
from typing import Any, NoReturn, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lib.database import ExampleModelRecord
from core.models.example_model import (
    MAX_DB_INT,
    MIN_DB_INT,
    ExampleModelCreate,
    ExampleModelResponse,
    ExampleModelUpdate,
)
from app.exceptions import EntityValidationError, ExampleModelNotFoundError, StoreError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _validate(schema: type[SchemaT], entity: BaseModel | Mapping[str, Any]) -> SchemaT:
    """
    Coerce input into `schema`, raising EntityValidationError on bad fields.

    Instances of another schema are re-validated using only the fields that
    were explicitly set on them.
    """
    if isinstance(entity, schema):
        return entity
    if isinstance(entity, BaseModel):
        entity = entity.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(entity)
    except PydanticValidationError as e:
        raise EntityValidationError.from_pydantic(e.errors()) from e


class ExampleModelService:
    """
    Service for ExampleModel persistence.

    Provides a clean interface between API routes and database.

    Example:
        with SessionFactory() as session:
            service = ExampleModelService(session)
            created = service.create({"name": "A"})
            service.get_by_id(created.id)
            service.list_all()
    """

    def __init__(self, session: Session):
        self.session = session

    def create(self, entity: ExampleModelCreate | Mapping[str, Any]) -> ExampleModelResponse:
        """
        Insert a new record.

        Args:
            entity: Field values; any id is ignored

        Returns:
            The stored record including its generated id

        Raises:
            EntityValidationError: If required fields are missing or malformed
            StoreError: If the insert fails
        """
        data = _validate(ExampleModelCreate, entity)

        try:
            record = self.session.scalars(
                insert(ExampleModelRecord)
                .values(**data.model_dump())
                .returning(ExampleModelRecord)
            ).one()
            self.session.commit()
        except SQLAlchemyError as e:
            self._fail("create", e)

        logger.info(f"Created example model: {record.id}")
        return ExampleModelResponse.model_validate(record)

    def get_by_id(self, model_id: int) -> ExampleModelResponse:
        """
        Get a record by id.

        Raises:
            ExampleModelNotFoundError: If no record has this id
            StoreError: If the lookup fails
        """
        self._check_id(model_id)

        try:
            record = self.session.get(ExampleModelRecord, model_id)
        except SQLAlchemyError as e:
            self._fail("get", e)

        if record is None:
            raise ExampleModelNotFoundError(model_id)

        return ExampleModelResponse.model_validate(record)

    def list_all(self, offset: int = 0, limit: int | None = None) -> list[ExampleModelResponse]:
        """
        List records ordered by id.

        Args:
            offset: Number of records to skip
            limit: Maximum number of records to return (None for all)

        Returns:
            A new list on every call; empty if there are no records
        """
        if offset > MAX_DB_INT:
            return []

        query = select(ExampleModelRecord).order_by(ExampleModelRecord.id).offset(offset)
        if limit is not None:
            query = query.limit(limit)

        try:
            records = self.session.scalars(query).all()
        except SQLAlchemyError as e:
            self._fail("list", e)

        return [ExampleModelResponse.model_validate(record) for record in records]

    def count(self) -> int:
        """Count all stored records."""
        try:
            return self.session.scalar(select(func.count()).select_from(ExampleModelRecord)) or 0
        except SQLAlchemyError as e:
            self._fail("count", e)

    def update(
        self,
        model_id: int,
        entity: ExampleModelUpdate | Mapping[str, Any],
    ) -> ExampleModelResponse:
        """
        Update a record in place.

        Only the fields supplied in `entity` are written; the id is never
        changed.

        Raises:
            EntityValidationError: If supplied fields are malformed
            ExampleModelNotFoundError: If no record has this id
            StoreError: If the update fails
        """
        data = _validate(ExampleModelUpdate, entity)
        changes = data.model_dump(exclude_unset=True)
        self._check_id(model_id)

        try:
            record = self.session.scalars(
                update(ExampleModelRecord)
                .where(ExampleModelRecord.id == model_id)
                .values(**changes)
                .returning(ExampleModelRecord)
            ).one_or_none()
            self.session.commit()
        except SQLAlchemyError as e:
            self._fail("update", e)

        if record is None:
            raise ExampleModelNotFoundError(model_id)

        logger.info(f"Updated example model: {model_id}")
        return ExampleModelResponse.model_validate(record)

    def delete(self, model_id: int) -> None:
        """
        Hard-delete a record.

        Raises:
            ExampleModelNotFoundError: If no record has this id
            StoreError: If the delete fails
        """
        self._check_id(model_id)

        try:
            deleted_id = self.session.scalars(
                delete(ExampleModelRecord)
                .where(ExampleModelRecord.id == model_id)
                .returning(ExampleModelRecord.id)
            ).one_or_none()
            self.session.commit()
        except SQLAlchemyError as e:
            self._fail("delete", e)

        if deleted_id is None:
            raise ExampleModelNotFoundError(model_id)

        logger.info(f"Deleted example model: {model_id}")

    @staticmethod
    def _check_id(model_id: int) -> None:
        """An id outside the column range can't exist in the store."""
        if not MIN_DB_INT <= model_id <= MAX_DB_INT:
            raise ExampleModelNotFoundError(model_id)

    def _fail(self, operation: str, error: SQLAlchemyError) -> NoReturn:
        """Roll back the session and re-raise as StoreError."""
        self.session.rollback()
        logger.error(f"Failed to {operation} example model: {error}")
        raise StoreError(operation, str(error)) from error
