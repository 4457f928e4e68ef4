from collections.abc import Mapping
from typing import Any, Optional, Type
import logging

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from datamodel.registry import SchemaRegistry
from datamodel.services.exceptions import (
    DataModelError,
    MissingRequiredField,
    TypeMismatch,
    UniquenessViolation,
)

logger = logging.getLogger(__name__)

# Empty strings count as absent for required text fields
MISSING_ERROR_TYPES = {"missing", "string_too_short"}


class ModelService:
    """
    Generic service for create / read / update / delete on one model.

    Subclasses set ``model``, ``create_schema`` and ``update_schema``.
    Input is validated through the pydantic schemas; validation and
    integrity failures are turned into DataModelError subclasses after
    the session is rolled back.
    """

    model: Type = None
    create_schema: Type[BaseModel] = None
    update_schema: Type[BaseModel] = None

    def __init__(self, db: Session, registry: Optional[SchemaRegistry] = None):
        if registry is None:
            from datamodel.database import default_registry
            registry = default_registry()
        self.db = db
        self.registry = registry

    @property
    def model_name(self) -> str:
        return self.model.__name__

    def create(self, data: Any):
        """
        Create a new record.

        Args:
            data: Plain field-value mapping or an instance of create_schema

        Returns:
            Created record, refreshed so server-side timestamps are loaded

        Raises:
            MissingRequiredField: If a required field is absent
            TypeMismatch: If a value cannot be coerced
            UniquenessViolation: If a unique field collides
        """
        payload = self._validate(self.create_schema, data)
        values = payload.model_dump()
        self._check_unique(values)

        record = self.model(**values)
        self.db.add(record)
        self._commit()
        self.db.refresh(record)

        logger.info(f"{self.model_name} #{record.id} created")
        return record

    def get_by_id(self, record_id: int):
        """Get a record by ID, or None if not found."""
        return self.db.query(self.model).filter(self.model.id == record_id).first()

    def update(self, record_id: int, data: Any):
        """
        Update an existing record.

        Only the supplied fields change. None clears an optional field
        and is rejected for a required one.

        Args:
            record_id: ID of record to update
            data: Partial field-value mapping or an instance of update_schema

        Returns:
            Updated record or None if not found
        """
        record = self.get_by_id(record_id)

        if not record:
            return None

        payload = self._validate(self.update_schema, data)
        update_data = payload.model_dump(exclude_unset=True)

        for field in self.model.NON_NULL_FIELDS:
            if field in update_data and update_data[field] is None:
                error = self._null_error(field)
                logger.warning(f"Rejected {self.model_name} #{record_id} update: {error}")
                raise error

        self._check_unique(update_data, exclude_id=record_id)

        for field, value in update_data.items():
            setattr(record, field, value)

        self._commit()
        self.db.refresh(record)

        logger.info(f"{self.model_name} #{record_id} updated ({', '.join(update_data) or 'no changes'})")
        return record

    def delete(self, record_id: int) -> bool:
        """
        Delete a record.

        Returns:
            True if deleted, False if not found
        """
        record = self.get_by_id(record_id)

        if not record:
            return False

        self.db.delete(record)
        self._commit()

        logger.info(f"{self.model_name} #{record_id} deleted")
        return True

    def find_by_reference(self, model_name: str, record_id: Optional[int]):
        """
        Resolve a weak reference through the schema registry.

        Returns:
            The referenced record, or None if unset or dangling
        """
        if record_id is None:
            return None
        target = self.registry.get(model_name)
        return self.db.query(target).filter(target.id == record_id).first()

    def _validate(self, schema: Type[BaseModel], data: Any) -> BaseModel:
        if isinstance(data, schema):
            return data
        if isinstance(data, BaseModel):
            data = data.model_dump(exclude_unset=True)
        if not isinstance(data, Mapping):
            raise TypeMismatch(
                self.model_name,
                message=f"{self.model_name}: expected a mapping of field values, got {type(data).__name__}"
            )
        try:
            return schema.model_validate(dict(data))
        except ValidationError as e:
            error = self._translate(e)
            logger.warning(f"Rejected {self.model_name} input: {error}")
            raise error from e

    def _translate(self, exc: ValidationError) -> DataModelError:
        errors = exc.errors()
        for error in errors:
            field = _field_name(error)
            if error["type"] in MISSING_ERROR_TYPES:
                return MissingRequiredField(self.model_name, field)
            if error.get("input", ...) is None:
                return self._null_error(field)

        first = errors[0]
        field = _field_name(first)
        return TypeMismatch(self.model_name, field, f"{self.model_name}: '{field}' {first['msg']}")

    def _null_error(self, field: Optional[str]) -> DataModelError:
        """None is "missing" for a required field and a type error for any other non-null one."""
        if field in self.model.REQUIRED_FIELDS:
            return MissingRequiredField(self.model_name, field)
        return TypeMismatch(self.model_name, field, f"{self.model_name}: '{field}' may not be None")

    def _check_unique(self, values: dict, exclude_id: Optional[int] = None) -> None:
        for field in self.model.UNIQUE_FIELDS:
            value = values.get(field)
            if value is None:
                continue
            query = self.db.query(self.model).filter(getattr(self.model, field) == value)
            if exclude_id is not None:
                query = query.filter(self.model.id != exclude_id)
            if query.first() is not None:
                logger.warning(f"Rejected {self.model_name}: {field} '{value}' already exists")
                raise UniquenessViolation(self.model_name, field, value)

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            # A concurrent write slipped past the pre-checks
            self.db.rollback()
            logger.error(f"Integrity error writing {self.model_name}: {e.orig}")
            raise self._integrity_error(e) from e
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error writing {self.model_name}: {e}")
            raise

    def _integrity_error(self, exc: IntegrityError) -> DataModelError:
        message = str(exc.orig).lower()
        if "not null" in message or "null value" in message:
            return self._null_error(self._column_in(message, self.model.NON_NULL_FIELDS))
        return UniquenessViolation(self.model_name, self._column_in(message, self.model.UNIQUE_FIELDS))

    def _column_in(self, message: str, fields) -> Optional[str]:
        """
        Pick the column a driver error message names.

        SQLite reports "table.column", PostgreSQL quotes the column or
        names it in the "Key (column)=" detail and the index name.
        """
        table = self.model.__tablename__
        for field in fields:
            patterns = (
                f"{table}.{field}",
                f'"{field}"',
                f"({field})=",
                f"ix_{table}_{field}",
                f"{table}_{field}_key",
            )
            if any(pattern in message for pattern in patterns):
                return field
        return None


def _field_name(error: dict) -> Optional[str]:
    return ".".join(str(part) for part in error["loc"]) or None
