"""
Service layer utility functions.

Shared checks and helpers used by every registry service so that missing
rows, duplicate keys and role checks are reported the same way everywhere.
"""

from decimal import Decimal
from typing import Any, Dict, Optional, TypeVar

from fastapi.encoders import jsonable_encoder
from sqlalchemy import inspect

from parnaioca.core.exceptions import (
    AccessDeniedError,
    ConflictError,
    EntityNotFoundError,
    ValidationError,
)
from parnaioca.schemas.user import SessionContext

T = TypeVar("T")


def ensure_exists(
    entity: Optional[T],
    entity_name: str,
    entity_id: Optional[str] = None,
) -> T:
    """
    Ensure an entity exists, raising EntityNotFoundError if it doesn't.

    Args:
        entity: The entity to check (can be None)
        entity_name: Human-readable name of the entity type (e.g., "Stay", "Customer")
        entity_id: Optional ID of the entity for more specific error messages

    Returns:
        The entity if it exists

    Raises:
        EntityNotFoundError: If the entity is None
    """
    if entity is None:
        raise EntityNotFoundError(entity_name, entity_id)
    return entity


def ensure_admin_access(session: SessionContext) -> SessionContext:
    """
    Ensure the session carries the administrator role.

    Raises:
        AccessDeniedError: If the session role is not admin
    """
    if not session.is_admin:
        raise AccessDeniedError("Administrator", session.role.value)
    return session


def validate_unique_field(
    existing_entity: Optional[Any],
    field_name: str,
    entity_name: str,
    current_id: Optional[str] = None,
) -> None:
    """
    Validate that a field value is not used by another row.

    Args:
        existing_entity: Row already holding the value (if any)
        field_name: Name of the field
        entity_name: Name of the entity type
        current_id: ID of the row being edited, which may keep its own value

    Raises:
        ConflictError: If another row holds the value
    """
    if existing_entity is not None and existing_entity.id != current_id:
        raise ConflictError(
            f"{entity_name} with this {field_name} already exists", entity_name
        )


def validate_date_range(
    start_date: Any,
    end_date: Any,
    start_field: str = "start_date",
    end_field: str = "end_date",
) -> None:
    """
    Validate that the end date does not precede the start date.

    Raises:
        ValidationError: If end date is before start date
    """
    if end_date < start_date:
        raise ValidationError(
            f"{end_field} must not be before {start_field}",
            end_field,
            f"{end_date} (start: {start_date})",
        )


def snapshot(entity: Any) -> Dict[str, Any]:
    """JSON-safe copy of the column values of an ORM row."""
    mapper = inspect(entity).mapper
    return jsonable_encoder(
        {attr.key: getattr(entity, attr.key) for attr in mapper.column_attrs}
    )


def apply_updates(entity: Any, update_data: Dict[str, Any]) -> None:
    for field, value in update_data.items():
        setattr(entity, field, value)


def to_money(value: Any) -> Decimal:
    """Normalize an aggregate result to a two-place Decimal; None counts as zero."""
    return Decimal(str(value or 0)).quantize(Decimal("0.01"))
