"""
Exception handlers for converting domain exceptions to HTTP responses.

Every failure ends in a JSON body of the same shape, so a client can show a
notification and keep its previous state.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from parnaioca.core.exceptions import (
    AccessDeniedError,
    BusinessRuleViolationError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    FeatureNotAvailableError,
    InactiveUserError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def create_error_response(
    status_code: int,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    error_type: Optional[str] = None,
) -> JSONResponse:
    """Build the JSON body shared by every failure."""
    content = {"detail": message}

    if error_type:
        content["error_type"] = error_type

    if details:
        content["details"] = jsonable_encoder(details)

    return JSONResponse(status_code=status_code, content=content)


def domain_error_handler(
    status_code: int, error_type: str, level: int = logging.WARNING
) -> Callable[[Request, DomainException], Awaitable[JSONResponse]]:
    """Build the handler answering one DomainException subclass.

    The exception's message and details travel to the client unchanged.
    Exception kinds differ only in status code, ``error_type`` and log level.
    """

    async def handler(request: Request, exc: DomainException) -> JSONResponse:
        logger.log(
            level,
            f"{type(exc).__name__} on {request.method} {request.url.path}: "
            f"{exc.message}",
        )
        return create_error_response(
            status_code=status_code,
            message=exc.message,
            details=exc.details,
            error_type=error_type,
        )

    return handler


async def domain_exception_handler(
    request: Request, exc: DomainException
) -> JSONResponse:
    """Catch-all for domain errors without a mapping; the message stays internal."""
    logger.error(f"Unhandled domain exception: {exc.message}")

    return create_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message="An internal error occurred",
        error_type="domain_error",
    )


async def integrity_error_handler(
    request: Request, exc: IntegrityError
) -> JSONResponse:
    """Translate a constraint violation the services did not anticipate.

    Unique violations, including the one-checked-in-stay index, answer 409;
    every other constraint answers 400.
    """
    logger.error(f"Database integrity error: {str(exc)}")

    # Constraint names and wording differ between PostgreSQL and SQLite
    error_text = str(exc).lower()
    status_code = status.HTTP_400_BAD_REQUEST
    error_message = "Database constraint violation"
    if (
        "uq_stays_accommodation_checked_in" in error_text
        or "stays.accommodation_id" in error_text
    ):
        status_code = status.HTTP_409_CONFLICT
        error_message = "Accommodation already has a checked-in stay"
    elif "unique" in error_text or "duplicate key" in error_text:
        status_code = status.HTTP_409_CONFLICT
        error_message = "A record with this value already exists"
    elif "foreign key" in error_text:
        error_message = "Referenced record does not exist"
    elif "not null" in error_text:
        error_message = "Required field is missing"

    return create_error_response(
        status_code=status_code,
        message=error_message,
        error_type="integrity_error",
    )


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Any other store failure means the backend cannot serve the request now."""
    logger.error(f"Data store error on {request.url}: {str(exc)}")

    return create_error_response(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        message="Data store is unavailable, try again later",
        error_type="store_unavailable",
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report schema failures per field under ``details.validation_errors``."""
    logger.warning(f"Request validation error: {exc.errors()}")

    return create_error_response(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        message="Request validation failed",
        details={"validation_errors": exc.errors()},
        error_type="request_validation_error",
    )


# Starlette resolves a handler along the exception's MRO
EXCEPTION_HANDLERS = {
    EntityNotFoundError: domain_error_handler(
        status.HTTP_404_NOT_FOUND, "entity_not_found", logging.INFO
    ),
    AccessDeniedError: domain_error_handler(
        status.HTTP_403_FORBIDDEN, "access_denied"
    ),
    ValidationError: domain_error_handler(
        status.HTTP_400_BAD_REQUEST, "validation_error"
    ),
    ConflictError: domain_error_handler(status.HTTP_409_CONFLICT, "conflict_error"),
    BusinessRuleViolationError: domain_error_handler(
        status.HTTP_422_UNPROCESSABLE_ENTITY, "business_rule_violation"
    ),
    InactiveUserError: domain_error_handler(
        status.HTTP_403_FORBIDDEN, "inactive_user"
    ),
    FeatureNotAvailableError: domain_error_handler(
        status.HTTP_501_NOT_IMPLEMENTED, "feature_not_available", logging.INFO
    ),
    DomainException: domain_exception_handler,
    IntegrityError: integrity_error_handler,
    SQLAlchemyError: store_error_handler,
    RequestValidationError: request_validation_error_handler,
}
