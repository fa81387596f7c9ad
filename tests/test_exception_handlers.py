import json

import pytest
from starlette.requests import Request

from parnaioca.core.exception_handlers import EXCEPTION_HANDLERS
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


def make_request() -> Request:
    return Request(
        {
            "type": "http",
            "method": "POST",
            "path": "/api/v1/check-in/",
            "headers": [],
            "query_string": b"",
        }
    )


async def respond(exc: DomainException):
    response = await EXCEPTION_HANDLERS[type(exc)](make_request(), exc)
    return response.status_code, json.loads(response.body)


@pytest.mark.parametrize(
    "exc, status_code, error_type",
    [
        (EntityNotFoundError("Stay", "s-1"), 404, "entity_not_found"),
        (AccessDeniedError("admin", "staff"), 403, "access_denied"),
        (ValidationError("Unknown type", "type_id", "t-9"), 400, "validation_error"),
        (ConflictError("Number taken", "Accommodation"), 409, "conflict_error"),
        (
            BusinessRuleViolationError("stay_not_checked_in", "Stay is closed"),
            422,
            "business_rule_violation",
        ),
        (InactiveUserError(), 403, "inactive_user"),
        (FeatureNotAvailableError("Backup"), 501, "feature_not_available"),
    ],
)
async def test_domain_errors_map_to_status_and_type(exc, status_code, error_type):
    code, body = await respond(exc)

    assert code == status_code
    assert body["error_type"] == error_type
    assert body["detail"] == exc.message
    if exc.details:
        assert body["details"] == exc.details
    else:
        assert "details" not in body


async def test_rule_context_reaches_the_client():
    _, body = await respond(
        BusinessRuleViolationError(
            "accommodation_occupied", "Occupied", {"accommodation_id": "a-1"}
        )
    )
    assert body["details"] == {
        "rule_name": "accommodation_occupied",
        "accommodation_id": "a-1",
    }


async def test_unmapped_domain_error_hides_its_message():
    code, body = await respond(DomainException("stale cache for stay s-1"))

    assert code == 500
    assert body == {
        "detail": "An internal error occurred",
        "error_type": "domain_error",
    }
