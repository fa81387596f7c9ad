"""
Domain exceptions for the inn management system.

Services raise these for failures a user can act on: a missing customer, an
occupied accommodation, a staff session reaching an admin action. The table in
``exception_handlers`` turns each kind into a status code and a JSON body, so no
service builds an HTTP response itself.
"""

from typing import Optional


class DomainException(Exception):
    """Base class; ``details`` is copied into the response body as is."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class EntityNotFoundError(DomainException):
    """No customer, accommodation, stay or other row carries the requested id."""

    def __init__(self, entity_name: str, entity_id: Optional[str] = None):
        self.entity_name = entity_name
        self.entity_id = entity_id
        message = (
            f"{entity_name} with id {entity_id} not found"
            if entity_id
            else f"{entity_name} not found"
        )
        super().__init__(message, {"entity_name": entity_name, "entity_id": entity_id})


class AccessDeniedError(DomainException):
    """The session's role is below the one the operation needs."""

    def __init__(self, required_role: str, current_role: Optional[str] = None):
        self.required_role = required_role
        self.current_role = current_role
        message = f"{required_role} role required"
        if current_role:
            message = f"{message}, session has role {current_role}"
        super().__init__(
            message, {"required_role": required_role, "current_role": current_role}
        )


class ValidationError(DomainException):
    """A well-formed form that a stored row contradicts, e.g. an unknown type id."""

    def __init__(
        self, message: str, field: Optional[str] = None, value: Optional[str] = None
    ):
        self.field = field
        self.value = value
        super().__init__(message, {"field": field, "value": value})


class ConflictError(DomainException):
    """A unique value is taken, or the accommodation already holds a stay."""

    def __init__(self, message: str, conflicting_entity: Optional[str] = None):
        self.conflicting_entity = conflicting_entity
        super().__init__(message, {"conflicting_entity": conflicting_entity})


class BusinessRuleViolationError(DomainException):
    """An action the current state forbids.

    ``rule_name`` is a stable tag clients can branch on, such as
    ``stay_not_checked_in`` or ``accommodation_occupied``; ``context`` is merged
    into the details next to it.
    """

    def __init__(self, rule_name: str, message: str, context: Optional[dict] = None):
        self.rule_name = rule_name
        super().__init__(message, {"rule_name": rule_name, **(context or {})})


class InactiveUserError(DomainException):
    def __init__(self):
        super().__init__("User account is inactive")


class FeatureNotAvailableError(DomainException):
    """Raised by actions that are announced but not offered yet."""

    def __init__(self, feature: str):
        self.feature = feature
        super().__init__(f"{feature} will be available soon", {"feature": feature})
