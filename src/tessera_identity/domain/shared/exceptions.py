"""Domain exception hierarchy and stable error codes.

Every error raised by the domain, application and adapter layers derives
from ``DomainException`` and carries an ``ErrorCode``. The presentation
layer maps codes to HTTP statuses in one table, so new exceptions only
need a code.
"""

from enum import Enum
from typing import Any, ClassVar, Optional


class ErrorCode(str, Enum):
    """Error codes exposed to API clients. Values must stay stable."""

    # Validation (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_USER_ID = "INVALID_USER_ID"
    INVALID_ROLE = "INVALID_ROLE"
    INVALID_STATUS = "INVALID_STATUS"
    WEAK_PASSWORD = "WEAK_PASSWORD"

    # Authentication (401)
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Authorization (403)
    INACTIVE_USER = "INACTIVE_USER"

    # Not found (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Conflict (409)
    CONFLICT = "CONFLICT"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"

    # Business rules (422)
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    INVALID_STATUS_TRANSITION = "INVALID_STATUS_TRANSITION"

    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base class for errors with a user-safe message and a stable code.

    Attributes
    ----------
    message
        Human-readable message, safe to return to clients
    code
        Stable error code; defaults to the class's ``default_code``
    details
        Extra context for logs, never sent to clients
    """

    default_code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: Optional[ErrorCode] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"code={self.code.value}, details={self.details!r})"
        )


class ValidationError(DomainException):
    """Input rejected by a value object or policy; the caller can fix it."""

    default_code = ErrorCode.VALIDATION_ERROR


class BusinessRuleViolation(DomainException):
    """A state-machine guard or other domain rule refused the operation."""

    default_code = ErrorCode.BUSINESS_RULE_VIOLATION


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND


class ConflictError(DomainException):
    """The operation clashes with stored state, e.g. a taken email."""

    default_code = ErrorCode.CONFLICT


class DomainLogicError(DomainException):
    """An internal invariant is broken; this signals a bug, not bad input."""

    default_code = ErrorCode.INTERNAL_ERROR
