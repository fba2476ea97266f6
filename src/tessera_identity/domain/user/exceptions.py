"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tessera_identity.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainLogicError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)

if TYPE_CHECKING:
    from tessera_identity.domain.user.value_objects.user_status import UserStatus


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_EMAIL)


class InvalidUserIdError(ValidationError):
    """Raised when a user id is empty or not a UUID."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_USER_ID)


class InvalidRoleError(ValidationError):
    """Raised when a role string does not match any known role."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_ROLE)


class InvalidStatusError(ValidationError):
    """Raised when a status string does not match any known status."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_STATUS)


class WeakPasswordError(ValidationError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements") -> None:
        super().__init__(message, ErrorCode.WEAK_PASSWORD)


class InvalidStatusTransitionError(BusinessRuleViolation):
    """Raised when a lifecycle transition is not allowed from the current status."""

    def __init__(self, current_status: UserStatus, action: str) -> None:
        self.current_status = current_status
        self.action = action
        super().__init__(
            f'User with status "{current_status.value}" cannot be {action}',
            ErrorCode.INVALID_STATUS_TRANSITION,
            details={"current_status": current_status.value, "action": action},
        )


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "User with this email already exists",
            ErrorCode.EMAIL_ALREADY_EXISTS,
            details={"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(
            f"User not found: {identifier}",
            ErrorCode.USER_NOT_FOUND,
        )


class EmailStateError(DomainLogicError):
    """An Email reached code that requires a validated address but has no '@'."""

    def __init__(self) -> None:
        super().__init__("Invalid email format - no @ symbol found")
