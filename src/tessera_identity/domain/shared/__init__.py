"""Shared domain building blocks (exceptions, time helpers)."""

from tessera_identity.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    DomainLogicError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from tessera_identity.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "BusinessRuleViolation",
    "ConflictError",
    "DomainException",
    "DomainLogicError",
    "EntityNotFoundError",
    "ErrorCode",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
