"""User domain manages identity, credentials, roles and lifecycle.

This domain handles:
- Value objects (Email, UserId, UserRole, UserStatus, TokenPair)
- User aggregate and its status state machine
- Domain events and the UserService orchestration layer
"""

from tessera_identity.domain.user.aggregates import User
from tessera_identity.domain.user.events import UserCreated, UserStatusChanged
from tessera_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    EmailStateError,
    InvalidEmailError,
    InvalidRoleError,
    InvalidStatusError,
    InvalidStatusTransitionError,
    InvalidUserIdError,
    UserNotFoundError,
    WeakPasswordError,
)
from tessera_identity.domain.user.ports import PasswordHasher
from tessera_identity.domain.user.repositories import UserRepository
from tessera_identity.domain.user.services import PasswordPolicy, UserService
from tessera_identity.domain.user.value_objects import (
    Email,
    TokenPair,
    UserId,
    UserRole,
    UserStatus,
)

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "EmailStateError",
    "InvalidEmailError",
    "InvalidRoleError",
    "InvalidStatusError",
    "InvalidStatusTransitionError",
    "InvalidUserIdError",
    "PasswordHasher",
    "PasswordPolicy",
    "TokenPair",
    "User",
    "UserCreated",
    "UserId",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    "UserService",
    "UserStatus",
    "UserStatusChanged",
    "WeakPasswordError",
]
