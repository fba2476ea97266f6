"""Tessera Identity - user management and token-based authentication.

This package handles:
- User domain (value objects, aggregate, status lifecycle, events)
- Authentication (registration, login, token issuance and refresh)
- Password hashing (bcrypt) and JWT signing (PyJWT)
- SQLAlchemy persistence and a FastAPI HTTP surface
"""

from tessera_identity.application.services import AuthenticationService
from tessera_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidStatusTransitionError,
    TokenPair,
    User,
    UserCreated,
    UserId,
    UserNotFoundError,
    UserRepository,
    UserRole,
    UserService,
    UserStatus,
    UserStatusChanged,
    WeakPasswordError,
)
from tessera_identity.exceptions import (
    AuthError,
    InactiveUserError,
    InvalidCredentialsError,
    InvalidTokenError,
)
from tessera_identity.services import JWTService, PasswordHashingService

__all__ = [
    # Domain - User
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidStatusTransitionError",
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
    # Exceptions
    "AuthError",
    "InactiveUserError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    # Services
    "AuthenticationService",
    "JWTService",
    "PasswordHashingService",
]
