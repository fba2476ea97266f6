"""Authentication exceptions.

These exceptions are raised by the authentication service and the
application commands, and are mapped to HTTP responses by the
presentation layer.
"""

from tessera_identity.domain.shared.exceptions import DomainException, ErrorCode


class AuthError(DomainException):
    """Base exception for all authentication errors."""

    def __init__(
        self,
        message: str = "Authentication error",
        code: ErrorCode = ErrorCode.AUTHENTICATION_FAILED,
    ):
        super().__init__(message, code)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, malformed or of the wrong type."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, ErrorCode.INVALID_TOKEN)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, ErrorCode.INVALID_CREDENTIALS)


class InactiveUserError(AuthError):
    """Raised when a user exists but its status does not allow login."""

    def __init__(self, message: str = "User account is not active"):
        super().__init__(message, ErrorCode.INACTIVE_USER)
