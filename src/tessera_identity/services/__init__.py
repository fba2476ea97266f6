"""Authentication infrastructure services."""

from tessera_identity.services.jwt_service import JWTService
from tessera_identity.services.password_service import PasswordHashingService

__all__ = ["JWTService", "PasswordHashingService"]
