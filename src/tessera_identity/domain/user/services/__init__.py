"""Domain services for the user aggregate."""

from tessera_identity.domain.user.services.password_policy import PasswordPolicy
from tessera_identity.domain.user.services.user_service import UserService

__all__ = ["PasswordPolicy", "UserService"]
