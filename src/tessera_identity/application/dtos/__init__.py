"""Application DTOs."""

from tessera_identity.application.dtos.auth_result import AuthResult
from tessera_identity.application.dtos.user_dto import UserDTO

__all__ = ["AuthResult", "UserDTO"]
