"""DTO for authentication results."""

from dataclasses import dataclass
from typing import Any, Optional

from tessera_identity.application.dtos.user_dto import UserDTO
from tessera_identity.domain.user import TokenPair, User


@dataclass(frozen=True)
class AuthResult:
    """Token material handed back after login, registration or refresh."""

    access_token: str
    refresh_token: str
    expires_in: int
    user: Optional[UserDTO] = None
    token_type: str = "Bearer"

    @classmethod
    def from_token_pair(
        cls,
        token_pair: TokenPair,
        user: Optional[User] = None,
    ) -> "AuthResult":
        return cls(
            access_token=token_pair.access_token,
            refresh_token=token_pair.refresh_token,
            expires_in=token_pair.expires_in,
            user=UserDTO.from_user(user) if user is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "token_type": self.token_type,
            "expires_in": self.expires_in,
            "user": self.user.to_dict() if self.user else None,
        }
