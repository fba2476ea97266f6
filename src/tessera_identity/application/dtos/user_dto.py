"""DTO for exposing a user snapshot."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from tessera_identity.domain.user import User


@dataclass(frozen=True)
class UserDTO:
    """Read-only view of a User for the presentation layer."""

    id: str
    email: str
    roles: tuple[str, ...]
    status: str
    tenant_id: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserDTO":
        return cls(
            id=str(user.id),
            email=user.email,
            roles=tuple(user.role_values),
            status=user.status.value,
            tenant_id=user.tenant_id,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "roles": list(self.roles),
            "status": self.status,
            "tenant_id": self.tenant_id,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
