"""Event recorded when a user account is created."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from tessera_identity.domain.shared.time import utc_now
from tessera_identity.domain.user.value_objects import (
    Email,
    UserId,
    UserRole,
    UserStatus,
)


@dataclass(frozen=True)
class UserCreated:
    user_id: UserId
    email: Email
    status: UserStatus
    roles: tuple[UserRole, ...]
    tenant_id: Optional[str] = None
    occurred_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create(
        cls,
        user_id: UserId,
        email: Email,
        status: UserStatus,
        roles: list[UserRole],
        tenant_id: Optional[str] = None,
    ) -> "UserCreated":
        return cls(
            user_id=user_id,
            email=email,
            status=status,
            roles=tuple(roles),
            tenant_id=tenant_id,
        )

    def to_dict(self) -> dict:
        return {
            "user_id": str(self.user_id),
            "email": str(self.email),
            "status": self.status.value,
            "roles": [role.value for role in self.roles],
            "tenant_id": self.tenant_id,
            "occurred_at": self.occurred_at.isoformat(),
        }
