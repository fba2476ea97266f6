"""Event recorded when a user's lifecycle status changes."""

from dataclasses import dataclass, field
from datetime import datetime

from tessera_identity.domain.shared.time import utc_now
from tessera_identity.domain.user.value_objects import UserId, UserStatus


@dataclass(frozen=True)
class UserStatusChanged:
    user_id: UserId
    previous_status: UserStatus
    new_status: UserStatus
    occurred_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create(
        cls,
        user_id: UserId,
        previous_status: UserStatus,
        new_status: UserStatus,
    ) -> "UserStatusChanged":
        return cls(
            user_id=user_id,
            previous_status=previous_status,
            new_status=new_status,
        )

    def is_activation(self) -> bool:
        return self.new_status.is_active() and not self.previous_status.is_active()

    def is_deactivation(self) -> bool:
        return not self.new_status.is_active() and self.previous_status.is_active()

    def is_suspension(self) -> bool:
        return self.new_status.is_suspended() and not self.previous_status.is_suspended()

    def is_deletion(self) -> bool:
        return self.new_status.is_deleted() and not self.previous_status.is_deleted()

    def to_dict(self) -> dict:
        return {
            "user_id": str(self.user_id),
            "previous_status": self.previous_status.value,
            "new_status": self.new_status.value,
            "occurred_at": self.occurred_at.isoformat(),
            "is_activation": self.is_activation(),
            "is_deactivation": self.is_deactivation(),
            "is_suspension": self.is_suspension(),
            "is_deletion": self.is_deletion(),
        }
