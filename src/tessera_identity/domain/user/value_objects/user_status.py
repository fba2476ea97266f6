"""User status enumeration with lifecycle semantics."""

from enum import Enum
from typing import Mapping

from tessera_identity.domain.user.exceptions import InvalidStatusError


class UserStatus(str, Enum):
    """Lifecycle status of a user account.

    Only ACTIVE users may log in. DELETED is terminal for activation and
    deactivation.
    """

    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    SUSPENDED = "suspended"
    DELETED = "deleted"

    @classmethod
    def from_string(cls, value: str) -> "UserStatus":
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(status.value for status in cls)
            msg = f"Invalid user status: {value}. Valid statuses are: {valid}"
            raise InvalidStatusError(msg) from None

    def is_active(self) -> bool:
        return self is UserStatus.ACTIVE

    def is_inactive(self) -> bool:
        return self is UserStatus.INACTIVE

    def is_pending(self) -> bool:
        return self is UserStatus.PENDING

    def is_suspended(self) -> bool:
        return self is UserStatus.SUSPENDED

    def is_deleted(self) -> bool:
        return self is UserStatus.DELETED

    def can_login(self) -> bool:
        return _CAN_LOGIN[self]

    def can_be_activated(self) -> bool:
        return _CAN_BE_ACTIVATED[self]

    def can_be_deactivated(self) -> bool:
        return _CAN_BE_DEACTIVATED[self]

    def __str__(self) -> str:
        return self.value


_CAN_LOGIN: Mapping[UserStatus, bool] = {
    UserStatus.ACTIVE: True,
    UserStatus.INACTIVE: False,
    UserStatus.PENDING: False,
    UserStatus.SUSPENDED: False,
    UserStatus.DELETED: False,
}

_CAN_BE_ACTIVATED: Mapping[UserStatus, bool] = {
    UserStatus.ACTIVE: False,
    UserStatus.INACTIVE: True,
    UserStatus.PENDING: True,
    UserStatus.SUSPENDED: True,
    UserStatus.DELETED: False,
}

_CAN_BE_DEACTIVATED: Mapping[UserStatus, bool] = {
    UserStatus.ACTIVE: True,
    UserStatus.INACTIVE: False,
    UserStatus.PENDING: False,
    UserStatus.SUSPENDED: False,
    UserStatus.DELETED: False,
}

for _name, _table in (
    ("login", _CAN_LOGIN),
    ("activation", _CAN_BE_ACTIVATED),
    ("deactivation", _CAN_BE_DEACTIVATED),
):
    if set(_table) != set(UserStatus):
        msg = f"UserStatus {_name} table does not cover every status"
        raise RuntimeError(msg)
