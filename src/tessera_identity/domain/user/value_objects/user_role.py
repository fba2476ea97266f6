"""User role enumeration with hierarchy and privilege semantics."""

from enum import Enum
from typing import Mapping

from tessera_identity.domain.user.exceptions import InvalidRoleError


class UserRole(str, Enum):
    """Roles a user can hold, ordered by hierarchy level."""

    ADMIN = "ROLE_ADMIN"
    USER = "ROLE_USER"
    MANAGER = "ROLE_MANAGER"
    TENANT_ADMIN = "ROLE_TENANT_ADMIN"
    TENANT_USER = "ROLE_TENANT_USER"

    @classmethod
    def from_string(cls, value: str) -> "UserRole":
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(role.value for role in cls)
            msg = f"Invalid user role: {value}. Valid roles are: {valid}"
            raise InvalidRoleError(msg) from None

    @property
    def hierarchy_level(self) -> int:
        return _HIERARCHY_LEVELS[self]

    def can_access_role(self, target: "UserRole") -> bool:
        return self.hierarchy_level >= target.hierarchy_level

    def is_admin(self) -> bool:
        return self is UserRole.ADMIN

    def is_user(self) -> bool:
        return self is UserRole.USER

    def is_manager(self) -> bool:
        return self is UserRole.MANAGER

    def is_tenant_admin(self) -> bool:
        return self is UserRole.TENANT_ADMIN

    def is_tenant_user(self) -> bool:
        return self is UserRole.TENANT_USER

    def has_admin_privileges(self) -> bool:
        return _ADMIN_PRIVILEGES[self]

    def has_manager_privileges(self) -> bool:
        return _MANAGER_PRIVILEGES[self]

    def can_manage_tenant(self) -> bool:
        return _TENANT_MANAGEMENT[self]

    def __str__(self) -> str:
        return self.value


_HIERARCHY_LEVELS: Mapping[UserRole, int] = {
    UserRole.ADMIN: 5,
    UserRole.TENANT_ADMIN: 4,
    UserRole.MANAGER: 3,
    UserRole.TENANT_USER: 2,
    UserRole.USER: 1,
}

_ADMIN_PRIVILEGES: Mapping[UserRole, bool] = {
    UserRole.ADMIN: True,
    UserRole.TENANT_ADMIN: True,
    UserRole.MANAGER: False,
    UserRole.TENANT_USER: False,
    UserRole.USER: False,
}

_MANAGER_PRIVILEGES: Mapping[UserRole, bool] = {
    UserRole.ADMIN: True,
    UserRole.TENANT_ADMIN: True,
    UserRole.MANAGER: True,
    UserRole.TENANT_USER: False,
    UserRole.USER: False,
}

_TENANT_MANAGEMENT: Mapping[UserRole, bool] = {
    UserRole.ADMIN: True,
    UserRole.TENANT_ADMIN: True,
    UserRole.MANAGER: False,
    UserRole.TENANT_USER: False,
    UserRole.USER: False,
}

for _name, _table in (
    ("hierarchy levels", _HIERARCHY_LEVELS),
    ("admin privileges", _ADMIN_PRIVILEGES),
    ("manager privileges", _MANAGER_PRIVILEGES),
    ("tenant management", _TENANT_MANAGEMENT),
):
    if set(_table) != set(UserRole):
        msg = f"UserRole {_name} table does not cover every role"
        raise RuntimeError(msg)
