"""User aggregate: identity, credentials, roles and lifecycle status."""

from datetime import datetime
from typing import Iterable, Optional, Union

from tessera_identity.domain.shared.exceptions import ValidationError
from tessera_identity.domain.shared.time import utc_now
from tessera_identity.domain.user.exceptions import InvalidStatusTransitionError
from tessera_identity.domain.user.value_objects import (
    Email,
    UserId,
    UserRole,
    UserStatus,
)

RoleInput = Union[str, UserRole]


class User:
    """
    User aggregate root.

    All state changes go through the methods below; each one checks its
    preconditions before mutating and refreshes ``updated_at`` afterwards.

    Lifecycle::

        PENDING -> ACTIVE <-> INACTIVE
        PENDING/ACTIVE/INACTIVE -> SUSPENDED -> ACTIVE
        any -> DELETED

    Known gaps kept as-is: ``suspend()`` moves a DELETED user to SUSPENDED,
    and ``remove_role()`` may leave the role list empty. At least one role
    is only guaranteed by ``create``; ``reconstitute`` keeps
    whatever roles were stored, including none.
    """

    def __init__(
        self,
        id: UserId,
        email: Union[str, Email],
        password_hash: str,
        roles: Optional[Iterable[RoleInput]] = None,
        status: Union[str, UserStatus] = UserStatus.PENDING,
        tenant_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        now = utc_now()
        self._id = id
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._roles = self._normalize_roles(roles or [])
        self._status = (
            status if isinstance(status, UserStatus) else UserStatus.from_string(status)
        )
        self._tenant_id = tenant_id
        self._created_at = created_at or now
        self._updated_at = updated_at or self._created_at

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        password_hash: str,
        roles: Optional[Iterable[RoleInput]] = None,
        status: UserStatus = UserStatus.PENDING,
        tenant_id: Optional[str] = None,
        id: Optional[UserId] = None,
    ) -> "User":
        if not password_hash:
            msg = "Password cannot be empty"
            raise ValidationError(msg)

        return cls(
            id=id or UserId.generate(),
            email=email,
            password_hash=password_hash,
            roles=list(roles or []) or [UserRole.USER],
            status=status,
            tenant_id=tenant_id,
        )

    @classmethod
    def reconstitute(
        cls,
        id: UserId,
        email: Union[str, Email],
        password_hash: str,
        roles: Iterable[RoleInput],
        status: Union[str, UserStatus],
        tenant_id: Optional[str],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            roles=roles,
            status=status,
            tenant_id=tenant_id,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def id(self) -> UserId:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def user_identifier(self) -> str:
        """Identifier used as the token subject."""
        return self._email.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def roles(self) -> list[UserRole]:
        return list(self._roles)

    @property
    def role_values(self) -> list[str]:
        return [role.value for role in self._roles]

    @property
    def status(self) -> UserStatus:
        return self._status

    @property
    def tenant_id(self) -> Optional[str]:
        return self._tenant_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    # -- credentials --------------------------------------------------------

    def change_email(self, email: Union[str, Email]) -> None:
        new_email = email if isinstance(email, Email) else Email(email)
        if new_email == self._email:
            return

        self._email = new_email
        self._touch()

    def change_password(self, password_hash: str) -> None:
        if not password_hash:
            msg = "Password cannot be empty"
            raise ValidationError(msg)

        self._password_hash = password_hash
        self._touch()

    # -- lifecycle ----------------------------------------------------------

    def change_status(self, status: UserStatus) -> None:
        if self._status is status:
            return

        self._status = status
        self._touch()

    def activate(self) -> None:
        if not self._status.can_be_activated():
            raise InvalidStatusTransitionError(self._status, "activated")

        self.change_status(UserStatus.ACTIVE)

    def deactivate(self) -> None:
        if not self._status.can_be_deactivated():
            raise InvalidStatusTransitionError(self._status, "deactivated")

        self.change_status(UserStatus.INACTIVE)

    def suspend(self) -> None:
        if self._status is UserStatus.SUSPENDED:
            return

        self.change_status(UserStatus.SUSPENDED)

    def mark_as_deleted(self) -> None:
        self.change_status(UserStatus.DELETED)

    def is_active(self) -> bool:
        return self._status.is_active()

    def can_login(self) -> bool:
        return self._status.can_login()

    def is_deleted(self) -> bool:
        return self._status.is_deleted()

    def is_suspended(self) -> bool:
        return self._status.is_suspended()

    # -- roles --------------------------------------------------------------

    def add_role(self, role: UserRole) -> None:
        if self.has_role(role):
            return

        self._roles.append(role)
        self._touch()

    def remove_role(self, role: UserRole) -> None:
        self._roles = [existing for existing in self._roles if existing is not role]
        self._touch()

    def has_role(self, role: UserRole) -> bool:
        return role in self._roles

    def has_any_role(self, roles: Iterable[UserRole]) -> bool:
        return any(self.has_role(role) for role in roles)

    def has_admin_privileges(self) -> bool:
        return any(role.has_admin_privileges() for role in self._roles)

    def has_manager_privileges(self) -> bool:
        return any(role.has_manager_privileges() for role in self._roles)

    def can_manage_tenant(self) -> bool:
        return any(role.can_manage_tenant() for role in self._roles)

    # -- tenancy ------------------------------------------------------------

    def assign_to_tenant(self, tenant_id: str) -> None:
        if not tenant_id:
            msg = "Tenant ID cannot be empty"
            raise ValidationError(msg)

        self._tenant_id = tenant_id
        self._touch()

    def remove_from_tenant(self) -> None:
        self._tenant_id = None
        self._touch()

    def belongs_to_tenant(self, tenant_id: str) -> bool:
        return self._tenant_id == tenant_id

    # -- internals ----------------------------------------------------------

    def _touch(self) -> None:
        self._updated_at = utc_now()

    @staticmethod
    def _normalize_roles(roles: Iterable[RoleInput]) -> list[UserRole]:
        normalized: list[UserRole] = []
        for role in roles:
            if isinstance(role, UserRole):
                candidate = role
            elif isinstance(role, str):
                candidate = UserRole.from_string(role)
            else:
                msg = "Invalid role type"
                raise ValidationError(msg)

            if candidate not in normalized:
                normalized.append(candidate)

        return normalized

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id.value}, email={self._email.value})"

    def __str__(self) -> str:
        return self._email.value
