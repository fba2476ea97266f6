"""User lifecycle orchestration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from tessera_identity.domain.user.aggregates.user import User
from tessera_identity.domain.user.events import (
    UserCreated,
    UserEvent,
    UserStatusChanged,
)
from tessera_identity.domain.user.exceptions import EmailAlreadyExistsError
from tessera_identity.domain.user.services.password_policy import PasswordPolicy
from tessera_identity.domain.user.value_objects import (
    Email,
    UserId,
    UserRole,
    UserStatus,
)

if TYPE_CHECKING:
    from tessera_identity.domain.user.ports import PasswordHasher
    from tessera_identity.domain.user.repositories import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    Domain service for creating users and driving their lifecycle.

    Wraps the User aggregate's methods with persistence, password policy
    and hashing. Every call that changes state saves the user before
    returning. Domain events are recorded on the service and handed out
    through ``release_events``; dispatching them is left to the caller.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        password_policy: Optional[PasswordPolicy] = None,
    ):
        self._user_repo = user_repository
        self._password_hasher = password_hasher
        self._password_policy = password_policy or PasswordPolicy()
        self._events: list[UserEvent] = []

    @property
    def pending_events(self) -> list[UserEvent]:
        return list(self._events)

    def release_events(self) -> list[UserEvent]:
        events, self._events = self._events, []
        return events

    async def create_user(
        self,
        email: Email,
        plain_password: str,
        roles: Optional[Iterable[UserRole]] = None,
        tenant_id: Optional[str] = None,
        status: UserStatus = UserStatus.PENDING,
    ) -> User:
        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email.value)

        self._password_policy.validate(plain_password)

        user_id = UserId.generate()
        password_hash = self._password_hasher.hash(plain_password)

        user = User.create(
            email=email,
            password_hash=password_hash,
            roles=roles,
            status=status,
            tenant_id=tenant_id,
            id=user_id,
        )
        await self._user_repo.save(user)

        self._record(
            UserCreated.create(
                user_id=user_id,
                email=email,
                status=status,
                roles=user.roles,
                tenant_id=tenant_id,
            ),
        )
        logger.info("User created: %s (status: %s)", email.value, status.value)
        return user

    async def change_user_status(self, user: User, new_status: UserStatus) -> None:
        previous_status = user.status
        if previous_status is new_status:
            return

        user.change_status(new_status)
        await self._user_repo.save(user)

        self._record(UserStatusChanged.create(user.id, previous_status, new_status))
        logger.info(
            "User %s status changed: %s -> %s",
            user.id,
            previous_status.value,
            new_status.value,
        )

    async def activate_user(self, user: User) -> None:
        user.activate()
        await self._user_repo.save(user)

        # Compares the post-mutation status with the target, so a successful
        # activate() never records an event here.
        if user.status is not UserStatus.ACTIVE:
            self._record(
                UserStatusChanged.create(user.id, user.status, UserStatus.ACTIVE),
            )

    async def deactivate_user(self, user: User) -> None:
        user.deactivate()
        await self._user_repo.save(user)

        # Same post-mutation comparison as activate_user.
        if user.status is not UserStatus.INACTIVE:
            self._record(
                UserStatusChanged.create(user.id, user.status, UserStatus.INACTIVE),
            )

    async def suspend_user(self, user: User) -> None:
        previous_status = user.status
        user.suspend()
        await self._user_repo.save(user)

        self._record(
            UserStatusChanged.create(user.id, previous_status, UserStatus.SUSPENDED),
        )
        logger.info("User suspended: %s", user.id)

    async def delete_user(self, user: User) -> None:
        previous_status = user.status
        user.mark_as_deleted()
        await self._user_repo.save(user)

        self._record(
            UserStatusChanged.create(user.id, previous_status, UserStatus.DELETED),
        )
        logger.info("User marked as deleted: %s", user.id)

    async def change_user_password(self, user: User, new_plain_password: str) -> None:
        self._password_policy.validate(new_plain_password)
        password_hash = self._password_hasher.hash(new_plain_password)

        user.change_password(password_hash)
        await self._user_repo.save(user)
        logger.info("Password changed for user: %s", user.id)

    async def change_user_email(self, user: User, new_email: Email) -> None:
        owner = await self._user_repo.find_by_email(new_email)
        if owner is not None and owner.id != user.id:
            raise EmailAlreadyExistsError(new_email.value)

        user.change_email(new_email)
        await self._user_repo.save(user)

    async def assign_user_to_tenant(self, user: User, tenant_id: str) -> None:
        user.assign_to_tenant(tenant_id)
        await self._user_repo.save(user)

    async def remove_user_from_tenant(self, user: User) -> None:
        user.remove_from_tenant()
        await self._user_repo.save(user)

    async def add_role_to_user(self, user: User, role: UserRole) -> None:
        user.add_role(role)
        await self._user_repo.save(user)

    async def remove_role_from_user(self, user: User, role: UserRole) -> None:
        user.remove_role(role)
        await self._user_repo.save(user)

    def verify_password(self, user: User, plain_password: str) -> bool:
        return self._password_hasher.verify(user.password_hash, plain_password)

    def is_password_valid(self, password: str) -> bool:
        return self._password_policy.is_valid(password)

    def can_user_access_tenant(self, user: User, tenant_id: str) -> bool:
        if user.has_role(UserRole.ADMIN):
            return True

        return user.belongs_to_tenant(tenant_id)

    def can_user_manage_user(self, manager: User, target: User) -> bool:
        if manager.has_role(UserRole.ADMIN):
            return True

        tenant_id = manager.tenant_id
        shares_tenant = bool(tenant_id) and target.belongs_to_tenant(tenant_id)

        if manager.has_role(UserRole.TENANT_ADMIN) and shares_tenant:
            return True

        return (
            manager.has_role(UserRole.MANAGER)
            and shares_tenant
            and not target.has_manager_privileges()
        )

    def _record(self, event: UserEvent) -> None:
        self._events.append(event)
