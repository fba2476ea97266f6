"""User repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from tessera_identity.domain.user.aggregates.user import User
from tessera_identity.domain.user.value_objects import (
    Email,
    UserId,
    UserRole,
    UserStatus,
)


class UserRepository(ABC):
    """Repository interface for User aggregates.

    ``save`` must surface a unique-email violation raised by the storage
    layer as ``EmailAlreadyExistsError``.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def exists_by_email(self, email: Email) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save or update a user."""

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Remove a user from storage."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""

    @abstractmethod
    async def find_by_tenant(self, tenant_id: str) -> list[User]:
        """List users tagged with a tenant."""

    @abstractmethod
    async def find_by_status(self, status: UserStatus) -> list[User]:
        """List users in a given status."""

    @abstractmethod
    async def find_by_role(self, role: UserRole) -> list[User]:
        """List users holding a role."""

    @abstractmethod
    async def find_created_between(
        self,
        start: datetime,
        end: datetime,
    ) -> list[User]:
        """List users created within ``[start, end]``."""

    @abstractmethod
    async def search_by_email(self, pattern: str) -> list[User]:
        """List users whose email contains ``pattern`` (case-insensitive)."""
