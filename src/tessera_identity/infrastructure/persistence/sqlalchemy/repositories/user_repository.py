"""SQLAlchemy implementation of UserRepository."""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import String, cast, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tessera_identity.domain.shared.time import ensure_tz_aware
from tessera_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserId,
    UserRepository,
    UserRole,
    UserStatus,
)
from tessera_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


def _escape_like(value: str) -> str:
    """Make ``%`` and ``_`` match literally in a LIKE pattern escaped by ``\\``."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: Email) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.email == email.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_email(self, email: Email) -> bool:
        stmt = select(func.count()).select_from(UserModel).where(
            UserModel.email == email.value,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user.id)

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                model = self._map_to_model(user)
                self._session.add(model)
                logger.info("Created user: %s (email: %s)", user.id, user.email)

            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise EmailAlreadyExistsError(user.email) from e
            raise

    async def delete(self, user: User) -> None:
        model = await self._find_model_by_id(user.id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Deleted user: %s", user.id)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def find_by_tenant(self, tenant_id: str) -> list[User]:
        stmt = (
            select(UserModel)
            .where(UserModel.tenant_id == tenant_id)
            .order_by(UserModel.created_at)
        )
        return await self._fetch_all(stmt)

    async def find_by_status(self, status: UserStatus) -> list[User]:
        stmt = (
            select(UserModel)
            .where(UserModel.status == status.value)
            .order_by(UserModel.created_at)
        )
        return await self._fetch_all(stmt)

    async def find_by_role(self, role: UserRole) -> list[User]:
        # Roles are a JSON array of strings; match the quoted value.
        stmt = (
            select(UserModel)
            .where(cast(UserModel.roles, String).like(f'%"{role.value}"%'))
            .order_by(UserModel.created_at)
        )
        return await self._fetch_all(stmt)

    async def find_created_between(
        self,
        start: datetime,
        end: datetime,
    ) -> list[User]:
        stmt = (
            select(UserModel)
            .where(UserModel.created_at >= start, UserModel.created_at <= end)
            .order_by(UserModel.created_at)
        )
        return await self._fetch_all(stmt)

    async def search_by_email(self, pattern: str) -> list[User]:
        stmt = (
            select(UserModel)
            .where(
                UserModel.email.like(
                    f"%{_escape_like(pattern.strip().lower())}%",
                    escape="\\",
                ),
            )
            .order_by(UserModel.email)
        )
        return await self._fetch_all(stmt)

    async def _fetch_all(self, stmt) -> list[User]:
        result = await self._session.execute(stmt)
        models = result.scalars().all()
        return [self._map_to_domain(model) for model in models]

    async def _find_model_by_id(self, user_id: UserId) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id.value)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=UserId.from_uuid(model.id),
            email=model.email,
            password_hash=model.password_hash,
            roles=list(model.roles or []),
            status=model.status,
            tenant_id=model.tenant_id,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id.value,
            email=user.email,
            password_hash=user.password_hash,
            roles=user.role_values,
            status=user.status.value,
            tenant_id=user.tenant_id,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.email = user.email
        model.password_hash = user.password_hash
        model.roles = user.role_values
        model.status = user.status.value
        model.tenant_id = user.tenant_id
        model.updated_at = user.updated_at
