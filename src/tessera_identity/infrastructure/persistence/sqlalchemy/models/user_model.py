"""SQLAlchemy model for User aggregate."""

from typing import Optional
from uuid import UUID

from sqlalchemy import JSON, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tessera_identity.infrastructure.persistence.sqlalchemy.base import (
    Base,
    TimestampMixin,
)


class UserModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting User aggregates.

    Roles are stored as a JSON list of role values (e.g. ``["ROLE_USER"]``).
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(
        String(254),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    roles: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    status: Mapped[str] = mapped_column(
        String(20),
        default="pending",
        nullable=False,
        index=True,
    )
    tenant_id: Mapped[Optional[str]] = mapped_column(
        String(64),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<UserModel(id={self.id}, email={self.email}, status={self.status})>"
        )
