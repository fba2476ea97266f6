"""SQLAlchemy persistence for the identity domain."""

from tessera_identity.infrastructure.persistence.sqlalchemy.base import (
    Base,
    TimestampMixin,
)
from tessera_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from tessera_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = ["Base", "TimestampMixin", "UserModel", "UserRepositorySQLAlchemy"]
