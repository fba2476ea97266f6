"""UserId value object."""

import re
from dataclasses import dataclass
from uuid import UUID, uuid4

from tessera_identity.domain.user.exceptions import InvalidUserIdError

# 8-4-4-4-12 hex groups, any version/variant
UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}",
)


@dataclass(frozen=True)
class UserId:
    """Identity of a User aggregate, backed by a ``uuid.UUID``."""

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            msg = "UserId must wrap a uuid.UUID; use UserId.from_string()"
            raise InvalidUserIdError(msg)

    @classmethod
    def generate(cls) -> "UserId":
        return cls(uuid4())

    @classmethod
    def from_string(cls, value: str) -> "UserId":
        trimmed = value.strip() if isinstance(value, str) else ""

        if not trimmed:
            msg = "User ID cannot be empty"
            raise InvalidUserIdError(msg)

        if not UUID_PATTERN.fullmatch(trimmed):
            msg = "Invalid UUID format for User ID"
            raise InvalidUserIdError(msg)

        return cls(UUID(trimmed))

    @classmethod
    def from_uuid(cls, value: UUID) -> "UserId":
        return cls(value)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"UserId('{self.value}')"
