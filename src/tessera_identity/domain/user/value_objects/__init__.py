"""Value objects for the user domain."""

from tessera_identity.domain.user.value_objects.email import Email
from tessera_identity.domain.user.value_objects.token_pair import TokenPair
from tessera_identity.domain.user.value_objects.user_id import UserId
from tessera_identity.domain.user.value_objects.user_role import UserRole
from tessera_identity.domain.user.value_objects.user_status import UserStatus

__all__ = [
    "Email",
    "TokenPair",
    "UserId",
    "UserRole",
    "UserStatus",
]
