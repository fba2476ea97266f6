"""Domain events for the user aggregate.

Events are plain immutable values; delivering them is left to the caller.
"""

from typing import Union

from tessera_identity.domain.user.events.user_created import UserCreated
from tessera_identity.domain.user.events.user_status_changed import (
    UserStatusChanged,
)

UserEvent = Union[UserCreated, UserStatusChanged]

__all__ = [
    "UserCreated",
    "UserEvent",
    "UserStatusChanged",
]
