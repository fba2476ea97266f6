"""Query to resolve the user behind an access token."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tessera_identity.application.dtos import UserDTO
from tessera_identity.exceptions import InvalidTokenError

if TYPE_CHECKING:
    from tessera_identity.application.services import AuthenticationService


class GetCurrentUserQuery:
    """Query to retrieve the current user from a bearer access token."""

    def __init__(self, auth_service: AuthenticationService):
        self._auth_service = auth_service

    async def execute(self, access_token: str) -> UserDTO:
        user = await self._auth_service.get_user_from_token(access_token)
        if user is None:
            msg = "Not authenticated"
            raise InvalidTokenError(msg)
        return UserDTO.from_user(user)
