"""Exchange a refresh token for a new token pair."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tessera_identity.application.dtos import AuthResult

if TYPE_CHECKING:
    from tessera_identity.application.services import AuthenticationService


class RefreshTokenCommand:
    def __init__(self, auth_service: AuthenticationService):
        self._auth_service = auth_service

    async def execute(self, refresh_token: str) -> AuthResult:
        token_pair = await self._auth_service.refresh_tokens(refresh_token)
        return AuthResult.from_token_pair(token_pair)
