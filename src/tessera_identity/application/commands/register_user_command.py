"""Register a new user and issue their first token pair."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from tessera_identity.application.dtos import AuthResult
from tessera_identity.domain.user import Email, UserRole, UserStatus

if TYPE_CHECKING:
    from tessera_identity.application.services import AuthenticationService
    from tessera_identity.domain.user import UserService

logger = logging.getLogger(__name__)


class RegisterUserCommand:
    """Create an active user with the USER role and log them in."""

    def __init__(
        self,
        user_service: UserService,
        auth_service: AuthenticationService,
    ):
        self._user_service = user_service
        self._auth_service = auth_service

    async def execute(
        self,
        email: str,
        password: str,
        tenant_id: Optional[str] = None,
    ) -> AuthResult:
        email_obj = Email.from_string(email)

        user = await self._user_service.create_user(
            email=email_obj,
            plain_password=password,
            roles=[UserRole.USER],
            tenant_id=tenant_id,
            status=UserStatus.ACTIVE,
        )
        self._user_service.release_events()

        token_pair = self._auth_service.generate_tokens(user)

        logger.info("User registered: %s", user.email)
        return AuthResult.from_token_pair(token_pair, user=user)
