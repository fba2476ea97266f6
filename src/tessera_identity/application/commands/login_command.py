"""Authenticate a user by email and password."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tessera_identity.application.dtos import AuthResult
from tessera_identity.domain.user import Email
from tessera_identity.exceptions import InactiveUserError, InvalidCredentialsError

if TYPE_CHECKING:
    from tessera_identity.application.services import AuthenticationService
    from tessera_identity.domain.user import PasswordHasher, UserRepository

logger = logging.getLogger(__name__)


class LoginCommand:
    """
    Check credentials and issue a token pair.

    Unknown emails and wrong passwords both raise InvalidCredentialsError
    so callers cannot tell which one failed. A known user whose status
    does not allow login gets InactiveUserError before the password is
    checked.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        auth_service: AuthenticationService,
    ):
        self._user_repo = user_repository
        self._password_hasher = password_hasher
        self._auth_service = auth_service

    async def execute(self, email: str, password: str) -> AuthResult:
        email_obj = Email.from_string(email)

        user = await self._user_repo.find_by_email(email_obj)
        if user is None:
            logger.debug("Login failed, unknown email: %s", email_obj.value)
            raise InvalidCredentialsError

        if not user.can_login():
            raise InactiveUserError

        if not self._password_hasher.verify(user.password_hash, password):
            logger.debug("Login failed, wrong password for: %s", user.email)
            raise InvalidCredentialsError

        token_pair = self._auth_service.generate_tokens(user)

        logger.info("User logged in: %s", user.email)
        return AuthResult.from_token_pair(token_pair, user=user)
