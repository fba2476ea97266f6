"""Authentication service for token issuance and refresh."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from tessera_identity.application.ports import REFRESH_TOKEN_TYPE
from tessera_identity.domain.user import (
    Email,
    InvalidEmailError,
    TokenPair,
    User,
    UserNotFoundError,
)
from tessera_identity.exceptions import InactiveUserError, InvalidTokenError

if TYPE_CHECKING:
    from tessera_identity.application.ports import TokenSigner
    from tessera_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for bearer token handling.

    Bridges the TokenSigner port with the User aggregate to provide:
    - Token pair generation after a successful login or registration
    - Refresh token rotation
    - Access token validation and user resolution

    Refresh tokens are not tracked server-side; rotating one does not
    revoke the old token.
    """

    ACCESS_TOKEN_EXPIRES_IN = 3600

    def __init__(
        self,
        user_repository: UserRepository,
        token_signer: TokenSigner,
        access_token_expires_in: int = ACCESS_TOKEN_EXPIRES_IN,
    ):
        """
        Parameters
        ----------
        access_token_expires_in
            Reported as ``TokenPair.expires_in``; must match the lifetime
            the signer puts in access tokens
        """
        self._user_repo = user_repository
        self._token_signer = token_signer
        self._access_token_expires_in = access_token_expires_in

    def generate_tokens(self, user: User) -> TokenPair:
        return TokenPair(
            access_token=self._token_signer.issue_access_token(user),
            refresh_token=self._token_signer.issue_refresh_token(user),
            expires_in=self._access_token_expires_in,
        )

    async def refresh_tokens(self, refresh_token: str) -> TokenPair:
        """
        Exchange a refresh token for a fresh token pair.

        Parameters
        ----------
        refresh_token
            A refresh-typed token previously issued by this service

        Returns
        -------
        A new TokenPair for the token's subject

        Raises
        ------
        InvalidTokenError
            If the token is invalid, not refresh-typed, or has no usable subject
        UserNotFoundError
            If no user matches the token's subject
        InactiveUserError
            If the user's status does not allow login
        """
        if not self._token_signer.validate_refresh_token(refresh_token):
            msg = "Invalid refresh token"
            raise InvalidTokenError(msg)

        claims = self._token_signer.validate(refresh_token)
        email = self._email_from_claims(claims)
        if email is None:
            msg = "Invalid token payload"
            raise InvalidTokenError(msg)

        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise UserNotFoundError(email.value)

        if not user.can_login():
            raise InactiveUserError

        logger.debug("Tokens refreshed for user: %s", user.email)
        return self.generate_tokens(user)

    def validate_access_token(self, token: str) -> bool:
        return self._token_signer.validate_access_token(token)

    async def get_user_from_token(self, token: str) -> Optional[User]:
        try:
            claims = self._token_signer.validate(token)
        except InvalidTokenError:
            return None

        if claims.get("type") == REFRESH_TOKEN_TYPE:
            return None

        email = self._email_from_claims(claims)
        if email is None:
            return None

        return await self._user_repo.find_by_email(email)

    @staticmethod
    def _email_from_claims(claims: dict) -> Optional[Email]:
        subject = claims.get("sub")
        if not subject or not isinstance(subject, str):
            return None
        try:
            return Email.from_string(subject)
        except InvalidEmailError:
            return None
