"""JWT token service.

Provides JWT token creation and verification for authentication.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any, Optional

import jwt

from tessera_identity.application.ports import REFRESH_TOKEN_TYPE, TokenSigner
from tessera_identity.exceptions import InvalidTokenError

if TYPE_CHECKING:
    from tessera_identity.domain.user import User


class JWTService(TokenSigner):
    """Service for JWT token creation and verification.

    Access tokens are short-lived and carry the user's email, id and
    roles. Refresh tokens are long-lived and carry only the subject and a
    ``type`` claim set to ``"refresh"``.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.issue_access_token(user)
    >>> claims = service.validate(token)
    >>> print(claims["sub"])
    """

    DEFAULT_ACCESS_EXPIRE_SECONDS = 3600
    DEFAULT_REFRESH_EXPIRE_DAYS = 7
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_seconds: int = DEFAULT_ACCESS_EXPIRE_SECONDS,
        refresh_token_expire_days: int = DEFAULT_REFRESH_EXPIRE_DAYS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_seconds
            Seconds until an access token expires (default 3600)
        refresh_token_expire_days
            Days until a refresh token expires (default 7)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(seconds=access_token_expire_seconds)
        self._refresh_expire = timedelta(days=refresh_token_expire_days)

    def issue(
        self,
        user: User,
        claims: Optional[dict[str, Any]] = None,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """Create a signed token for a user.

        Parameters
        ----------
        user
            The token subject; its email becomes the ``sub`` claim
        claims
            Extra claims merged into the payload
        expires_delta
            Time until the token expires (defaults to the access lifetime)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta or self._access_expire)

        payload: dict[str, Any] = {
            "sub": user.user_identifier,
            "iat": now,
            "exp": expire,
        }
        payload.update(claims or {})

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def issue_access_token(self, user: User) -> str:
        return self.issue(
            user,
            {
                "email": user.email,
                "user_id": str(user.id),
                "roles": user.role_values,
            },
        )

    def issue_refresh_token(self, user: User) -> str:
        return self.issue(
            user,
            {"type": REFRESH_TOKEN_TYPE},
            expires_delta=self._refresh_expire,
        )

    def validate(self, token: str) -> dict[str, Any]:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        The decoded claims

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            return jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            msg = "Token has expired"
            raise InvalidTokenError(msg) from e
        except jwt.InvalidTokenError as e:
            msg = f"Invalid token: {e}"
            raise InvalidTokenError(msg) from e
