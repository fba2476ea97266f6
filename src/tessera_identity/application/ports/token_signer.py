"""Token signer port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

from tessera_identity.exceptions import InvalidTokenError

if TYPE_CHECKING:
    from tessera_identity.domain.user import User

REFRESH_TOKEN_TYPE = "refresh"


class TokenSigner(ABC):
    """
    Interface for issuing and validating signed bearer tokens.

    The token type lives inside the payload: a ``type`` claim equal to
    ``"refresh"`` marks a refresh token, no ``type`` claim marks an access
    token. The ``sub`` claim always holds the user's email.
    """

    @abstractmethod
    def issue(self, user: User, claims: Optional[dict[str, Any]] = None) -> str:
        """
        Sign a token for ``user`` with extra ``claims`` merged in.

        Parameters
        ----------
        user
            The subject of the token
        claims
            Additional payload entries

        Returns
        -------
        The encoded token string
        """

    @abstractmethod
    def validate(self, token: str) -> dict[str, Any]:
        """
        Verify a token's signature and expiry and return its claims.

        Raises
        ------
        InvalidTokenError
            If the token is malformed, tampered with or expired
        """

    @abstractmethod
    def issue_access_token(self, user: User) -> str:
        """Sign a short-lived access token for ``user``."""

    @abstractmethod
    def issue_refresh_token(self, user: User) -> str:
        """Sign a long-lived refresh token for ``user``."""

    def validate_access_token(self, token: str) -> bool:
        """Return True for a valid token that is not refresh-typed."""
        claims = self._safe_validate(token)
        if claims is None:
            return False
        return claims.get("type") != REFRESH_TOKEN_TYPE

    def validate_refresh_token(self, token: str) -> bool:
        """Return True for a valid token whose ``type`` claim is refresh."""
        claims = self._safe_validate(token)
        if claims is None:
            return False
        return claims.get("type") == REFRESH_TOKEN_TYPE

    def _safe_validate(self, token: str) -> Optional[dict[str, Any]]:
        try:
            return self.validate(token)
        except InvalidTokenError:
            return None
