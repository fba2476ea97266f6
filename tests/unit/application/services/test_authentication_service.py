"""Unit tests for AuthenticationService."""

from unittest.mock import AsyncMock, Mock

import jwt
import pytest

from tessera_identity.application.ports import TokenSigner
from tessera_identity.application.services import AuthenticationService
from tessera_identity.domain.user import (
    Email,
    TokenPair,
    User,
    UserNotFoundError,
    UserStatus,
)
from tessera_identity.exceptions import InactiveUserError, InvalidTokenError
from tessera_identity.services import JWTService

TEST_EMAIL = "test@example.com"
SECRET = "test-secret-key-12345"


def _user(status: UserStatus = UserStatus.ACTIVE) -> User:
    return User.create(email=TEST_EMAIL, password_hash="hashed", status=status)


class TestAuthenticationServiceGenerateTokens:
    """Tests for token pair generation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.user_repo = AsyncMock()
        self.token_signer = Mock(spec=TokenSigner)
        self.service = AuthenticationService(
            user_repository=self.user_repo,
            token_signer=self.token_signer,
        )

    def test_generate_tokens_uses_signer(self):
        """Test that both tokens come from the signer with a 3600s expiry."""
        # Arrange
        user = _user()
        self.token_signer.issue_access_token.return_value = "access_token"
        self.token_signer.issue_refresh_token.return_value = "refresh_token"

        # Act
        pair = self.service.generate_tokens(user)

        # Assert
        assert pair == TokenPair("access_token", "refresh_token", 3600)
        self.token_signer.issue_access_token.assert_called_once_with(user)
        self.token_signer.issue_refresh_token.assert_called_once_with(user)

    def test_generate_tokens_reports_configured_lifetime(self):
        """expires_in follows the lifetime the signer was configured with."""
        # Arrange
        signer = JWTService(secret_key=SECRET, access_token_expire_seconds=900)
        service = AuthenticationService(
            user_repository=self.user_repo,
            token_signer=signer,
            access_token_expires_in=900,
        )

        # Act
        pair = service.generate_tokens(_user())

        # Assert
        claims = signer.validate(pair.access_token)
        assert pair.expires_in == 900
        assert claims["exp"] - claims["iat"] == 900

    def test_validate_access_token_delegates(self):
        self.token_signer.validate_access_token.return_value = True

        assert self.service.validate_access_token("token") is True
        self.token_signer.validate_access_token.assert_called_once_with("token")


class TestAuthenticationServiceRefresh:
    """Tests for refresh token rotation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.user_repo = AsyncMock()
        self.jwt_service = JWTService(secret_key=SECRET)
        self.service = AuthenticationService(
            user_repository=self.user_repo,
            token_signer=self.jwt_service,
        )

    @pytest.mark.asyncio
    async def test_refresh_returns_new_pair(self):
        """Test that a valid refresh token yields a fresh token pair."""
        # Arrange
        user = _user()
        self.user_repo.find_by_email.return_value = user
        refresh_token = self.jwt_service.issue_refresh_token(user)

        # Act
        pair = await self.service.refresh_tokens(refresh_token)

        # Assert
        assert pair.expires_in == 3600
        assert self.jwt_service.validate_access_token(pair.access_token)
        assert self.jwt_service.validate_refresh_token(pair.refresh_token)
        self.user_repo.find_by_email.assert_awaited_once_with(
            Email.from_string(TEST_EMAIL),
        )

    @pytest.mark.asyncio
    async def test_refresh_rejects_access_token(self):
        """A well-formed token without the refresh type is rejected."""
        # Arrange
        access_token = self.jwt_service.issue_access_token(_user())

        # Act & Assert
        with pytest.raises(InvalidTokenError, match="Invalid refresh token"):
            await self.service.refresh_tokens(access_token)

        self.user_repo.find_by_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_refresh_rejects_garbage(self):
        with pytest.raises(InvalidTokenError):
            await self.service.refresh_tokens("not-a-token")

    @pytest.mark.asyncio
    async def test_refresh_rejects_token_without_subject(self):
        """A refresh token with no usable subject is rejected."""
        # Arrange
        token = jwt.encode(
            {"type": "refresh", "exp": 9999999999},
            SECRET,
            algorithm="HS256",
        )

        # Act & Assert
        with pytest.raises(InvalidTokenError, match="Invalid token payload"):
            await self.service.refresh_tokens(token)

    @pytest.mark.asyncio
    async def test_refresh_rejects_non_email_subject(self):
        token = jwt.encode(
            {"sub": "not-an-email", "type": "refresh", "exp": 9999999999},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Invalid token payload"):
            await self.service.refresh_tokens(token)

    @pytest.mark.asyncio
    async def test_refresh_raises_for_unknown_user(self):
        # Arrange
        self.user_repo.find_by_email.return_value = None
        refresh_token = self.jwt_service.issue_refresh_token(_user())

        # Act & Assert
        with pytest.raises(UserNotFoundError):
            await self.service.refresh_tokens(refresh_token)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status",
        [
            UserStatus.INACTIVE,
            UserStatus.PENDING,
            UserStatus.SUSPENDED,
            UserStatus.DELETED,
        ],
    )
    async def test_refresh_raises_for_inactive_user(self, status):
        # Arrange
        user = _user(status=status)
        self.user_repo.find_by_email.return_value = user
        refresh_token = self.jwt_service.issue_refresh_token(user)

        # Act & Assert
        with pytest.raises(InactiveUserError):
            await self.service.refresh_tokens(refresh_token)


class TestAuthenticationServiceUserFromToken:
    """Tests for resolving the user behind an access token."""

    def setup_method(self):
        """Set up test fixtures."""
        self.user_repo = AsyncMock()
        self.jwt_service = JWTService(secret_key=SECRET)
        self.service = AuthenticationService(
            user_repository=self.user_repo,
            token_signer=self.jwt_service,
        )

    @pytest.mark.asyncio
    async def test_returns_user_for_access_token(self):
        user = _user()
        self.user_repo.find_by_email.return_value = user

        result = await self.service.get_user_from_token(
            self.jwt_service.issue_access_token(user),
        )

        assert result is user

    @pytest.mark.asyncio
    async def test_returns_none_for_invalid_token(self):
        assert await self.service.get_user_from_token("garbage") is None
        self.user_repo.find_by_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_returns_none_for_refresh_token(self):
        """Refresh tokens cannot be used as access tokens."""
        token = self.jwt_service.issue_refresh_token(_user())

        assert await self.service.get_user_from_token(token) is None

    @pytest.mark.asyncio
    async def test_returns_none_without_subject(self):
        token = jwt.encode({"exp": 9999999999}, SECRET, algorithm="HS256")

        assert await self.service.get_user_from_token(token) is None

    @pytest.mark.asyncio
    async def test_returns_none_for_unknown_user(self):
        self.user_repo.find_by_email.return_value = None

        result = await self.service.get_user_from_token(
            self.jwt_service.issue_access_token(_user()),
        )

        assert result is None
