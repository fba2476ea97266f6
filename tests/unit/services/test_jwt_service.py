"""Unit tests for JWTService."""

from datetime import timedelta

import jwt
import pytest

from tessera_identity.domain.user import User, UserRole, UserStatus
from tessera_identity.exceptions import InvalidTokenError
from tessera_identity.services import JWTService

SECRET = "test-secret-key-12345"


def _user() -> User:
    return User.create(
        email="test@example.com",
        password_hash="hashed",
        roles=[UserRole.USER, UserRole.MANAGER],
        status=UserStatus.ACTIVE,
    )


class TestJWTServiceInit:
    """Tests for JWTService initialization."""

    def test_init_with_valid_secret(self):
        """Test that service initializes with valid secret."""
        service = JWTService(secret_key="test-secret-key")
        assert service is not None

    def test_init_with_empty_secret_raises(self):
        """Test that empty secret raises ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")


class TestAccessTokens:
    """Tests for access token issuance and validation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = JWTService(secret_key=SECRET)
        self.user = _user()

    def test_access_token_claims(self):
        """Access tokens carry the subject, id, roles and no type."""
        token = self.service.issue_access_token(self.user)

        claims = self.service.validate(token)

        assert claims["sub"] == "test@example.com"
        assert claims["email"] == "test@example.com"
        assert claims["user_id"] == str(self.user.id)
        assert claims["roles"] == ["ROLE_USER", "ROLE_MANAGER"]
        assert "type" not in claims
        assert claims["exp"] - claims["iat"] == 3600

    def test_custom_access_lifetime(self):
        service = JWTService(secret_key=SECRET, access_token_expire_seconds=60)

        claims = service.validate(service.issue_access_token(self.user))

        assert claims["exp"] - claims["iat"] == 60

    def test_access_token_is_not_refresh(self):
        token = self.service.issue_access_token(self.user)

        assert self.service.validate_access_token(token) is True
        assert self.service.validate_refresh_token(token) is False

    def test_issue_merges_extra_claims(self):
        token = self.service.issue(self.user, {"scope": "read"})

        claims = self.service.validate(token)

        assert claims["scope"] == "read"
        assert claims["sub"] == "test@example.com"

    def test_expired_token_raises(self):
        """Test that expired token raises InvalidTokenError."""
        token = self.service.issue(
            self.user,
            expires_delta=timedelta(seconds=-1),  # Already expired
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.validate(token)

        assert self.service.validate_access_token(token) is False


class TestRefreshTokens:
    """Tests for refresh token issuance and validation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = JWTService(secret_key=SECRET)
        self.user = _user()

    def test_refresh_token_claims(self):
        """Refresh tokens carry only the subject and the refresh type."""
        token = self.service.issue_refresh_token(self.user)

        claims = self.service.validate(token)

        assert claims["sub"] == "test@example.com"
        assert claims["type"] == "refresh"
        assert "roles" not in claims
        assert claims["exp"] - claims["iat"] == 7 * 24 * 3600

    def test_refresh_token_is_not_access(self):
        token = self.service.issue_refresh_token(self.user)

        assert self.service.validate_refresh_token(token) is True
        assert self.service.validate_access_token(token) is False


class TestTokenValidation:
    """Tests for rejection of bad tokens."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = JWTService(secret_key=SECRET)

    def test_malformed_token_raises(self):
        with pytest.raises(InvalidTokenError, match="Invalid token"):
            self.service.validate("not.a.token")

    def test_wrong_secret_raises(self):
        """Tokens signed with another key are rejected."""
        other = JWTService(secret_key="another-secret-key-67890")
        token = other.issue_access_token(_user())

        with pytest.raises(InvalidTokenError):
            self.service.validate(token)

    def test_token_without_exp_raises(self):
        token = jwt.encode({"sub": "test@example.com"}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidTokenError):
            self.service.validate(token)

    def test_other_algorithm_rejected(self):
        token = jwt.encode(
            {"sub": "test@example.com", "exp": 9999999999},
            SECRET,
            algorithm="HS512",
        )

        with pytest.raises(InvalidTokenError):
            self.service.validate(token)

    def test_boolean_checks_never_raise(self):
        assert self.service.validate_access_token("garbage") is False
        assert self.service.validate_refresh_token("garbage") is False
