"""Tests for the TokenPair value object."""

import pytest

from tessera_identity.domain.shared.exceptions import ValidationError
from tessera_identity.domain.user import TokenPair


class TestTokenPair:
    """Tests for TokenPair validation and equality."""

    def test_valid_pair(self):
        pair = TokenPair("access", "refresh", 10)

        assert pair.access_token == "access"
        assert pair.refresh_token == "refresh"
        assert pair.expires_in == 10

    def test_empty_access_token_rejected(self):
        with pytest.raises(ValidationError, match="Access token cannot be empty"):
            TokenPair("", "r", 10)

    def test_empty_refresh_token_rejected(self):
        with pytest.raises(ValidationError, match="Refresh token cannot be empty"):
            TokenPair("a", "", 10)

    @pytest.mark.parametrize("expires_in", [0, -1])
    def test_non_positive_expiry_rejected(self, expires_in):
        with pytest.raises(ValidationError, match="must be positive"):
            TokenPair("a", "b", expires_in)

    def test_structural_equality(self):
        """Identical triples are equal."""
        assert TokenPair("a", "b", 10) == TokenPair("a", "b", 10)
        assert TokenPair("a", "b", 10) != TokenPair("a", "b", 11)

    def test_repr_masks_tokens(self):
        """Token material never appears in repr."""
        text = repr(TokenPair("secret-access", "secret-refresh", 3600))

        assert "secret" not in text
        assert "3600" in text
