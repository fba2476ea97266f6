"""Unit tests for PasswordHashingService."""

from tessera_identity.services import PasswordHashingService


class TestPasswordHashing:
    """Tests for hash and verify."""

    def setup_method(self):
        """Use a low work factor to keep tests fast."""
        self.service = PasswordHashingService(rounds=4)

    def test_hash_is_bcrypt(self):
        hashed = self.service.hash("Str0ng!pass")

        assert hashed.startswith("$2b$04$")
        assert hashed != "Str0ng!pass"

    def test_hash_is_salted(self):
        """Hashing the same password twice gives different hashes."""
        assert self.service.hash("Str0ng!pass") != self.service.hash("Str0ng!pass")

    def test_verify_correct_password(self):
        hashed = self.service.hash("Str0ng!pass")

        assert self.service.verify(hashed, "Str0ng!pass") is True

    def test_verify_wrong_password(self):
        hashed = self.service.hash("Str0ng!pass")

        assert self.service.verify(hashed, "wrong_password") is False

    def test_verify_invalid_hash_returns_false(self):
        assert self.service.verify("not-a-bcrypt-hash", "Str0ng!pass") is False

    def test_unicode_password(self):
        hashed = self.service.hash("Pässwörd!1")

        assert self.service.verify(hashed, "Pässwörd!1") is True

    def test_long_password_is_accepted(self):
        """Passwords beyond bcrypt's byte limit still hash and verify."""
        password = "Aa1!" + "x" * 120

        hashed = self.service.hash(password)

        assert self.service.verify(hashed, password) is True

    def test_long_passwords_differing_after_72_bytes(self):
        """Every byte of a long password counts, not only the first 72."""
        prefix = "Aa1!" + "x" * 80

        hashed = self.service.hash(prefix + "Secret1")

        assert self.service.verify(hashed, prefix + "Other22") is False
        assert self.service.verify(hashed, prefix + "Secret1") is True


class TestNeedsRehash:
    """Tests for work factor detection."""

    def test_same_rounds_does_not_need_rehash(self):
        service = PasswordHashingService(rounds=4)

        assert service.needs_rehash(service.hash("Str0ng!pass")) is False

    def test_different_rounds_needs_rehash(self):
        old = PasswordHashingService(rounds=4)
        new = PasswordHashingService(rounds=5)

        assert new.needs_rehash(old.hash("Str0ng!pass")) is True

    def test_garbage_needs_rehash(self):
        service = PasswordHashingService(rounds=4)

        assert service.needs_rehash("garbage") is True
        assert service.needs_rehash("$2b$xx$abc") is True
