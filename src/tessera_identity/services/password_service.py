"""Password hashing service using bcrypt."""

import base64
import hashlib

import bcrypt

from tessera_identity.domain.user import PasswordHasher


def _encode(password: str) -> bytes:
    """SHA-256 the password so bcrypt sees every byte of it.

    bcrypt ignores input past 72 bytes; the base64 digest is 44 bytes and
    free of NULs.
    """
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest)


class PasswordHashingService(PasswordHasher):
    """Service for password hashing and verification.

    Uses bcrypt with a configurable work factor. Strength rules are not
    checked here; UserService applies PasswordPolicy before hashing.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hashed = service.hash("Str0ng!pass")
    >>> service.verify(hashed, "Str0ng!pass")
    True
    >>> service.verify(hashed, "wrong_password")
    False
    """

    DEFAULT_ROUNDS = 12

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Higher values are
            slower to compute.
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(_encode(password), salt)
        return hashed.decode("utf-8")

    def verify(self, password_hash: str, password: str) -> bool:
        try:
            return bcrypt.checkpw(
                _encode(password),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format
            return False

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a password hash was produced with a different work factor.

        Parameters
        ----------
        password_hash
            The existing hash to check

        Returns
        -------
        True if the hash should be regenerated
        """
        # bcrypt format: $2b$XX$...
        parts = password_hash.split("$")
        if len(parts) < 3:
            return True
        try:
            return int(parts[2]) != self._rounds
        except ValueError:
            return True
