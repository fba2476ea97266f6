"""Password strength policy."""

import re

from tessera_identity.domain.user.exceptions import WeakPasswordError

_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")
_DIGIT = re.compile(r"\d")
_SPECIAL = re.compile(r"[^A-Za-z0-9]")


class PasswordPolicy:
    """Strength requirements for plaintext passwords.

    Checks run in a fixed order and the first failing rule is reported:
    empty, too short, too long, then missing uppercase letter, lowercase
    letter, digit and special character.

    Examples
    --------
    >>> policy = PasswordPolicy()
    >>> policy.is_valid("Str0ng!pass")
    True
    >>> policy.is_valid("weak")
    False
    """

    MIN_LENGTH = 8
    MAX_LENGTH = 128

    def validate(self, password: str) -> None:
        """Raise ``WeakPasswordError`` unless ``password`` meets every rule."""
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters long"
            raise WeakPasswordError(msg)

        if len(password) > self.MAX_LENGTH:
            msg = f"Password cannot be longer than {self.MAX_LENGTH} characters"
            raise WeakPasswordError(msg)

        if not _UPPERCASE.search(password):
            msg = "Password must contain at least one uppercase letter"
            raise WeakPasswordError(msg)

        if not _LOWERCASE.search(password):
            msg = "Password must contain at least one lowercase letter"
            raise WeakPasswordError(msg)

        if not _DIGIT.search(password):
            msg = "Password must contain at least one digit"
            raise WeakPasswordError(msg)

        if not _SPECIAL.search(password):
            msg = "Password must contain at least one special character"
            raise WeakPasswordError(msg)

    def is_valid(self, password: str) -> bool:
        try:
            self.validate(password)
        except WeakPasswordError:
            return False
        return True
