"""Email value object.

Provides validated, normalized email addresses for user identification.
"""

import re
from dataclasses import dataclass

from tessera_identity.domain.user.exceptions import EmailStateError, InvalidEmailError

MAX_EMAIL_LENGTH = 254
MAX_LOCAL_PART_LENGTH = 64

# Dot-atom local part (no leading, trailing or consecutive dots) and a domain
# of at least two non-empty labels. Local part length is checked separately.
_LOCAL_ATOM = r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+"
_DOMAIN_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
EMAIL_PATTERN = re.compile(
    rf"{_LOCAL_ATOM}(?:\.{_LOCAL_ATOM})*"
    rf"@(?:{_DOMAIN_LABEL}\.)+{_DOMAIN_LABEL}",
)


@dataclass(frozen=True)
class Email:
    """Value object representing a validated email address.

    Every construction path runs the same validation, so ``Email(raw)`` and
    ``Email.from_string(raw)`` are interchangeable. The stored value is
    trimmed and lowercased, which makes equality case-insensitive.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            msg = "Email must be a string"
            raise InvalidEmailError(msg)

        trimmed = self.value.strip()

        if not trimmed:
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)

        if len(trimmed) > MAX_EMAIL_LENGTH:
            msg = f"Email is too long (maximum {MAX_EMAIL_LENGTH} characters)"
            raise InvalidEmailError(msg)

        local_part, sep, _ = trimmed.rpartition("@")
        if sep and len(local_part) > MAX_LOCAL_PART_LENGTH:
            msg = (
                "Email local part is too long "
                f"(maximum {MAX_LOCAL_PART_LENGTH} characters)"
            )
            raise InvalidEmailError(msg)

        if not EMAIL_PATTERN.fullmatch(trimmed):
            msg = "Invalid email format"
            raise InvalidEmailError(msg)

        # Replace value with normalized version (frozen dataclass workaround)
        object.__setattr__(self, "value", trimmed.lower())

    @classmethod
    def from_string(cls, value: str) -> "Email":
        return cls(value)

    @property
    def domain(self) -> str:
        _, sep, domain = self.value.partition("@")
        if not sep:
            raise EmailStateError
        return domain

    @property
    def local_part(self) -> str:
        local, sep, _ = self.value.partition("@")
        if not sep:
            raise EmailStateError
        return local

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
