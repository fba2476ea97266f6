"""Token pair value object."""

from dataclasses import dataclass

from tessera_identity.domain.shared.exceptions import ValidationError


@dataclass(frozen=True)
class TokenPair:
    """An access token, a refresh token and the access token lifetime in seconds."""

    access_token: str
    refresh_token: str
    expires_in: int

    def __post_init__(self) -> None:
        if not self.access_token:
            msg = "Access token cannot be empty"
            raise ValidationError(msg)

        if not self.refresh_token:
            msg = "Refresh token cannot be empty"
            raise ValidationError(msg)

        if self.expires_in <= 0:
            msg = "Expires in must be positive"
            raise ValidationError(msg)

    def __repr__(self) -> str:
        return f"TokenPair(access_token=*****, refresh_token=*****, expires_in={self.expires_in})"
