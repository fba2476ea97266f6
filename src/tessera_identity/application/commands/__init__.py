"""Application commands for authentication."""

from tessera_identity.application.commands.login_command import LoginCommand
from tessera_identity.application.commands.logout_command import LogoutCommand
from tessera_identity.application.commands.refresh_token_command import (
    RefreshTokenCommand,
)
from tessera_identity.application.commands.register_user_command import (
    RegisterUserCommand,
)

__all__ = [
    "LoginCommand",
    "LogoutCommand",
    "RefreshTokenCommand",
    "RegisterUserCommand",
]
