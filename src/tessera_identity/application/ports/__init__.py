"""Ports required by the application layer."""

from tessera_identity.application.ports.token_signer import (
    REFRESH_TOKEN_TYPE,
    TokenSigner,
)

__all__ = ["REFRESH_TOKEN_TYPE", "TokenSigner"]
