"""Application services for identity management."""

from tessera_identity.application.services.authentication_service import (
    AuthenticationService,
)

__all__ = ["AuthenticationService"]
