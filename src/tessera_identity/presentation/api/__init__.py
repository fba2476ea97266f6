"""FastAPI presentation layer."""

from tessera_identity.presentation.api.app import create_app

__all__ = ["create_app"]
