"""Ports the user domain consumes."""

from tessera_identity.domain.user.ports.password_hasher import PasswordHasher

__all__ = ["PasswordHasher"]
