"""Application queries for authentication."""

from tessera_identity.application.queries.get_current_user_query import (
    GetCurrentUserQuery,
)

__all__ = ["GetCurrentUserQuery"]
