"""FastAPI dependency injection for the Tessera API.

Provides dependencies for:
- Database sessions
- Repositories and domain/application services
- The bearer access token of the current request
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tessera_config.settings import Settings, get_settings
from tessera_identity.application.services import AuthenticationService
from tessera_identity.domain.user import UserService
from tessera_identity.exceptions import InvalidTokenError
from tessera_identity.infrastructure.persistence.sqlalchemy import (
    Base,
    UserRepositorySQLAlchemy,
)
from tessera_identity.services import JWTService, PasswordHashingService

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    settings = getattr(request.app.state, "settings", None)
    return settings or get_settings()


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


def prepare_database_url(url: str) -> str:
    """Create the parent directory of a file-based SQLite database."""
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache()
def get_engine(database_url: str) -> AsyncEngine:
    """
    Get the shared async database engine for a URL.

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        prepare_database_url(database_url),
        echo=False,
        pool_pre_ping=True,
    )


@lru_cache()
def get_session_maker(database_url: str) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(database_url),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(
    settings: SettingsDep,
) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker(settings.database_url)() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables(engine: AsyncEngine) -> None:
    """Create all database tables (idempotent)."""
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date")


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with application settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_seconds=settings.jwt_access_token_expire_seconds,
        refresh_token_expire_days=settings.jwt_refresh_token_expire_days,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.password_hash_rounds)


def get_user_repository(session: DBSession) -> UserRepositorySQLAlchemy:
    return UserRepositorySQLAlchemy(session)


UserRepositoryDep = Annotated[UserRepositorySQLAlchemy, Depends(get_user_repository)]
PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]
JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]


def get_user_service(
    user_repo: UserRepositoryDep,
    password_service: PasswordServiceDep,
) -> UserService:
    return UserService(
        user_repository=user_repo,
        password_hasher=password_service,
    )


def get_authentication_service(
    user_repo: UserRepositoryDep,
    jwt_service: JWTServiceDep,
    settings: SettingsDep,
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=user_repo,
        token_signer=jwt_service,
        access_token_expires_in=settings.jwt_access_token_expire_seconds,
    )


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Bearer token
# -----------------------------------------------------------------------------


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """
    Extract the bearer token from the Authorization header.

    Raises
    ------
    InvalidTokenError
        If no bearer token was sent
    """
    if credentials is None:
        msg = "Not authenticated"
        raise InvalidTokenError(msg)
    return credentials.credentials


BearerToken = Annotated[str, Depends(get_bearer_token)]
