"""Pytest fixtures for API integration tests."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from tessera_config.settings import Settings
from tessera_identity.infrastructure.persistence.sqlalchemy import Base
from tessera_identity.presentation.api.app import API_V1_PREFIX, create_app
from tessera_identity.presentation.api.dependencies import get_db_session

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with a fast bcrypt work factor and short access tokens."""
    return Settings(
        _env_file=None,
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        database_url="sqlite+aiosqlite:///:memory:",
        password_hash_rounds=4,
        jwt_access_token_expire_seconds=900,
        debug=True,
        api_cors_origins="http://localhost:3000",
    )


@pytest.fixture
async def test_db_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def test_session_maker(test_db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def test_app(api_settings, test_session_maker) -> FastAPI:
    """Create the app with its database session bound to the test engine."""
    app = create_app(settings=api_settings)

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session

    return app


@pytest.fixture
async def client(test_app):
    """HTTP client talking to the app in-process."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def registered_user_data() -> dict:
    """Test user registration data."""
    return {
        "email": "test@example.com",
        "password": "SecurePassword123!",
    }


@pytest.fixture
async def auth_tokens(client, registered_user_data, api_v1_prefix) -> dict:
    """Register the test user and return its token response."""
    response = await client.post(
        f"{api_v1_prefix}/auth/register",
        json=registered_user_data,
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(auth_tokens) -> dict:
    """Get auth headers for a registered user."""
    return {"Authorization": f"Bearer {auth_tokens['access_token']}"}
