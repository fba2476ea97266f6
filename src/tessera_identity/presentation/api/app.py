"""FastAPI application factory.

Creates and configures the FastAPI application with routers, middleware
and exception handlers.

API Versioning:
    All API endpoints are versioned under the /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.

Run with:
    uvicorn tessera_identity.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator, Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tessera_config.settings import Settings, get_settings
from tessera_identity.presentation.api.dependencies import create_tables, get_engine
from tessera_identity.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from tessera_identity.presentation.api.routers import auth_router


_QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite")


@lru_cache(maxsize=None)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging once per log level.

    Console output with timestamps and module names; WARNING level for
    noisy third-party libraries.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    for name in ("tessera_identity", "tessera_config"):
        logging.getLogger(name).setLevel(log_level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """User authentication and session management.

**Registration & Login:**
- Register new accounts with email/password
- Login to obtain JWT access and refresh tokens
- Refresh tokens before expiry

**Security:**
- Passwords are hashed with bcrypt
- Stateless JWT bearer tokens
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)
    engine = get_engine(settings.database_url)
    await create_tables(engine)
    yield

    logger.info("Shutting down %s API...", settings.app_name)
    await engine.dispose()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    v1_router = APIRouter()
    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    return v1_router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="User registration, login and JWT token management.",
        version=API_VERSION,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint (unversioned)."""
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    return app


def main() -> None:
    """Run the API with uvicorn using host and port from settings."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "tessera_identity.presentation.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
    )
