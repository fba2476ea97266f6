"""Authentication router for registration, login and token management."""

import logging

from fastapi import APIRouter, status

from tessera_identity.application.commands import (
    LoginCommand,
    LogoutCommand,
    RefreshTokenCommand,
    RegisterUserCommand,
)
from tessera_identity.application.queries import GetCurrentUserQuery
from tessera_identity.presentation.api.dependencies import (
    AuthService,
    BearerToken,
    DBSession,
    PasswordServiceDep,
    UserRepositoryDep,
    UserServiceDep,
)
from tessera_identity.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    RefreshRequest,
    RegisterRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Invalid email or weak password"},
        409: {"description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    session: DBSession,
    user_service: UserServiceDep,
    auth_service: AuthService,
) -> AuthResponse:
    command = RegisterUserCommand(user_service=user_service, auth_service=auth_service)
    result = await command.execute(
        email=request.email,
        password=request.password,
        tenant_id=request.tenant_id,
    )
    await session.commit()

    return AuthResponse.from_result(result)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
        403: {"description": "Account not active"},
    },
)
async def login(
    request: LoginRequest,
    user_repo: UserRepositoryDep,
    password_service: PasswordServiceDep,
    auth_service: AuthService,
) -> AuthResponse:
    command = LoginCommand(
        user_repository=user_repo,
        password_hasher=password_service,
        auth_service=auth_service,
    )
    result = await command.execute(email=request.email, password=request.password)
    return AuthResponse.from_result(result)


@router.post(
    "/refresh",
    summary="Refresh access token",
    responses={
        200: {"description": "Tokens refreshed"},
        401: {"description": "Invalid or expired refresh token"},
        403: {"description": "Account not active"},
        404: {"description": "User no longer exists"},
    },
)
async def refresh(
    request: RefreshRequest,
    auth_service: AuthService,
) -> AuthResponse:
    """
    Exchange a refresh token for a new access/refresh token pair.

    The old refresh token stays valid until it expires.
    """
    command = RefreshTokenCommand(auth_service=auth_service)
    result = await command.execute(request.refresh_token)
    return AuthResponse.from_result(result)


@router.post("/logout", summary="Log out")
async def logout() -> MessageResponse:
    """Stateless logout; clients discard their tokens."""
    message = await LogoutCommand().execute()
    return MessageResponse(message=message)


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user"},
        401: {"description": "Missing or invalid access token"},
    },
)
async def me(
    token: BearerToken,
    auth_service: AuthService,
) -> UserResponse:
    query = GetCurrentUserQuery(auth_service=auth_service)
    user = await query.execute(token)
    return UserResponse.from_dto(user)

