"""Authentication schemas for request/response models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from tessera_identity.application.dtos import AuthResult, UserDTO


class RegisterRequest(BaseModel):
    """Request schema for user registration.

    Email format and password strength are checked by the domain so that
    failures carry the domain's error codes.
    """

    email: str = Field(..., description="User's email address")
    password: str = Field(..., description="Password (8-128 characters)")
    tenant_id: Optional[str] = Field(default=None, max_length=64)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "Str0ng!password",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "Str0ng!password",
            },
        },
    )


class RefreshRequest(BaseModel):
    """Request schema for token refresh."""

    refresh_token: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "refresh_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            },
        },
    )


class UserResponse(BaseModel):
    """Response schema for user data."""

    id: str
    email: str
    roles: list[str]
    status: str
    tenant_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: UserDTO) -> "UserResponse":
        return cls(
            id=dto.id,
            email=dto.email,
            roles=list(dto.roles),
            status=dto.status,
            tenant_id=dto.tenant_id,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class AuthResponse(BaseModel):
    """Response schema for login, registration and refresh.

    ``user`` is omitted (null) on refresh.
    """

    access_token: str
    refresh_token: str
    token_type: str = Field(default="Bearer")
    expires_in: int
    user: Optional[UserResponse] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "refresh_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "Bearer",
                "expires_in": 3600,
            },
        },
    )

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthResponse":
        return cls(
            access_token=result.access_token,
            refresh_token=result.refresh_token,
            token_type=result.token_type,
            expires_in=result.expires_in,
            user=UserResponse.from_dto(result.user) if result.user else None,
        )


class MessageResponse(BaseModel):
    """Simple status message."""

    message: str
    status: str = "success"
