"""Translate domain and auth exceptions into JSON error responses.

Every error body has the same shape::

    {"detail": "<message safe for clients>", "code": "<ErrorCode value>"}

401 responses also carry ``WWW-Authenticate: Bearer``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from tessera_identity.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from tessera_identity.exceptions import AuthError

logger = logging.getLogger(__name__)

_CODES_BY_STATUS: dict[int, tuple[ErrorCode, ...]] = {
    status.HTTP_400_BAD_REQUEST: (
        ErrorCode.VALIDATION_ERROR,
        ErrorCode.INVALID_FORMAT,
        ErrorCode.INVALID_EMAIL,
        ErrorCode.INVALID_USER_ID,
        ErrorCode.INVALID_ROLE,
        ErrorCode.INVALID_STATUS,
        ErrorCode.WEAK_PASSWORD,
    ),
    status.HTTP_401_UNAUTHORIZED: (
        ErrorCode.AUTHENTICATION_FAILED,
        ErrorCode.INVALID_CREDENTIALS,
        ErrorCode.INVALID_TOKEN,
    ),
    status.HTTP_403_FORBIDDEN: (ErrorCode.INACTIVE_USER,),
    status.HTTP_404_NOT_FOUND: (
        ErrorCode.ENTITY_NOT_FOUND,
        ErrorCode.USER_NOT_FOUND,
    ),
    status.HTTP_409_CONFLICT: (
        ErrorCode.CONFLICT,
        ErrorCode.EMAIL_ALREADY_EXISTS,
    ),
    status.HTTP_422_UNPROCESSABLE_ENTITY: (
        ErrorCode.BUSINESS_RULE_VIOLATION,
        ErrorCode.INVALID_STATUS_TRANSITION,
    ),
    status.HTTP_500_INTERNAL_SERVER_ERROR: (ErrorCode.INTERNAL_ERROR,),
}

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    code: status_code
    for status_code, codes in _CODES_BY_STATUS.items()
    for code in codes
}

# Used only for codes missing from the table; first match wins.
_STATUS_BY_FAMILY: tuple[tuple[type[DomainException], int], ...] = (
    (AuthError, status.HTTP_401_UNAUTHORIZED),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolation, status.HTTP_422_UNPROCESSABLE_ENTITY),
)


def get_status_for_exception(exc: DomainException) -> int:
    """HTTP status for ``exc``: by error code, then by exception family."""
    mapped = ERROR_CODE_TO_STATUS.get(exc.code)
    if mapped is not None:
        return mapped

    for family, status_code in _STATUS_BY_FAMILY:
        if isinstance(exc, family):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def _error_response(status_code: int, detail: str, code: ErrorCode) -> JSONResponse:
    headers = (
        {"WWW-Authenticate": "Bearer"}
        if status_code == status.HTTP_401_UNAUTHORIZED
        else None
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "code": code.value},
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Install the domain and catch-all handlers on ``app``."""

    @app.exception_handler(DomainException)
    async def handle_domain_exception(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        status_code = get_status_for_exception(exc)
        log = logger.error if status_code >= 500 else logger.warning
        log(
            "%s %s -> %d %s: %s %s",
            request.method,
            request.url.path,
            status_code,
            exc.code.value,
            exc.message,
            exc.details or "",
        )
        return _error_response(status_code, exc.message, exc.code)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An internal error occurred",
            ErrorCode.INTERNAL_ERROR,
        )
