"""Interface layer errors and their HTTP translation.

Every error response has the body ``{"error": <kind>, "message": <text>}``,
with extra fields for some kinds (``refunded`` for failed generations).
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from autoblog.domain.error import (
    AlreadyExistsError,
    BusinessRuleViolationError,
    ConcurrencyConflictError,
    DomainError,
    GenerationFailedError,
    GenerationInProgressError,
    IdentityError,
    IdentityErrorKind,
    InsufficientCreditError,
    NotAuthorizedError,
    NotFoundError,
    ProviderUnavailableError,
    RevisionConflictError,
    ValidationError,
)
from autoblog.util.jwt import JWTError

logger = logging.getLogger(__name__)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class APIError(InterfaceError):
    """Error that maps directly onto an HTTP response."""

    def __init__(
        self,
        status_code: int,
        kind: str,
        message: str,
        extra: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        self.kind = kind
        self.message = message
        self.extra = extra or {}
        super().__init__(message)

    def to_response(self) -> JSONResponse:
        return JSONResponse(
            status_code=self.status_code,
            content={"error": self.kind, "message": self.message, **self.extra},
        )


_IDENTITY_STATUS = {
    IdentityErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    IdentityErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    IdentityErrorKind.NOT_REGISTERED: status.HTTP_404_NOT_FOUND,
    IdentityErrorKind.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
}


def to_api_error(exc: Exception) -> APIError:
    """Translate a domain or token error into an APIError.

    Args:
        exc: Error raised by a use case

    Returns:
        The matching APIError; unknown domain errors become 400s
    """
    if isinstance(exc, APIError):
        return exc
    if isinstance(exc, IdentityError):
        return APIError(_IDENTITY_STATUS[exc.kind], exc.kind.value, str(exc))
    if isinstance(exc, JWTError):
        return APIError(status.HTTP_401_UNAUTHORIZED, "unauthenticated", str(exc))
    if isinstance(exc, GenerationFailedError):
        return APIError(
            status.HTTP_502_BAD_GATEWAY,
            "generation_failed",
            str(exc),
            extra={"refunded": exc.refunded, "kind": exc.kind.value},
        )
    if isinstance(exc, InsufficientCreditError):
        return APIError(
            status.HTTP_402_PAYMENT_REQUIRED,
            "insufficient_credit",
            "Not enough credits. Please top up to continue.",
            extra={"required": exc.cost},
        )
    if isinstance(exc, GenerationInProgressError):
        return APIError(status.HTTP_409_CONFLICT, "generation_in_progress", str(exc))
    if isinstance(exc, NotAuthorizedError):
        return APIError(status.HTTP_403_FORBIDDEN, "forbidden", str(exc))
    if isinstance(exc, NotFoundError):
        return APIError(status.HTTP_404_NOT_FOUND, "not_found", str(exc))
    if isinstance(exc, AlreadyExistsError):
        return APIError(status.HTTP_409_CONFLICT, "already_exists", str(exc))
    if isinstance(exc, (ConcurrencyConflictError, RevisionConflictError)):
        return APIError(status.HTTP_409_CONFLICT, "conflict", str(exc))
    if isinstance(exc, ProviderUnavailableError):
        return APIError(status.HTTP_502_BAD_GATEWAY, "provider_unavailable", str(exc))
    if isinstance(exc, (ValidationError, BusinessRuleViolationError)):
        return APIError(status.HTTP_400_BAD_REQUEST, "validation", str(exc))
    if isinstance(exc, DomainError):
        return APIError(status.HTTP_400_BAD_REQUEST, "domain_error", str(exc))
    raise TypeError(f"No HTTP mapping for {type(exc).__name__}")


async def _handle_mapped_error(request: Request, exc: Exception) -> JSONResponse:
    api_error = to_api_error(exc)
    if api_error.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {api_error.message}")
    else:
        logger.info(
            f"{request.method} {request.url.path} -> {api_error.status_code} {api_error.kind}"
        )
    return api_error.to_response()


async def _handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = f"{location}: {first.get('msg', 'invalid request')}" if location else "Invalid request"
    return APIError(
        status.HTTP_400_BAD_REQUEST,
        "validation",
        message,
        extra={"details": [{"loc": e.get("loc"), "msg": e.get("msg")} for e in errors]},
    ).to_response()


def register_error_handlers(app: FastAPI) -> None:
    """Install the JSON error translation on an app."""
    app.add_exception_handler(APIError, _handle_mapped_error)
    app.add_exception_handler(DomainError, _handle_mapped_error)
    app.add_exception_handler(JWTError, _handle_mapped_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
