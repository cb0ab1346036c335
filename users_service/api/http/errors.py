"""Error envelope and the exception handlers that produce it."""

from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from loguru import logger
from pydantic import BaseModel, Field
from sqlalchemy.exc import IntegrityError
from starlette.responses import JSONResponse

from users_service.core.exceptions import UserError, UserNotFoundError
from users_service.entities.user.schemas import UserRequest

USER_ERROR = "USER_ERROR"
VALIDATION_ERROR = "VALIDATION_ERROR"

# Errors raised for absent fields are located by attribute name, not alias
_WIRE_NAMES = {
    name: field.alias for name, field in UserRequest.model_fields.items() if field.alias
}


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    status: int = Field(examples=[404])
    code: str = Field(examples=["USER_NOT_FOUND"])
    message: str = Field(examples=["User not found"])
    details: str | list[dict[str, str]] | None = None
    path: str | None = Field(default=None, examples=["/api/v1/users/42"])
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


def error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        status=status_code,
        code=code,
        message=message,
        details=details,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body),
        headers=headers,
    )


def _field_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    errors = []
    for error in exc.errors():
        names = [
            _WIRE_NAMES.get(str(part), str(part))
            for part in error.get("loc", ())
            if part != "body"
        ]
        message = error.get("msg", "Invalid value").removeprefix("Value error, ")
        errors.append({"field": ".".join(names) or "body", "message": message})
    return errors


async def handle_not_found(request: Request, exc: UserNotFoundError) -> JSONResponse:
    return error_response(request, 404, exc.code, exc.message, exc.details)


async def handle_user_error(request: Request, exc: UserError) -> JSONResponse:
    return error_response(request, 400, USER_ERROR, exc.message, exc.details)


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    field_errors = _field_errors(exc)
    summary = "; ".join(f"{e['field']}: {e['message']}" for e in field_errors)
    logger.info("Rejected request body: {}", summary)
    return error_response(
        request, 400, VALIDATION_ERROR, f"Validation error: {summary}", field_errors
    )


async def handle_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
    reason = str(exc.orig) if exc.orig is not None else str(exc)
    logger.warning("Store rejected write: {}", reason)
    return error_response(
        request,
        400,
        USER_ERROR,
        "User data conflicts with an existing user",
        reason,
    )


def unexpected_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Answer an unclassified failure with a bad request carrying its message."""
    return error_response(request, 400, USER_ERROR, str(exc) or type(exc).__name__)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UserNotFoundError, handle_not_found)
    app.add_exception_handler(UserError, handle_user_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
