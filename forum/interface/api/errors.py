"""Mapping of errors to HTTP responses.

Every failure is answered with ``{"status": "fail", "message": ...}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from forum.domain.error import AuthorizationError, NotFoundError, ValidationError
from forum.interface.error import AuthenticationError


def _fail(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "fail", "message": message},
    )


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return _fail(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Body that is not a JSON object, or a malformed path
    return _fail(status.HTTP_400_BAD_REQUEST, "Invalid request payload")


async def handle_authentication_error(
    request: Request, exc: AuthenticationError
) -> JSONResponse:
    return _fail(status.HTTP_401_UNAUTHORIZED, str(exc))


async def handle_authorization_error(
    request: Request, exc: AuthorizationError
) -> JSONResponse:
    logfire.warn(
        "Forbidden modification attempt",
        resource=exc.resource,
        resource_id=exc.resource_id,
        user_id=exc.user_id,
    )
    return _fail(status.HTTP_403_FORBIDDEN, str(exc))


async def handle_not_found_error(request: Request, exc: NotFoundError) -> JSONResponse:
    return _fail(status.HTTP_404_NOT_FOUND, str(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers on an application."""
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(AuthenticationError, handle_authentication_error)
    app.add_exception_handler(AuthorizationError, handle_authorization_error)
    app.add_exception_handler(NotFoundError, handle_not_found_error)
