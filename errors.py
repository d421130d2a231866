import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base for failures that end a request with a JSON message."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DuplicateEmail(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Email already registered"


class InvalidCredentials(ApiError):
    # Same message for unknown email and wrong password
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid email or password"


class MissingToken(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "No token provided"


class InvalidOrExpiredToken(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Invalid or expired token"


class AdminRequired(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Access denied. Admins only."


class NotFoundOrNotAuthorized(ApiError):
    # Same answer for a missing task and somebody else's task
    status_code = status.HTTP_404_NOT_FOUND
    message = "Task not found or not authorized"


class UserNotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "User not found"


async def api_error_handler(request: Request, exc: ApiError):
    """Render an ApiError as {message}"""
    logger.debug(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render framework HTTP errors with a message field"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Handle request validation errors."""
    logger.info(f"Validation error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=422,
        content={"message": "Invalid request body", "errors": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
