import logging
from contextlib import contextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import settings

logger = logging.getLogger("neighbornotes.errors")


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(AppError):
    status_code = 400


class AuthRequired(AppError):
    status_code = 401


class Forbidden(AppError):
    status_code = 403


class NotFound(AppError):
    status_code = 404


class InternalError(AppError):
    status_code = 500


def error_body(message: str, details: str | None = None) -> dict:
    body = {"error": message}
    if settings.is_development and details:
        body["details"] = details
    return body


@contextmanager
def failure_as(message: str, log: logging.Logger = logger):
    """Turn anything that is not already an AppError into an InternalError.

    The original exception text travels as ``details`` and is only exposed
    to clients in development mode.
    """
    try:
        yield
    except AppError:
        raise
    except Exception as exc:
        log.exception("%s: %s", message, exc)
        raise InternalError(message, details=str(exc)) from exc


async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(error_body(exc.message, exc.details), status_code=exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(error_body("Invalid request", str(exc.errors())), status_code=400)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled error method=%s path=%s", request.method, request.url.path)
    return JSONResponse(error_body("Internal server error", str(exc)), status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
