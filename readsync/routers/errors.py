"""Map domain errors to HTTP status codes and {code, message} envelopes."""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from readsync.core.errors import ErrorKind, SyncError

logger = logging.getLogger(__name__)

# kind -> (http status, envelope code)
WIRE_ERRORS = {
    ErrorKind.AUTH_FAILURE: (401, 401),
    ErrorKind.CONFLICT: (402, 2002),
    ErrorKind.BAD_REQUEST: (400, 2003),
    ErrorKind.INTERNAL: (500, 500),
}

INTERNAL_MESSAGE = "Internal Server Error"


def error_response(kind: ErrorKind, message: str) -> JSONResponse:
    status, code = WIRE_ERRORS[kind]
    if kind is ErrorKind.INTERNAL:
        message = INTERNAL_MESSAGE
    return JSONResponse(status_code=status, content={"code": code, "message": message})


async def sync_error_handler(request: Request, exc: SyncError) -> JSONResponse:
    return error_response(exc.kind, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(ErrorKind.BAD_REQUEST, "Bad request")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return error_response(ErrorKind.INTERNAL, INTERNAL_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SyncError, sync_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
