import logging
from contextlib import contextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

GENERIC_STORE_MESSAGE = "Error interno del servidor"


class InvalidRequest(ValueError):
    """Required fields are missing or malformed."""


class NotFound(LookupError):
    """The target row of a delete does not exist."""


class InternalStoreError(RuntimeError):
    """Unexpected persistence failure. The message is safe to show clients."""

    def __init__(self, message=GENERIC_STORE_MESSAGE):
        super().__init__(message)


@contextmanager
def store_errors(message, db=None):
    """Translate store failures into InternalStoreError, rolling back ``db``."""
    try:
        yield
    except SQLAlchemyError as exc:
        if db is not None:
            db.rollback()
        logger.exception("Store operation failed: %s", message)
        raise InternalStoreError(message) from exc


def _error_response(status_code, message):
    return JSONResponse(status_code=status_code, content={"error": message})


async def _invalid_request_handler(_request: Request, exc: InvalidRequest):
    return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def _validation_error_handler(_request: Request, exc: RequestValidationError):
    fields = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        if location:
            fields.append(".".join(location))
    message = "Datos invalidos"
    if fields:
        message = "{}: {}".format(message, ", ".join(fields))
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


async def _not_found_handler(_request: Request, exc: NotFound):
    return _error_response(status.HTTP_404_NOT_FOUND, str(exc))


async def _internal_store_handler(_request: Request, exc: InternalStoreError):
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


async def _sqlalchemy_handler(request: Request, exc: SQLAlchemyError):
    logger.error(
        "Unhandled store error on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_STORE_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidRequest, _invalid_request_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(NotFound, _not_found_handler)
    app.add_exception_handler(InternalStoreError, _internal_store_handler)
    app.add_exception_handler(SQLAlchemyError, _sqlalchemy_handler)


__all__ = [
    "GENERIC_STORE_MESSAGE",
    "InternalStoreError",
    "InvalidRequest",
    "NotFound",
    "register_exception_handlers",
    "store_errors",
]
