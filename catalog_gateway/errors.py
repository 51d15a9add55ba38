# catalog_gateway/errors.py
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class BadRequest(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class NotFound(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=404, detail=detail)


class InternalError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=500, detail=detail)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    # First decoding error only, the body stays plain text
    errors = exc.errors()
    if errors:
        err = errors[0]
        location = ".".join(str(part) for part in err.get("loc", ()))
        detail = f"{location}: {err.get('msg', 'invalid value')}"
    else:
        detail = "Invalid request"
    return PlainTextResponse(detail, status_code=400)


async def store_error_handler(request: Request, exc: Exception):
    logger.error("store error on %s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=500)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(PyMongoError, store_error_handler)
