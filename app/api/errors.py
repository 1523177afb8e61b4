# app/api/errors.py
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.errors import StoreError, ValidationError, NotFoundError, UnexpectedError
from app.utils.settings import is_development
from app.utils.logging import get_logger

logger = get_logger(__name__)


def error_response(
    exc: StoreError,
    detail: str | None = None,
    status_code: int | None = None,
    headers: dict | None = None,
) -> JSONResponse:
    body = {
        "status": "error",
        "message": exc.message,
        "data": exc.data,
        "error": detail if is_development() else None,
    }
    return JSONResponse(
        status_code=status_code or exc.status_code,
        content=jsonable_encoder(body),
        headers=headers,
    )


def _field_errors(exc: RequestValidationError):
    details = []
    for err in exc.errors():
        # loc np. ("body", "productId") albo ("query", "limit")
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path", "header")]
        details.append({"field": ".".join(loc), "message": err.get("msg", "")})
    return details


async def store_error_handler(request: Request, exc: StoreError):
    if isinstance(exc, UnexpectedError):
        cause = exc.__cause__
        return error_response(exc, detail=str(cause) if cause else exc.message)
    return error_response(exc)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return error_response(ValidationError(_field_errors(exc)))


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return error_response(NotFoundError(f"Route not found - {request.url.path}"), headers=exc.headers)
    # np. 405 musi zachowac naglowek Allow
    return error_response(StoreError(str(exc.detail)), status_code=exc.status_code, headers=exc.headers)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(UnexpectedError("Internal server error"), detail=str(exc))


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
