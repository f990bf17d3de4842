"""
API error taxonomy and the JSON envelopes they render to.

Services raise these; `install_error_handlers` turns them (and the framework's
own 404/405/422 errors) into `{"error": ...}` bodies so no response is ever a
bare status code.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiError(RuntimeError):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def body(self) -> dict[str, Any]:
        return {"error": self.message}


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: list[str], message: str = "Validation failed") -> None:
        super().__init__(message)
        self.errors = list(errors)

    def body(self) -> dict[str, Any]:
        return {"error": self.message, "errors": self.errors}


class MissingIdError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Post ID is required") -> None:
        super().__init__(message)


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Post not found") -> None:
        super().__init__(message)


class MethodNotAllowedError(ApiError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED

    def __init__(self, message: str = "Method not allowed") -> None:
        super().__init__(message)


# Message carries the underlying driver error for diagnostics.
class StorageError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def _format_request_error(err: dict[str, Any]) -> str:
    loc = [str(part) for part in err.get("loc", ()) if part != "body"]
    msg = str(err.get("msg") or "Invalid value")
    if not loc:
        return msg
    return f"{'.'.join(loc)}: {msg}"


async def api_error_handler(_: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.body())


async def http_error_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        content: dict[str, Any] = {"error": "Resource not found"}
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        content = MethodNotAllowedError().body()
    else:
        content = {"error": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed JSON or wrongly-typed fields: report them like field validation.
    err = ValidationError([_format_request_error(e) for e in exc.errors()])
    return JSONResponse(status_code=err.status_code, content=err.body())


async def unhandled_error_handler(_: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error type=%s", type(exc).__name__, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
