from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("user_service")

REQUIRED_FIELDS = ("name", "email")
# pydantic error types that mean "the field was not supplied"
_MISSING_TYPES = ("missing", "string_too_short")


class ValidationError(HTTPException):
    def __init__(self, field: str):
        super().__init__(status_code=400, detail=f"{field} is required")
        self.field = field


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "User not found"):
        super().__init__(status_code=404, detail=detail)


def _error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _body_error_message(errors) -> str:
    """Collapse pydantic's error list into the one-line message clients get.

    Only the first error is reported; pydantic orders them by field
    declaration, so ``name`` wins over ``email``.
    """
    if not errors:
        return "Invalid request body"
    first = errors[0]
    err_type = first.get("type")
    loc = tuple(first.get("loc") or ())
    if err_type == "json_invalid":
        return "Invalid JSON body"
    if len(loc) == 2 and loc[0] == "body" and loc[1] in REQUIRED_FIELDS:
        if err_type in _MISSING_TYPES or (err_type == "string_type" and first.get("input") is None):
            return ValidationError(loc[1]).detail
    return "Invalid request body"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code < 500:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.detail)
    return _error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _body_error_message(exc.errors())
    logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
    return _error_response(400, message)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
