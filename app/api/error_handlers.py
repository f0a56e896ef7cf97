"""
Global exception handlers.

- RequestValidationError / ValidationProblem -> 400 with field-level errors
- IntegrityError -> 400 (foreign key or unique constraint rejected the write)
- Exception (catch-all) -> 500, never leaks internal details
"""

import logging
from typing import Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from app.core.errors import VALIDATION_TITLE, ValidationProblem

logger = logging.getLogger(__name__)

_VALUE_ERROR_PREFIX = "Value error, "


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handlers(app)
    _register_integrity_error_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc.errors()),
        )

    @app.exception_handler(ValidationProblem)
    async def validation_problem_handler(request: Request, exc: ValidationProblem):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=exc.to_response(),
        )


def _register_integrity_error_handler(app: FastAPI) -> None:

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.warning(f"Integrity error on {request.url.path}: {exc.orig}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "The request conflicts with existing data."},
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


def build_validation_error_response(errors: List[dict]) -> dict:
    """
    Group pydantic errors by field name.

    The location's leading "body"/"query"/"path" segment is dropped, so
    {"loc": ["body", "title"]} is reported under "title".
    """
    grouped: Dict[str, List[str]] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in ("body", "query", "path", "header"):
            loc = loc[1:]
        field = ".".join(loc) or "body"

        message = error.get("msg", "Invalid value")
        if message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]

        grouped.setdefault(field, []).append(message)

    return {
        "title": VALIDATION_TITLE,
        "status": status.HTTP_400_BAD_REQUEST,
        "errors": grouped,
    }
