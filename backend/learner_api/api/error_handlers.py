"""Error Handlers - global exception handlers for the learner API.

Invariants:
    - LearnerApiError below 500 -> structured JSON with error code, message, severity
    - LearnerApiError at 500+ and any other Exception -> 500 with GENERIC_ERROR_BODY
      as plain text; details go to the log, never to the client
    - RequestValidationError -> 400 with field-level error details

Design Decisions:
    - Three-layer handler: domain (LearnerApiError), validation (Pydantic), catch-all (Exception)
    - Registered from main.py through register_error_handlers()
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.exceptions import RequestValidationError

from learner_api.core.errors import LearnerApiError, ErrorSeverity

logger = logging.getLogger(__name__)

GENERIC_ERROR_BODY = "Seems like we messed up somewhere..."


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_learner_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _generic_error_response() -> PlainTextResponse:
    return PlainTextResponse(
        GENERIC_ERROR_BODY,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _register_learner_error_handler(app: FastAPI) -> None:
    """Register learner domain/infrastructure error handler."""

    @app.exception_handler(LearnerApiError)
    async def learner_error_handler(request: Request, exc: LearnerApiError):
        """Handle all learner API domain/infrastructure errors."""
        extra = {"error_code": exc.code, "path": request.url.path}
        if exc.http_status >= 500:
            logger.error(f"LearnerApiError: {exc.message}", extra=extra)
            return _generic_error_response()
        logger.warning(f"LearnerApiError: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return _generic_error_response()


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
