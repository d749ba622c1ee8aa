"""Exception handlers that render errors as JSON."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from flight_tracker.errors import FlightTrackerError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, kind: str) -> JSONResponse:
    """Build the standard ``{error, kind}`` body."""
    return JSONResponse(
        status_code=status_code, content={"error": message, "kind": kind}
    )


async def flight_tracker_error_handler(
    _: Request, exc: FlightTrackerError
) -> JSONResponse:
    """Render taxonomy errors with their own status and kind."""
    return error_response(exc.status_code, exc.message, exc.kind)


async def request_validation_handler(_: Request, exc: Exception) -> JSONResponse:
    """Report malformed request bodies as validation errors."""
    return error_response(
        status.HTTP_400_BAD_REQUEST, "Malformed request body", "validation_error"
    )


async def unexpected_error_handler(_: Request, exc: Exception) -> JSONResponse:
    """Log and hide anything outside the taxonomy."""
    logger.exception("Unexpected error: %s", exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred",
        "internal_error",
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to an app."""
    app.add_exception_handler(FlightTrackerError, flight_tracker_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
