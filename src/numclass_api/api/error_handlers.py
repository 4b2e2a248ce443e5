"""Global exception handlers.

    - InvalidNumberError → 400 {"number": <raw>, "error": true}
    - Exception (catch-all) → 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from numclass_api.classify import ClassificationError
from numclass_api.utility import InvalidNumberError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_invalid_number_handler(app)
    _register_generic_error_handler(app)


def _register_invalid_number_handler(app: FastAPI) -> None:

    @app.exception_handler(InvalidNumberError)
    async def invalid_number_handler(request: Request, exc: InvalidNumberError):
        logger.info(
            f"Rejected number {exc.raw!r}: {exc.reason}",
            extra={"error_code": "INVALID_NUMBER", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ClassificationError(exc.raw).as_dict(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": True, "message": "An unexpected error occurred"},
        )
