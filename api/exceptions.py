"""
Exception handling for the HTTP API.

Processing failures are reported to clients as "could not process this
image" and never crash the server. Domain errors map to 422, anything
unexpected to 500.
"""

import functools
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from core.constants import ErrorMessages
from core.exceptions import CropError, DecodeError, ProcessingError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": ErrorMessages.PROCESSING_FAILED.format(error=str(exc)),
            "error_type": type(exc).__name__,
        },
    )


def safe_endpoint(func):
    """
    Decorator for endpoints calling into the processing core.

    HTTPException and ProcessingError propagate to their handlers; any other
    exception is logged and turned into a 500 with a user-facing message.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except (HTTPException, ProcessingError):
            raise
        except Exception as e:
            logger.error(f"Unexpected error in {func.__name__}: {e}", exc_info=True)
            raise HTTPException(
                status_code=500,
                detail=ErrorMessages.PROCESSING_FAILED.format(error="internal error"),
            )

    return wrapper


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers for domain exceptions."""

    @app.exception_handler(DecodeError)
    async def decode_error_handler(request: Request, exc: DecodeError):
        logger.warning(f"Decode error on {request.url.path}: {exc}")
        return _error_response(422, exc)

    @app.exception_handler(CropError)
    async def crop_error_handler(request: Request, exc: CropError):
        logger.warning(f"Crop error on {request.url.path}: {exc}")
        return _error_response(422, exc)

    @app.exception_handler(ProcessingError)
    async def processing_error_handler(request: Request, exc: ProcessingError):
        logger.warning(f"Processing error on {request.url.path}: {exc}")
        return _error_response(422, exc)
