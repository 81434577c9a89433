"""
Exception handling for the API layer.

Maps core processing errors to HTTP responses and provides the
safe_endpoint decorator used by the routers.
"""

import functools
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from core.exceptions import DecodeError, EncodeError, ImageProcessingError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: str, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, "detail": detail})


async def decode_error_handler(request: Request, exc: DecodeError) -> JSONResponse:
    logger.warning(f"Rejected undecodable image on {request.url.path}: {exc}")
    return _error_response(422, exc.error_type, str(exc))


async def encode_error_handler(request: Request, exc: EncodeError) -> JSONResponse:
    logger.error(f"Encoding failed on {request.url.path}: {exc}")
    return _error_response(500, exc.error_type, str(exc))


async def processing_error_handler(request: Request, exc: ImageProcessingError) -> JSONResponse:
    logger.error(f"Processing failed on {request.url.path}: {exc}")
    return _error_response(500, exc.error_type, str(exc))


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    return _error_response(400, "invalid_value", str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers for core exceptions on the app"""
    app.add_exception_handler(DecodeError, decode_error_handler)
    app.add_exception_handler(EncodeError, encode_error_handler)
    app.add_exception_handler(ImageProcessingError, processing_error_handler)
    app.add_exception_handler(ValueError, value_error_handler)


def safe_endpoint(func):
    """
    Decorator converting unexpected errors into HTTP 500 responses.

    HTTPException, ImageProcessingError and ValueError propagate to their
    registered handlers unchanged.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except (HTTPException, ImageProcessingError, ValueError):
            raise
        except Exception as e:
            logger.error(f"Unexpected error in {func.__name__}: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Internal server error: {e}")

    return wrapper
