"""
Custom exception handlers for FastAPI.
Maps request and domain errors onto the API's ``{"error": ...}`` bodies.
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from receipt_points.core.observability import sentry_capture_exception
from receipt_points.services.errors import InvalidReceiptError, ReceiptError

logger = logging.getLogger(__name__)


def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Malformed JSON and shape mismatches are reported like any invalid receipt
    logger.info("[receipts] request validation failed path=%s errors=%d", request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"error": InvalidReceiptError.message},
    )


def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Bodies that cannot even be decoded surface as a bare 400 from FastAPI
    if exc.status_code == HTTP_400_BAD_REQUEST:
        message = InvalidReceiptError.message
    else:
        message = exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


def receipt_exception_handler(request: Request, exc: ReceiptError):
    if exc.status_code >= 500:
        logger.error("[receipts] %s path=%s", exc, request.url.path)
        sentry_capture_exception(exc)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
    )


def generic_exception_handler(request: Request, exc: Exception):
    logger.error("[api] unhandled error path=%s", request.url.path, exc_info=exc)
    sentry_capture_exception(exc)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )
