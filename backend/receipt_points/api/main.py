"""Entry point for the FastAPI application.

This module constructs the FastAPI app, registers middleware, exception
handlers and the receipts router, and sets up startup and shutdown
events. Serve it with uvicorn, either directly::

    uvicorn receipt_points.api.main:app --port 8080

or through the ``receipt-points`` console script, which reads the host
and port from :mod:`receipt_points.core.config`.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from receipt_points.api.error_handlers import (
    generic_exception_handler,
    http_exception_handler,
    receipt_exception_handler,
    validation_exception_handler,
)
from receipt_points.api.routes.receipts import router as receipts_router
from receipt_points.core.config import settings
from receipt_points.core.observability import init_sentry
from receipt_points.services.errors import ReceiptError

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    # Startup
    logger.info("Starting up...")
    if init_sentry("api"):
        logger.info("Sentry SDK initialized (api)")
    yield
    # Shutdown
    logger.info("Shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    """Log one line per request with status and latency."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "[http] %s %s status=%d latency_ms=%.2f",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


"""CORS configuration.

In development allow all ( * ); otherwise use BACKEND_CORS_ORIGINS
deduplicated in order.
"""
env_is_dev = (settings.ENVIRONMENT or "development").lower() == "development"
if env_is_dev:
    allow_origins = ["*"]
else:
    seen: set[str] = set()
    allow_origins = [o for o in settings.BACKEND_CORS_ORIGINS if not (o in seen or seen.add(o))]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Register custom exception handlers
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(ReceiptError, receipt_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Include routers
app.include_router(receipts_router)


def run() -> None:
    """Serve the API on the configured host and port."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":  # pragma: no cover
    run()
