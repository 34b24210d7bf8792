"""Domain errors raised by the receipt services.

Each error carries the HTTP status and the public message the API
returns for it, so route handlers only need to let them propagate.
"""

from __future__ import annotations


class ReceiptError(Exception):
    """Base class for receipt processing errors."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.message)
        self.detail = detail


class InvalidReceiptError(ReceiptError):
    status_code = 400
    message = "The receipt is invalid."


class ReceiptNotFoundError(ReceiptError):
    status_code = 404
    message = "No receipt found for that ID."


class DuplicateReceiptIdError(ReceiptError):
    """An identifier was inserted into the points store twice."""

    status_code = 500
