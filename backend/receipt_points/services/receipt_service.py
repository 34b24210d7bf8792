"""Receipt processing service.

Ties the validator, the scorer and the points store together: a
submitted receipt is validated, scored and stored under a freshly minted
identifier, and stored points can later be looked up by that identifier.
"""

from __future__ import annotations

import logging
import uuid

from receipt_points.models.schemas import Receipt
from receipt_points.services.errors import InvalidReceiptError, ReceiptNotFoundError
from receipt_points.services.points_store import PointsStore
from receipt_points.services.scorer import calculate_points
from receipt_points.services.validator import validate_receipt

logger = logging.getLogger(__name__)


def new_receipt_id() -> str:
    """Return a random 128-bit identifier rendered as text."""
    return str(uuid.uuid4())


class ReceiptService:
    """Service for scoring receipts and looking up their points."""

    def __init__(self, store: PointsStore):
        self.store = store

    def process(self, receipt: Receipt) -> str:
        """Validate and score ``receipt`` and return its new identifier.

        :raises InvalidReceiptError: when the receipt fails validation
        """
        if not validate_receipt(receipt):
            logger.info("[receipts] rejected retailer=%r items=%d", receipt.retailer, len(receipt.items))
            raise InvalidReceiptError()
        points = calculate_points(receipt)
        receipt_id = new_receipt_id()
        self.store.put(receipt_id, points)
        logger.info("[receipts] processed id=%s points=%d", receipt_id, points)
        return receipt_id

    def get_points(self, receipt_id: str) -> int:
        """Return the points stored for ``receipt_id``.

        :raises ReceiptNotFoundError: when no receipt has that identifier
        """
        points = self.store.get(receipt_id)
        if points is None:
            raise ReceiptNotFoundError()
        return points
