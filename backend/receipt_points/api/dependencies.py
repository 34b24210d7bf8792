"""Common dependencies for FastAPI routes."""

from __future__ import annotations

from fastapi import Depends

from receipt_points.services.points_store import PointsStore, get_points_store
from receipt_points.services.receipt_service import ReceiptService


def get_receipt_service(store: PointsStore = Depends(get_points_store)) -> ReceiptService:
    """Build a :class:`ReceiptService` bound to the active points store."""
    return ReceiptService(store)
