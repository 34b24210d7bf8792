"""API routes for receipt processing and points lookup."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from receipt_points.api.dependencies import get_receipt_service
from receipt_points.core.observability import sentry_breadcrumb, sentry_set_tags
from receipt_points.models.schemas import ErrorResponse, PointsResponse, Receipt, ReceiptIdResponse
from receipt_points.services.receipt_service import ReceiptService

router = APIRouter(prefix="/receipts", tags=["receipts"])


@router.post(
    "/process",
    response_model=ReceiptIdResponse,
    responses={400: {"model": ErrorResponse}},
)
def process_receipt(
    receipt: Receipt,
    service: ReceiptService = Depends(get_receipt_service),
) -> ReceiptIdResponse:
    """Score a submitted receipt and return the identifier of its points."""
    sentry_breadcrumb(
        category="receipts",
        message="process_receipt",
        data={"items": len(receipt.items)},
    )
    receipt_id = service.process(receipt)
    sentry_set_tags({"receipt.id": receipt_id})
    return ReceiptIdResponse(id=receipt_id)


@router.get(
    "/{receipt_id}/points",
    response_model=PointsResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_points(
    receipt_id: str,
    service: ReceiptService = Depends(get_receipt_service),
) -> PointsResponse:
    """Return the points awarded to a previously processed receipt."""
    return PointsResponse(points=service.get_points(receipt_id))
