"""Pydantic schemas for request and response models.

Pydantic models are used for validating and serialising data that
crosses the boundary of the API. The request schemas only enforce the
*shape* of a receipt (required fields and their JSON types); the
pattern rules that decide whether a receipt may be scored live in
:mod:`receipt_points.services.validator` so that both layers can be
exercised independently.

Field names are snake_case in Python and camelCase on the wire, matching
the public JSON contract (``purchaseDate``, ``shortDescription`` ...).
Only the camelCase aliases are accepted as input.
"""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Domain schemas


class Item(BaseModel):
    """Single purchased line item."""

    model_config = ConfigDict(frozen=True)

    short_description: str = Field(alias="shortDescription")
    price: str


class Receipt(BaseModel):
    """A submitted receipt. Immutable once received."""

    model_config = ConfigDict(frozen=True)

    retailer: str
    purchase_date: str = Field(alias="purchaseDate", description="Calendar date, YYYY-MM-DD")
    purchase_time: str = Field(alias="purchaseTime", description="24h clock, HH:MM")
    items: Tuple[Item, ...]
    total: str


class PointsBreakdown(BaseModel):
    """Per-rule contributions making up a receipt's points."""

    model_config = ConfigDict(frozen=True)

    retailer: int = 0
    round_dollar: int = 0
    quarter_multiple: int = 0
    item_pairs: int = 0
    item_descriptions: int = 0
    odd_day: int = 0
    afternoon: int = 0

    @property
    def total(self) -> int:
        return (
            self.retailer
            + self.round_dollar
            + self.quarter_multiple
            + self.item_pairs
            + self.item_descriptions
            + self.odd_day
            + self.afternoon
        )


# ---------------------------------------------------------------------------
# API response schemas

class ReceiptIdResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int


class ErrorResponse(BaseModel):
    error: str
