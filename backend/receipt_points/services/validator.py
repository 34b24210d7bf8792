"""Pattern validation gating receipt scoring.

A receipt that passed schema parsing can still be malformed: a retailer
made of punctuation, a total with three decimals, a price with a currency
sign. :func:`validate_receipt` applies the field patterns below and only
receipts it accepts are scored and stored.

Patterns are matched against the whole string with ASCII semantics, so
``\\w`` is ``[A-Za-z0-9_]`` and ``\\s`` does not include Unicode spaces.
Purchase date and time are not checked here; the scorer treats values it
cannot read as zero contributions.
"""

from __future__ import annotations

import re
from typing import Dict, Pattern

from receipt_points.models.schemas import Item, Receipt

_AMOUNT = r"\d+\.\d{2}"

PATTERNS: Dict[str, Pattern[str]] = {
    "retailer": re.compile(r"[\w\s\-&]+", re.ASCII),
    "total": re.compile(_AMOUNT, re.ASCII),
    "shortDescription": re.compile(r"[\w\s\-]+", re.ASCII),
    "price": re.compile(_AMOUNT, re.ASCII),
}


def _matches(field: str, value: str) -> bool:
    return PATTERNS[field].fullmatch(value) is not None


def validate_item(item: Item) -> bool:
    return _matches("shortDescription", item.short_description) and _matches("price", item.price)


def validate_receipt(receipt: Receipt) -> bool:
    """Return True when every field pattern holds for ``receipt``.

    Stops at the first failing field. An empty item list passes the item
    checks.
    """
    if not _matches("retailer", receipt.retailer):
        return False
    if not _matches("total", receipt.total):
        return False
    return all(validate_item(item) for item in receipt.items)
