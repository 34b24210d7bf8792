"""Points calculation for validated receipts.

The scorer applies seven independent rules to a :class:`Receipt` and
adds up their contributions. No rule can stop the others from being
evaluated:

* ``retailer`` – one point for every ASCII letter or digit in the
  retailer name.
* ``round_dollar`` – 50 points if the total ends in ``.00``.
* ``quarter_multiple`` – 25 points if the total in cents is a multiple
  of 25.
* ``item_pairs`` – 5 points for every two items.
* ``item_descriptions`` – for each item whose trimmed description length
  is a multiple of 3, ``floor(price * 0.2) + 1`` points.
* ``odd_day`` – 6 points if the purchase day of month is odd.
* ``afternoon`` – 10 points if the purchase hour is 14 or 15.

Amounts are parsed as :class:`~decimal.Decimal` and scaled in a context
wide enough for all of their digits, so the arithmetic is exact for
amounts of any length. A value that cannot be parsed yields a zero
contribution for the rule (or the single item) that needed it; scoring
never raises on bad sub-fields.
"""

from __future__ import annotations

import logging
import math
import re
from decimal import Decimal, localcontext

from receipt_points.models.schemas import Item, PointsBreakdown, Receipt
from receipt_points.utils.helpers import exact_context, parse_amount, parse_clock_hour, parse_iso_date

logger = logging.getLogger(__name__)

_ALPHANUMERIC_RE = re.compile(r"[a-zA-Z0-9]")

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
POINTS_PER_ITEM_PAIR = 5
DESCRIPTION_LENGTH_FACTOR = 3
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
AFTERNOON_START_HOUR = 14
AFTERNOON_END_HOUR = 16  # exclusive


def retailer_points(retailer: str) -> int:
    return len(_ALPHANUMERIC_RE.findall(retailer))


def round_dollar_points(total: str) -> int:
    return ROUND_DOLLAR_POINTS if total.endswith(".00") else 0


def quarter_multiple_points(total: str) -> int:
    amount = parse_amount(total)
    if amount is None:
        return 0
    with localcontext(exact_context(amount)):
        cents = round(amount * 100)
    return QUARTER_MULTIPLE_POINTS if cents % 25 == 0 else 0


def item_pair_points(item_count: int) -> int:
    return (item_count // 2) * POINTS_PER_ITEM_PAIR


def item_description_points(item: Item) -> int:
    """Points for a single item based on its description length and price."""
    if len(item.short_description.strip()) % DESCRIPTION_LENGTH_FACTOR != 0:
        return 0
    price = parse_amount(item.price)
    if price is None:
        return 0
    with localcontext(exact_context(price)):
        return math.floor(price * DESCRIPTION_PRICE_MULTIPLIER) + 1


def odd_day_points(purchase_date: str) -> int:
    date = parse_iso_date(purchase_date)
    if date is None:
        return 0
    return ODD_DAY_POINTS if date.day % 2 == 1 else 0


def afternoon_points(purchase_time: str) -> int:
    # Signed hours such as "+14" are malformed and score nothing
    hour = parse_clock_hour(purchase_time)
    if hour is None:
        return 0
    return AFTERNOON_POINTS if AFTERNOON_START_HOUR <= hour < AFTERNOON_END_HOUR else 0


def score_breakdown(receipt: Receipt) -> PointsBreakdown:
    """Evaluate every rule against ``receipt`` and return the contributions."""
    return PointsBreakdown(
        retailer=retailer_points(receipt.retailer),
        round_dollar=round_dollar_points(receipt.total),
        quarter_multiple=quarter_multiple_points(receipt.total),
        item_pairs=item_pair_points(len(receipt.items)),
        item_descriptions=sum(item_description_points(item) for item in receipt.items),
        odd_day=odd_day_points(receipt.purchase_date),
        afternoon=afternoon_points(receipt.purchase_time),
    )


def calculate_points(receipt: Receipt) -> int:
    """Return the total points for ``receipt``."""
    breakdown = score_breakdown(receipt)
    logger.debug("[scorer] breakdown=%s total=%d", breakdown.model_dump(), breakdown.total)
    return breakdown.total
