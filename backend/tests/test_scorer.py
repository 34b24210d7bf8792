import pytest

from receipt_points.models.schemas import Item, Receipt
from receipt_points.services.scorer import (
    afternoon_points,
    calculate_points,
    item_description_points,
    item_pair_points,
    odd_day_points,
    quarter_multiple_points,
    retailer_points,
    round_dollar_points,
    score_breakdown,
)

TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [{"shortDescription": "Gatorade", "price": "2.25"} for _ in range(4)],
    "total": "9.00",
}


def make_receipt(**overrides) -> Receipt:
    data = {
        "retailer": "Shop",
        "purchaseDate": "2022-01-02",
        "purchaseTime": "10:00",
        "items": [],
        "total": "1.10",
    }
    data.update(overrides)
    return Receipt.model_validate(data)


def test_single_item_target_receipt():
    receipt = Receipt.model_validate(
        {
            "retailer": "Target",
            "purchaseDate": "2022-01-01",
            "purchaseTime": "13:01",
            "items": [{"shortDescription": "Mountain Dew 12PK", "price": "6.49"}],
            "total": "6.49",
        }
    )
    # 6 retailer + 6 odd day; description has 17 characters
    assert calculate_points(receipt) == 12


def test_target_receipt_breakdown():
    breakdown = score_breakdown(Receipt.model_validate(TARGET_RECEIPT))
    assert breakdown.retailer == 6
    assert breakdown.round_dollar == 0
    assert breakdown.quarter_multiple == 0
    assert breakdown.item_pairs == 10
    assert breakdown.item_descriptions == 3 + 3
    assert breakdown.odd_day == 6
    assert breakdown.afternoon == 0
    assert breakdown.total == 28


def test_corner_market_receipt():
    receipt = Receipt.model_validate(CORNER_MARKET_RECEIPT)
    breakdown = score_breakdown(receipt)
    assert breakdown.retailer == 14
    assert breakdown.round_dollar == 50
    assert breakdown.quarter_multiple == 25
    assert breakdown.item_pairs == 10
    assert breakdown.item_descriptions == 0
    assert breakdown.odd_day == 0
    assert breakdown.afternoon == 10
    assert calculate_points(receipt) == 109


def test_calculate_points_is_deterministic():
    receipt = Receipt.model_validate(TARGET_RECEIPT)
    results = [calculate_points(receipt) for _ in range(10)]
    assert results == [28] * 10


@pytest.mark.parametrize(
    "retailer,expected",
    [("Target", 6), ("M&M Corner Market", 14), ("7-Eleven", 7), ("   ", 0), ("A & B - C", 3)],
)
def test_retailer_counts_only_alphanumerics(retailer, expected):
    assert retailer_points(retailer) == expected


def test_retailer_ignores_non_ascii_letters():
    assert retailer_points("Café") == 3


@pytest.mark.parametrize("total,expected", [("9.00", 50), ("100.00", 50), ("9.50", 0), ("1.001", 0), ("100", 0)])
def test_round_dollar(total, expected):
    assert round_dollar_points(total) == expected


@pytest.mark.parametrize(
    "total,expected",
    [("9.00", 25), ("0.25", 25), ("100.50", 25), ("1.75", 25), ("35.35", 0), ("1.10", 0), ("6.49", 0)],
)
def test_quarter_multiple(total, expected):
    assert quarter_multiple_points(total) == expected


@pytest.mark.parametrize("total", ["", "abc", "NaN", "Infinity"])
def test_quarter_multiple_unparsable_total_is_zero(total):
    assert quarter_multiple_points(total) == 0


@pytest.mark.parametrize("count,expected", [(0, 0), (1, 0), (2, 5), (3, 5), (4, 10)])
def test_item_pair_points(count, expected):
    assert item_pair_points(count) == expected


@pytest.mark.parametrize("count,expected", [(0, 0), (1, 0), (2, 5), (3, 5), (4, 10)])
def test_item_pair_bonus_within_receipt(count, expected):
    # Two-character descriptions never earn the description bonus
    items = [{"shortDescription": "ab", "price": "1.00"} for _ in range(count)]
    assert score_breakdown(make_receipt(items=items)).item_pairs == expected


@pytest.mark.parametrize(
    "description,price,expected",
    [
        ("abc", "5.00", 2),
        ("abc", "4.99", 1),
        ("abc", "0.00", 1),
        ("Emils Cheese Pizza", "12.25", 3),
        ("   Klarbrunn 12-PK 12 FL OZ  ", "12.00", 3),
        ("abcdef", "15.00", 4),
        ("ab", "100.00", 0),
        ("Gatorade", "2.25", 0),
    ],
)
def test_item_description_points(description, price, expected):
    assert item_description_points(Item(shortDescription=description, price=price)) == expected


def test_item_description_unparsable_price_is_zero():
    assert item_description_points(Item(shortDescription="abc", price="free")) == 0


def test_item_description_bad_price_does_not_affect_other_items():
    receipt = make_receipt(
        items=[
            {"shortDescription": "abc", "price": "free"},
            {"shortDescription": "xyz", "price": "10.00"},
        ]
    )
    assert score_breakdown(receipt).item_descriptions == 3


@pytest.mark.parametrize(
    "date,expected",
    [("2022-01-01", 6), ("2022-01-31", 6), ("2022-01-02", 0), ("2022-02-30", 0), ("not-a-date", 0), ("", 0)],
)
def test_odd_day(date, expected):
    assert odd_day_points(date) == expected


@pytest.mark.parametrize(
    "time,expected",
    [
        ("14:00", 10),
        ("14:33", 10),
        ("15:59", 10),
        ("13:59", 0),
        ("16:00", 0),
        ("02:00", 0),
        ("14", 0),
        ("14:00:00", 0),
        ("ab:00", 0),
        ("+14:00", 0),
        ("", 0),
    ],
)
def test_afternoon(time, expected):
    assert afternoon_points(time) == expected


def test_malformed_fields_degrade_to_zero():
    receipt = make_receipt(
        retailer="Shop",
        purchaseDate="yesterday",
        purchaseTime="noon",
        items=[{"shortDescription": "abc", "price": "n/a"}, {"shortDescription": "xyz", "price": "?"}],
        total="lots",
    )
    breakdown = score_breakdown(receipt)
    assert breakdown.model_dump() == {
        "retailer": 4,
        "round_dollar": 0,
        "quarter_multiple": 0,
        "item_pairs": 5,
        "item_descriptions": 0,
        "odd_day": 0,
        "afternoon": 0,
    }
    assert calculate_points(receipt) == 9


def test_changing_total_only_moves_total_rules():
    base = Receipt.model_validate({**TARGET_RECEIPT, "total": "100.00"})
    other = Receipt.model_validate({**TARGET_RECEIPT, "total": "100.10"})
    quarter = Receipt.model_validate({**TARGET_RECEIPT, "total": "100.50"})

    base_breakdown = score_breakdown(base)
    assert calculate_points(base) - calculate_points(other) == 75
    # 100.50 is still a whole number of quarters
    assert calculate_points(base) - calculate_points(quarter) == 50

    untouched = {"retailer", "item_pairs", "item_descriptions", "odd_day", "afternoon"}
    for receipt in (other, quarter):
        breakdown = score_breakdown(receipt)
        for field in untouched:
            assert getattr(breakdown, field) == getattr(base_breakdown, field)


def test_points_never_negative_for_valid_receipts():
    for payload in (TARGET_RECEIPT, CORNER_MARKET_RECEIPT):
        assert calculate_points(Receipt.model_validate(payload)) >= 0
    assert calculate_points(make_receipt()) >= 0


@pytest.mark.parametrize(
    "total,expected",
    [
        ("1234567890123456789012345678.01", 0),
        ("1234567890123456789012345678.25", 25),
        ("99999999999999999999999999999.75", 25),
        ("99999999999999999999999999999.99", 0),
    ],
)
def test_quarter_multiple_long_totals(total, expected):
    assert quarter_multiple_points(total) == expected


@pytest.mark.parametrize(
    "price,expected",
    [
        ("99999999999999999999999999999.99", 20000000000000000000000000000),
        ("123456789012345678901234567890.00", 24691357802469135780246913579),
    ],
)
def test_item_description_long_prices(price, expected):
    assert item_description_points(Item(shortDescription="abc", price=price)) == expected


def test_long_total_receipt_scores_exactly():
    receipt = make_receipt(retailer="Shop", total="1234567890123456789012345678.01")
    breakdown = score_breakdown(receipt)
    assert breakdown.round_dollar == 0
    assert breakdown.quarter_multiple == 0


def test_afternoon_rejects_signed_hour():
    # Only bare digits count as an hour; a leading sign is malformed
    assert afternoon_points("+14:00") == 0
    assert afternoon_points("-15:00") == 0
