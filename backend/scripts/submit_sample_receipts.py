"""Submit sample receipts to a running API and print their points.

Useful as a smoke check after starting the server locally.

Usage:
  python backend/scripts/submit_sample_receipts.py [base_url]

Example:
  python backend/scripts/submit_sample_receipts.py http://localhost:8080
"""
from __future__ import annotations

import sys
from typing import Any, Dict, List

import httpx

DEFAULT_BASE_URL = "http://localhost:8080"

SAMPLE_RECEIPTS: List[Dict[str, Any]] = [
    {
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
    },
    {
        "retailer": "M&M Corner Market",
        "purchaseDate": "2022-03-20",
        "purchaseTime": "14:33",
        "items": [
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
        ],
        "total": "9.00",
    },
]


def submit(client: httpx.Client, receipt: Dict[str, Any]) -> Dict[str, Any]:
    resp = client.post("/receipts/process", json=receipt)
    resp.raise_for_status()
    receipt_id = resp.json()["id"]
    points_resp = client.get(f"/receipts/{receipt_id}/points")
    points_resp.raise_for_status()
    return {"id": receipt_id, "points": points_resp.json()["points"]}


def main() -> int:
    base_url = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_BASE_URL
    with httpx.Client(base_url=base_url, timeout=5) as client:
        for receipt in SAMPLE_RECEIPTS:
            try:
                result = submit(client, receipt)
            except httpx.HTTPError as exc:
                print(f"retailer={receipt['retailer']!r} failed: {exc}", file=sys.stderr)
                return 1
            print(f"retailer={receipt['retailer']!r} id={result['id']} points={result['points']}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
