"""In-memory points store.

Holds the ``receipt id -> points`` mapping for the lifetime of the
process. Route handlers run in the server's worker thread pool, so every
access goes through a lock. Records are insert-only: there is no update,
delete or expiry, and nothing survives a restart.

A single module-level store is created at import time and handed to the
routes through :func:`get_points_store`. Tests that need isolation
override that dependency with their own :class:`PointsStore`.
"""

from __future__ import annotations

import threading
from typing import Dict, Optional

from receipt_points.services.errors import DuplicateReceiptIdError


class PointsStore:
    """Thread-safe, insert-only mapping of receipt ids to points."""

    def __init__(self) -> None:
        self._points: Dict[str, int] = {}
        self._lock = threading.Lock()

    def put(self, receipt_id: str, points: int) -> None:
        """Insert a new record. Existing ids are never overwritten."""
        with self._lock:
            if receipt_id in self._points:
                raise DuplicateReceiptIdError(f"receipt id already stored: {receipt_id}")
            self._points[receipt_id] = points

    def get(self, receipt_id: str) -> Optional[int]:
        with self._lock:
            return self._points.get(receipt_id)

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._points

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)


points_store = PointsStore()


def get_points_store() -> PointsStore:
    """FastAPI dependency returning the process-wide store."""
    return points_store
