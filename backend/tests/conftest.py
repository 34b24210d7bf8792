from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add backend folder to sys.path so `import receipt_points...` works in tests when running from backend root
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from receipt_points.api.main import app  # noqa: E402
from receipt_points.services.points_store import PointsStore, get_points_store  # noqa: E402


@pytest.fixture
def store() -> PointsStore:
    return PointsStore()


@pytest.fixture
def client(store: PointsStore):
    """TestClient whose routes use a fresh, test-local points store."""
    app.dependency_overrides[get_points_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_points_store, None)
