from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from clinix.core.config import settings
from clinix.wiring import dependencies


@pytest.fixture
def client(monkeypatch):
    """App client over fresh seeded stores with no login latency."""
    monkeypatch.setattr(settings, "LOGIN_DELAY_MS", 0)
    monkeypatch.setattr(settings, "STORAGE_PROVIDER", "memory")
    monkeypatch.setattr(settings, "SEED_MOCK_DATA", True)
    dependencies.reset_state()

    from clinix.main import app

    with TestClient(app) as test_client:
        yield test_client
    dependencies.reset_state()


@pytest.fixture
def admin_client(client):
    response = client.post("/login", json={"username": "admin@example.com", "password": "admin123"})
    assert response.status_code == 200
    return client
