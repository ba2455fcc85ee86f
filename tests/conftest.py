"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fastapi.testclient import TestClient

from api.main import create_app
from core import config
from core.database import DocumentStore, FieldFilter, RecordNotFoundError
from fixtures.generate_events import generate_event, generate_feedback
from scripts.init_db import create_database

TEST_API_KEY = "test-functions-key"


class InMemoryDocumentStore(DocumentStore):
    """DocumentStore double keeping records in a dict keyed by partition key."""

    def __init__(self):
        self.items: dict[str, dict] = {}
        self.calls: list[tuple[str, str]] = []
        self.ensured: list[tuple] = []
        self.fail_with: Exception | None = None

    def _check_failure(self):
        if self.fail_with is not None:
            raise self.fail_with

    def create_item(self, record: dict, partition_key: str) -> dict:
        self.calls.append(("create", partition_key))
        self._check_failure()
        if partition_key in self.items:
            raise RuntimeError(f"Conflict: {partition_key} already exists")
        # Mimic the system properties Cosmos adds to every document
        stored = {**record, "_rid": "rid==", "_etag": '"0000"', "_ts": 1700000000}
        self.items[partition_key] = stored
        return stored

    def query_items(self, predicate: FieldFilter) -> list[dict]:
        self.calls.append(("query", predicate.field))
        self._check_failure()
        return [dict(item) for item in self.items.values() if predicate.matches(item)]

    def delete_item(self, item_id: str, partition_key: str) -> None:
        self.calls.append(("delete", partition_key))
        self._check_failure()
        if partition_key not in self.items or self.items[partition_key]["id"] != item_id:
            raise RecordNotFoundError(item_id)
        del self.items[partition_key]

    def ensure_container(self, partition_key_path, indexing_policy=None, throughput=None):
        self.ensured.append((partition_key_path, indexing_policy, throughput))


@pytest.fixture
def event_store():
    return InMemoryDocumentStore()


@pytest.fixture
def feedback_store():
    return InMemoryDocumentStore()


@pytest.fixture
def request_log_db(tmp_path, monkeypatch):
    """Point the request log at a fresh SQLite file."""
    db_path = tmp_path / "db" / "request-log.db"
    create_database(db_path)
    monkeypatch.setattr(config, "DB_PATH", db_path)
    return db_path


@pytest.fixture
def client(event_store, feedback_store, request_log_db, monkeypatch):
    """Test client backed by in-memory stores."""
    monkeypatch.setattr(config, "API_KEY", TEST_API_KEY)
    app = create_app(event_store=event_store, feedback_store=feedback_store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def api_headers():
    """Platform key header for protected endpoints."""
    return {config.API_KEY_HEADER: TEST_API_KEY}


# ============================================================
# Test Data Fixtures
# ============================================================


@pytest.fixture
def sample_event():
    """Event payload without an id."""
    return {"title": "Team meeting", "date": "2024-01-15", "time": "10:30"}


@pytest.fixture
def fake_event():
    from datetime import date

    return generate_event(date(2024, 1, 10))


@pytest.fixture
def sample_feedback():
    return generate_feedback()


def create_test_event(client, headers, **fields):
    """Helper to create an event and return its ID."""
    payload = {"title": "Test event", "date": "2024-01-01", **fields}
    response = client.post("/api/events", json=payload, headers=headers)
    assert response.status_code == 200
    return response.json()["eventId"]
