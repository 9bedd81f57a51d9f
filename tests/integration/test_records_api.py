"""
Integration tests for the records API.

Exercises the HTTP endpoints end to end through FastAPI's TestClient,
with the repository either faked (via dependency overrides) or the
app's own in-memory repository.
"""

import json
from typing import AsyncIterator

import pytest
from fastapi.testclient import TestClient

from api.deps import get_record_repo
from application.exceptions import RecordStorageError
from backend.main import create_app
from backend.settings import Settings
from domain.models import Record
from tests.fakes import FakeRecordRepository

pytestmark = pytest.mark.integration


class InterruptedRecordRepository(FakeRecordRepository):
    """Yields the first stored record, then loses its connection."""

    async def find_all(self) -> AsyncIterator[Record]:
        for record in self.get_all()[:1]:
            yield record
        raise RecordStorageError("connection lost")


# ---------------------------------------------------------------------------
# Tests: Create
# ---------------------------------------------------------------------------


class TestCreateRecord:
    """Tests for POST /records."""

    def test_create_returns_201_with_id(self, client, fake_record_repo):
        response = client.post("/records", json={"information": "hello"})

        assert response.status_code == 201
        assert response.json() == {"id": "fake-1"}
        assert fake_record_repo.get_all() == [Record(id="fake-1", information="hello")]

    def test_client_supplied_id_is_ignored(self, client, fake_record_repo):
        response = client.post("/records", json={"id": "mine", "information": "hello"})

        assert response.status_code == 201
        assert response.json()["id"] == "fake-1"
        assert fake_record_repo.saved[0].id is None

    def test_missing_information_is_422(self, client, fake_record_repo):
        response = client.post("/records", json={"id": "x"})

        assert response.status_code == 422
        assert fake_record_repo.saved == []

    def test_non_string_information_is_422(self, client):
        response = client.post("/records", json={"information": 123})

        assert response.status_code == 422

    def test_storage_error_is_503(self, client, fake_record_repo):
        fake_record_repo.save_error = RecordStorageError("Failed to save record: disk full")

        response = client.post("/records", json={"information": "hello"})

        assert response.status_code == 503
        assert response.json() == {"detail": "Failed to save record: disk full"}


# ---------------------------------------------------------------------------
# Tests: List
# ---------------------------------------------------------------------------


class TestListRecords:
    """Tests for GET /records."""

    def test_empty_store_returns_empty_list(self, client):
        response = client.get("/records")

        assert response.status_code == 200
        assert response.json() == []

    def test_create_then_list(self, client):
        record_id = client.post("/records", json={"information": "hello"}).json()["id"]

        response = client.get("/records")

        assert response.status_code == 200
        assert response.json() == [{"id": record_id, "information": "hello"}]

    def test_two_creates_both_listed(self, client):
        first = client.post("/records", json={"information": "first"}).json()["id"]
        second = client.post("/records", json={"information": "second"}).json()["id"]

        listed = client.get("/records").json()

        assert first != second
        assert sorted(listed, key=lambda r: r["id"]) == sorted(
            [
                {"id": first, "information": "first"},
                {"id": second, "information": "second"},
            ],
            key=lambda r: r["id"],
        )

    def test_storage_error_is_503(self, client, fake_record_repo):
        fake_record_repo.find_all_error = RecordStorageError("Failed to list records: timeout")

        response = client.get("/records")

        assert response.status_code == 503
        assert response.json()["detail"] == "Failed to list records: timeout"


# ---------------------------------------------------------------------------
# Tests: Stream
# ---------------------------------------------------------------------------


class TestStreamRecords:
    """Tests for GET /records/stream."""

    def test_streams_ndjson(self, client, fake_record_repo):
        fake_record_repo.seed([
            Record(id="r1", information="one"),
            Record(id="r2", information="two"),
        ])

        response = client.get("/records/stream")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/x-ndjson")
        lines = [json.loads(line) for line in response.text.splitlines()]
        assert lines == [
            {"id": "r1", "information": "one"},
            {"id": "r2", "information": "two"},
        ]

    def test_empty_store_streams_nothing(self, client):
        response = client.get("/records/stream")

        assert response.status_code == 200
        assert response.text == ""

    def test_storage_error_before_first_record_is_503(self, client, fake_record_repo):
        fake_record_repo.find_all_error = RecordStorageError("down")

        response = client.get("/records/stream")

        assert response.status_code == 503

    def test_storage_error_mid_stream_aborts_response(self, app):
        repo = InterruptedRecordRepository()
        repo.seed([Record(id="r1", information="one"), Record(id="r2", information="two")])
        app.dependency_overrides[get_record_repo] = lambda: repo

        with pytest.raises(RecordStorageError, match="connection lost"):
            TestClient(app).get("/records/stream")

        app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Tests: Configured stores
# ---------------------------------------------------------------------------


class TestMemoryStore:
    """The in-memory store keeps records across requests within one app."""

    def test_records_survive_between_requests(self):
        settings = Settings(environment="test", record_store="memory", _env_file=None)
        client = TestClient(create_app(settings=settings))

        record_id = client.post("/records", json={"information": "hello"}).json()["id"]

        assert client.get("/records").json() == [{"id": record_id, "information": "hello"}]

    def test_separate_apps_do_not_share_records(self):
        settings = Settings(environment="test", record_store="memory", _env_file=None)
        first = TestClient(create_app(settings=settings))
        second = TestClient(create_app(settings=settings))

        first.post("/records", json={"information": "hello"})

        assert second.get("/records").json() == []


class TestUnconfiguredSupabase:
    """Selecting Supabase without credentials reports the database as unavailable."""

    def test_create_returns_503(self):
        settings = Settings(environment="test", record_store="supabase", _env_file=None)
        client = TestClient(create_app(settings=settings))

        response = client.post("/records", json={"information": "hello"})

        assert response.status_code == 503
        assert "Supabase credentials not configured" in response.json()["detail"]
