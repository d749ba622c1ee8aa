"""Shared test fixtures."""

import json
from dataclasses import dataclass, field
from uuid import uuid4

import httpx
import pytest
from fastapi.testclient import TestClient

from flight_tracker.adapters.record_store_client import HttpxRecordStoreClient
from flight_tracker.api.app import create_app
from flight_tracker.config import Settings
from flight_tracker.containers import AppContainer
from flight_tracker.services.auth import AuthService
from flight_tracker.services.flights import FlightService
from flight_tracker.services.session_store import InMemorySessionStore

STORE_URL = "https://store.test"
ADMIN_PASSWORD = "correct-horse"


@dataclass
class FakeRecordStore:
    """In-memory stand-in for the external record store's HTTP API.

    Enforces the same delete rule as the real store: admins may delete any
    record, everyone else only records they submitted.
    """

    records: list[dict[str, str]] = field(default_factory=list)
    requests: list[httpx.Request] = field(default_factory=list)
    fail_with: int | None = None
    listing: httpx.Response | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            return httpx.Response(self.fail_with, json={"error": "boom"})
        path = request.url.path
        if path == "/db" and request.method == "GET":
            if self.listing is not None:
                return self.listing
            return httpx.Response(
                200, json={"status": "success", "allData": list(self.records)}
            )
        if path == "/db" and request.method == "POST":
            record = {"id": uuid4().hex, **json.loads(request.content)}
            self.records.append(record)
            return httpx.Response(200, json={"status": "success", "data": record})
        if path.startswith("/db/") and request.method == "DELETE":
            return self._delete(request, path.removeprefix("/db/"))
        return httpx.Response(405)

    def _delete(self, request: httpx.Request, record_id: str) -> httpx.Response:
        record = next((r for r in self.records if r["id"] == record_id), None)
        if record is None:
            return httpx.Response(404, json={"error": "not found"})
        is_admin = request.headers.get("X-Is-Admin") == "true"
        if not is_admin and record["submittedBy"] != request.headers.get("X-User-ID"):
            return httpx.Response(403, json={"error": "forbidden"})
        self.records.remove(record)
        return httpx.Response(200, json={"status": "success"})

    def client(self) -> HttpxRecordStoreClient:
        return HttpxRecordStoreClient(
            base_url=STORE_URL,
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(self.handler)),
        )


@pytest.fixture
def settings() -> Settings:
    return Settings(admin_password=ADMIN_PASSWORD, record_store_url=STORE_URL)


@pytest.fixture
def record_store() -> FakeRecordStore:
    return FakeRecordStore()


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def auth_service(session_store: InMemorySessionStore) -> AuthService:
    return AuthService(session_store=session_store, admin_password=ADMIN_PASSWORD)


@pytest.fixture
def flight_service(record_store: FakeRecordStore) -> FlightService:
    return FlightService(record_store=record_store.client())


@pytest.fixture
def container(
    settings: Settings,
    record_store: FakeRecordStore,
    session_store: InMemorySessionStore,
    auth_service: AuthService,
    flight_service: FlightService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        record_store_client=flight_service.record_store,
        session_store=session_store,
        auth_service=auth_service,
        flight_service=flight_service,
        close_resources=close_resources,
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
