"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from flight_tracker.adapters.record_store_client import (
    HttpxRecordStoreClient,
    RecordStoreClient,
)
from flight_tracker.config import Settings
from flight_tracker.services.auth import AuthService
from flight_tracker.services.flights import FlightService
from flight_tracker.services.session_store import InMemorySessionStore, SessionStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    record_store_client: RecordStoreClient
    session_store: SessionStore
    auth_service: AuthService
    flight_service: FlightService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    record_store_client = HttpxRecordStoreClient.create(
        base_url=resolved_settings.record_store_url,
        timeout=resolved_settings.record_store_timeout_seconds,
    )
    session_store = InMemorySessionStore(
        ttl_seconds=resolved_settings.session_ttl_seconds
    )
    auth_service = AuthService(
        session_store=session_store,
        admin_password=resolved_settings.admin_password,
    )
    flight_service = FlightService(record_store=record_store_client)

    async def close_resources() -> None:
        await record_store_client.close()

    return AppContainer(
        settings=resolved_settings,
        record_store_client=record_store_client,
        session_store=session_store,
        auth_service=auth_service,
        flight_service=flight_service,
        close_resources=close_resources,
    )
