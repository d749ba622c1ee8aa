"""ASGI entrypoint for the flight tracker API."""

from flight_tracker.api.app import create_app
from flight_tracker.containers import build_container

app = create_app(build_container())
