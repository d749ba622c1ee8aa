"""Flight record endpoints proxied to the record store."""

from typing import Any

from fastapi import APIRouter

from flight_tracker.api.deps import ContainerDep, SessionDep
from flight_tracker.api.models import FlightRequest

router = APIRouter(prefix="/api", tags=["flights"])


@router.get("/flights")
async def list_flights(container: ContainerDep) -> Any:
    """Return every flight known to the record store."""
    return await container.flight_service.list_flights()


@router.post("/flights")
async def create_flight(
    payload: FlightRequest, session: SessionDep, container: ContainerDep
) -> dict[str, object]:
    """Submit a flight on behalf of the caller."""
    result = await container.flight_service.create_flight(
        payload.to_fields(), session.data
    )
    return {"success": True, **result}


@router.delete("/flights/{flight_id}")
async def delete_flight(
    flight_id: str, session: SessionDep, container: ContainerDep
) -> dict[str, bool]:
    """Delete a flight; the record store decides ownership."""
    await container.flight_service.delete_flight(flight_id, session.data)
    return {"success": True}


@router.get("/admin/flights")
async def list_admin_flights(
    session: SessionDep, container: ContainerDep
) -> Any:
    """Return the admin listing of all flights."""
    return await container.flight_service.list_flights_for_admin(session.data)
