"""Proxy for flight records held by the external record store."""

import logging
from dataclasses import dataclass

import httpx

from flight_tracker.adapters.record_store_client import RecordStoreClient
from flight_tracker.domain.flights import (
    ANONYMOUS_SUBMITTER,
    FlightFields,
    FlightSubmission,
)
from flight_tracker.domain.sessions import SessionData
from flight_tracker.errors import (
    AuthError,
    ForbiddenError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_FIELD_LABELS = {
    "discord_user": "discordUser",
    "callsign": "callsign",
    "aircraft": "aircraft",
    "departure": "departure",
    "arrival": "arrival",
}


@dataclass
class FlightService:
    """Forwards flight operations to the record store.

    Ownership on delete is decided by the store. This service only rejects
    anonymous deletes before any network call.
    """

    record_store: RecordStoreClient

    async def list_flights(self) -> object:
        """Return the store listing verbatim."""
        try:
            return await self.record_store.list_records()
        except (httpx.HTTPError, ValueError) as exc:
            logger.exception("Failed to load flights from record store")
            raise UpstreamError("Failed to load data") from exc

    async def list_flights_for_admin(self, session: SessionData) -> object:
        """Return the store listing requested with admin visibility."""
        if not session.is_admin:
            raise AuthError("Admin access required")
        try:
            return await self.record_store.list_records(admin_request=True)
        except (httpx.HTTPError, ValueError) as exc:
            logger.exception("Failed to load admin flights from record store")
            raise UpstreamError("Failed to load admin data") from exc

    async def create_flight(
        self, fields: FlightFields, session: SessionData
    ) -> dict[str, object]:
        """Validate and forward a new flight, stamped with the submitter."""
        missing = fields.first_missing()
        if missing is not None:
            raise ValidationError(f"{_FIELD_LABELS[missing]} is required")
        submission = FlightSubmission(
            fields=fields.stripped(),
            submitted_by=session.user_id or ANONYMOUS_SUBMITTER,
        )
        try:
            result = await self.record_store.create_record(
                submission.to_store_payload()
            )
        except (httpx.HTTPError, ValueError) as exc:
            logger.exception(
                "Failed to add flight to record store",
                extra={"submitted_by": submission.submitted_by},
            )
            raise UpstreamError("Failed to add flight") from exc
        logger.info(
            "Flight submitted",
            extra={
                "callsign": submission.fields.callsign,
                "submitted_by": submission.submitted_by,
            },
        )
        return result if isinstance(result, dict) else {"data": result}

    async def delete_flight(self, flight_id: str, session: SessionData) -> None:
        """Forward a delete with the caller's identity."""
        if session.user_id is None:
            raise AuthError("Not authenticated")
        try:
            await self.record_store.delete_record(
                flight_id, user_id=session.user_id, is_admin=session.is_admin
            )
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            if status_code == httpx.codes.FORBIDDEN:
                logger.info(
                    "Record store refused delete",
                    extra={"flight_id": flight_id, "user_id": session.user_id},
                )
                raise ForbiddenError("Can only delete your own flights") from exc
            if status_code == httpx.codes.NOT_FOUND:
                raise NotFoundError("Flight not found") from exc
            logger.exception(
                "Record store delete failed", extra={"flight_id": flight_id}
            )
            raise UpstreamError("Failed to delete flight") from exc
        except httpx.HTTPError as exc:
            logger.exception(
                "Record store delete failed", extra={"flight_id": flight_id}
            )
            raise UpstreamError("Failed to delete flight") from exc
        logger.info(
            "Flight deleted",
            extra={
                "flight_id": flight_id,
                "user_id": session.user_id,
                "is_admin": session.is_admin,
            },
        )
