"""Domain models for flight submissions."""

from dataclasses import dataclass

ANONYMOUS_SUBMITTER = "anonymous"


@dataclass(frozen=True)
class FlightFields:
    """Caller-supplied fields of a flight record."""

    discord_user: str
    callsign: str
    aircraft: str
    departure: str
    arrival: str

    def stripped(self) -> "FlightFields":
        """Return a copy with surrounding whitespace removed from every field."""
        return FlightFields(
            discord_user=self.discord_user.strip(),
            callsign=self.callsign.strip(),
            aircraft=self.aircraft.strip(),
            departure=self.departure.strip(),
            arrival=self.arrival.strip(),
        )

    def first_missing(self) -> str | None:
        """Return the name of the first empty field, if any."""
        for name in ("discord_user", "callsign", "aircraft", "departure", "arrival"):
            if not getattr(self, name).strip():
                return name
        return None


@dataclass(frozen=True)
class FlightSubmission:
    """A validated flight ready to be sent to the record store."""

    fields: FlightFields
    submitted_by: str

    def to_store_payload(self) -> dict[str, str]:
        """Serialize using the record store's wire names."""
        return {
            "discorduser": self.fields.discord_user,
            "call": self.fields.callsign,
            "plane": self.fields.aircraft,
            "dep": self.fields.departure,
            "ari": self.fields.arrival,
            "submittedBy": self.submitted_by,
        }
