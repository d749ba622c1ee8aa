"""Pydantic models for API request bodies."""

from pydantic import AliasChoices, BaseModel, Field

from flight_tracker.domain.flights import FlightFields


class LoginRequest(BaseModel):
    """User login payload."""

    username: str | None = None


class AdminLoginRequest(BaseModel):
    """Admin login payload."""

    password: str | None = None


class FlightRequest(BaseModel):
    """Flight submission payload.

    Accepts both the camel-case names and the record store's short names.
    """

    discord_user: str | None = Field(
        default=None, validation_alias=AliasChoices("discordUser", "discorduser")
    )
    callsign: str | None = Field(
        default=None, validation_alias=AliasChoices("callsign", "call")
    )
    aircraft: str | None = Field(
        default=None, validation_alias=AliasChoices("aircraft", "plane")
    )
    departure: str | None = Field(
        default=None, validation_alias=AliasChoices("departure", "dep")
    )
    arrival: str | None = Field(
        default=None, validation_alias=AliasChoices("arrival", "ari")
    )

    def to_fields(self) -> FlightFields:
        return FlightFields(
            discord_user=self.discord_user or "",
            callsign=self.callsign or "",
            aircraft=self.aircraft or "",
            departure=self.departure or "",
            arrival=self.arrival or "",
        )
