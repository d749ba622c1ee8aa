"""Error taxonomy shared by services and the HTTP layer.

Every error carries a stable machine-readable ``kind`` and the HTTP status it
is reported with. Messages are shown to the caller, so they must not contain
secrets or upstream internals.
"""


class FlightTrackerError(Exception):
    """Base class for errors surfaced to API callers."""

    kind = "error"
    status_code = 500
    default_message = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class ValidationError(FlightTrackerError):
    """Raised when caller input is missing or malformed."""

    kind = "validation_error"
    status_code = 400
    default_message = "Invalid request"


class AuthError(FlightTrackerError):
    """Raised on bad credentials or a missing session."""

    kind = "auth_error"
    status_code = 401
    default_message = "Not authenticated"


class ForbiddenError(FlightTrackerError):
    """Raised when the record store rejects a delete for ownership."""

    kind = "forbidden"
    status_code = 403
    default_message = "Can only delete your own flights"


class NotFoundError(FlightTrackerError):
    """Raised when the record store does not know the record id."""

    kind = "not_found"
    status_code = 404
    default_message = "Flight not found"


class UpstreamError(FlightTrackerError):
    """Raised when the record store is unreachable or errors."""

    kind = "upstream_error"
    status_code = 500
    default_message = "Record store request failed"
