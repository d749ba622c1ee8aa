"""Request-scoped dependencies."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request, Response

from flight_tracker.containers import AppContainer
from flight_tracker.domain.sessions import SessionData


@dataclass(frozen=True)
class RequestSession:
    """The session id from the request cookie and the data it resolves to."""

    session_id: str | None
    data: SessionData


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def get_request_session(
    request: Request, container: Annotated[AppContainer, Depends(get_container)]
) -> RequestSession:
    """Resolve the caller's session from the session cookie."""
    session_id = request.cookies.get(container.settings.session_cookie_name)
    return RequestSession(
        session_id=session_id,
        data=container.auth_service.current_session(session_id),
    )


def set_session_cookie(
    response: Response, container: AppContainer, session_id: str
) -> None:
    """Attach the session cookie to a response."""
    settings = container.settings
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session_id,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )


def clear_session_cookie(response: Response, container: AppContainer) -> None:
    """Remove the session cookie from the client."""
    response.delete_cookie(
        key=container.settings.session_cookie_name,
        httponly=True,
        samesite="lax",
        secure=container.settings.session_cookie_secure,
    )


ContainerDep = Annotated[AppContainer, Depends(get_container)]
SessionDep = Annotated[RequestSession, Depends(get_request_session)]
