"""Session login and logout endpoints."""

from fastapi import APIRouter, Response

from flight_tracker.api.deps import (
    ContainerDep,
    SessionDep,
    clear_session_cookie,
    set_session_cookie,
)
from flight_tracker.api.models import AdminLoginRequest, LoginRequest

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.get("/session")
async def current_session(session: SessionDep) -> dict[str, object]:
    """Return the caller's identity."""
    return {"isAdmin": session.data.is_admin, "userId": session.data.user_id}


@router.post("/admin")
async def admin_login(
    payload: AdminLoginRequest,
    session: SessionDep,
    container: ContainerDep,
    response: Response,
) -> dict[str, object]:
    """Log in with the admin password."""
    session_id, _ = container.auth_service.login_as_admin(
        session.session_id, payload.password
    )
    set_session_cookie(response, container, session_id)
    return {"success": True, "isAdmin": True}


@router.post("/login")
async def user_login(
    payload: LoginRequest,
    session: SessionDep,
    container: ContainerDep,
    response: Response,
) -> dict[str, object]:
    """Log in under a username."""
    session_id, data = container.auth_service.login_as_user(
        session.session_id, payload.username
    )
    set_session_cookie(response, container, session_id)
    return {"success": True, "userId": data.user_id}


@router.post("/logout")
async def logout(
    session: SessionDep, container: ContainerDep, response: Response
) -> dict[str, bool]:
    """Destroy the caller's session."""
    container.auth_service.logout(session.session_id)
    clear_session_cookie(response, container)
    return {"success": True}
