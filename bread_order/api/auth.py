"""Cookie-session login/logout and auth dependencies (require_auth, require_admin)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from bread_order.api.deps import (
    get_app_settings,
    get_datastore,
    get_session_token,
    get_sessions,
)
from bread_order.core.config import Settings
from bread_order.core.errors import ForbiddenError, UnauthorizedError
from bread_order.core.sessions import SessionStore
from bread_order.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    MeResponse,
    OkResponse,
)
from bread_order.services import auth as auth_service
from bread_order.services.datastore import DataStore

router = APIRouter()


def get_optional_user(
    token: Annotated[str | None, Depends(get_session_token)],
    sessions: Annotated[SessionStore, Depends(get_sessions)],
) -> CurrentUser | None:
    """Dependency: the session's user, or None. Never raises."""
    return auth_service.current_user(sessions, token)


def require_auth(
    user: Annotated[CurrentUser | None, Depends(get_optional_user)],
) -> CurrentUser:
    """Dependency: require any valid session. Raises 401 otherwise."""
    if user is None:
        raise UnauthorizedError()
    return user


def require_admin(
    current_user: Annotated[CurrentUser, Depends(require_auth)],
) -> CurrentUser:
    """Dependency: require authenticated user with role 'admin'. Raises 403 for non-admin."""
    if current_user.role != "admin":
        raise ForbiddenError()
    return current_user


@router.post("/login", response_model=LoginResponse)
def login(
    response: Response,
    datastore: Annotated[DataStore, Depends(get_datastore)],
    sessions: Annotated[SessionStore, Depends(get_sessions)],
    settings: Annotated[Settings, Depends(get_app_settings)],
    body: LoginRequest | None = None,
) -> LoginResponse:
    """
    Authenticate with username and password; sets the HTTP-only session cookie.
    Unknown users and wrong passwords both return 401 "Invalid credentials".
    A missing body is treated as empty credentials.
    """
    body = body or LoginRequest()
    token, user = auth_service.login(datastore.users, sessions, body.username, body.password)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        path="/",
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return LoginResponse(ok=True, user=user)


@router.post("/logout", response_model=OkResponse)
def logout(
    response: Response,
    token: Annotated[str | None, Depends(get_session_token)],
    sessions: Annotated[SessionStore, Depends(get_sessions)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> OkResponse:
    """End the session (if any) and clear the cookie. Always succeeds."""
    auth_service.logout(sessions, token)
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return OkResponse()


@router.get("/me", response_model=MeResponse)
def me(user: Annotated[CurrentUser | None, Depends(get_optional_user)]) -> MeResponse:
    return MeResponse(user=user)
