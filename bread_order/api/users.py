"""Admin-only user management over users.json."""

from typing import Annotated

from fastapi import APIRouter, Depends

from bread_order.api.auth import require_admin
from bread_order.api.deps import get_datastore, get_sessions
from bread_order.core.sessions import SessionStore
from bread_order.schemas.auth import CurrentUser, OkResponse
from bread_order.schemas.users import UserCreate, UserListItem, UserUpdate
from bread_order.services.datastore import DataStore

router = APIRouter()


@router.get("", response_model=list[UserListItem])
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    datastore: Annotated[DataStore, Depends(get_datastore)],
) -> list[UserListItem]:
    """List all users without their password hashes."""
    return datastore.users.list_users()


@router.post("", response_model=OkResponse, status_code=201)
def create_user(
    body: UserCreate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    datastore: Annotated[DataStore, Depends(get_datastore)],
) -> OkResponse:
    datastore.users.create_user(body.username, body.password, body.role)
    return OkResponse()


@router.put("/{username}", response_model=OkResponse)
def update_user(
    username: str,
    body: UserUpdate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    datastore: Annotated[DataStore, Depends(get_datastore)],
    sessions: Annotated[SessionStore, Depends(get_sessions)],
) -> OkResponse:
    """Change password and/or role. Open sessions of the user take the new role."""
    record = datastore.users.update_user(username, password=body.password, role=body.role)
    sessions.update_role(record.username, record.role)
    return OkResponse()


@router.delete("/{username}", response_model=OkResponse)
def delete_user(
    username: str,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    datastore: Annotated[DataStore, Depends(get_datastore)],
    sessions: Annotated[SessionStore, Depends(get_sessions)],
) -> OkResponse:
    """Delete a user and end every session they hold."""
    datastore.users.delete_user(username)
    sessions.revoke_user(username)
    return OkResponse()
