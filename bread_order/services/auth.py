"""Login, logout and session lookup on top of the user directory and session table."""

import logging

from bread_order.core.errors import InvalidCredentialsError
from bread_order.core.security import verify_password
from bread_order.core.sessions import SessionStore
from bread_order.schemas.auth import CurrentUser
from bread_order.services.users import UserDirectory

logger = logging.getLogger(__name__)


def login(users: UserDirectory, sessions: SessionStore, username: str, password: str) -> tuple[str, CurrentUser]:
    """
    Verify credentials and open a session.

    Unknown usernames and wrong passwords raise the same InvalidCredentialsError
    so the response does not reveal which usernames exist.
    """
    user = users.get(username) if username else None
    if user is None or not verify_password(password, user.password):
        logger.info("Login failed", extra={"username": username})
        raise InvalidCredentialsError()
    token = sessions.create(user.username, user.role)
    logger.info("Login succeeded", extra={"username": user.username, "role": user.role})
    return token, CurrentUser(username=user.username, role=user.role)


def logout(sessions: SessionStore, token: str | None) -> None:
    sessions.delete(token)


def current_user(sessions: SessionStore, token: str | None) -> CurrentUser | None:
    return sessions.get(token)
