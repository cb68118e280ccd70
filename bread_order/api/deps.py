"""Request-scoped access to the objects created at application startup."""

import re
from typing import Annotated

from fastapi import Depends, Request

from bread_order.core.config import Settings
from bread_order.core.sessions import SessionStore
from bread_order.services.datastore import DataStore

INDEX_PATTERN = re.compile(r"[0-9]+")


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_datastore(request: Request) -> DataStore:
    return request.app.state.datastore


def get_sessions(request: Request) -> SessionStore:
    return request.app.state.sessions


def get_session_token(request: Request) -> str | None:
    """Session token from the configured cookie, or None."""
    return request.cookies.get(request.app.state.settings.SESSION_COOKIE_NAME) or None


def parse_index(raw: str) -> int:
    """Path segment -> list index. Anything but ASCII digits maps to -1, which no list contains."""
    if not INDEX_PATTERN.fullmatch(raw):
        return -1
    return int(raw)


def order_index(
    index: str,
    datastore: Annotated[DataStore, Depends(get_datastore)],
) -> int:
    """
    Dependency: validated orders index from the path. Raises 404 when out of range.

    Runs before the request body is validated, so an unknown index is a 404
    even when the body is also invalid.
    """
    i = parse_index(index)
    datastore.orders.get(i)
    return i


def item_index(
    index: str,
    datastore: Annotated[DataStore, Depends(get_datastore)],
) -> int:
    """Dependency: validated catalog index from the path. Raises 404 when out of range."""
    i = parse_index(index)
    datastore.items.get(i)
    return i
