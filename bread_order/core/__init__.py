"""Core app configuration, persistence and sessions."""

from bread_order.core.config import get_settings
from bread_order.core.sessions import SessionStore
from bread_order.core.storage import JsonFile

__all__ = ["get_settings", "JsonFile", "SessionStore"]
