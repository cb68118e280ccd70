"""Process-scoped session table: token -> (username, role). Never persisted."""

import threading

from bread_order.core.security import new_session_token
from bread_order.schemas.auth import CurrentUser


class SessionStore:
    """
    In-memory session table.

    One instance lives on the application state from startup to shutdown;
    restarting the process therefore logs every user out.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, CurrentUser] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self, username: str, role: str) -> str:
        token = new_session_token()
        with self._lock:
            self._sessions[token] = CurrentUser(username=username, role=role)
        return token

    def get(self, token: str | None) -> CurrentUser | None:
        if not token:
            return None
        return self._sessions.get(token)

    def delete(self, token: str | None) -> None:
        """Remove a session; unknown or empty tokens are ignored."""
        if not token:
            return
        with self._lock:
            self._sessions.pop(token, None)

    def revoke_user(self, username: str) -> int:
        """Drop every session held by `username`. Returns the number removed."""
        with self._lock:
            tokens = [t for t, u in self._sessions.items() if u.username == username]
            for token in tokens:
                del self._sessions[token]
        return len(tokens)

    def update_role(self, username: str, role: str) -> None:
        with self._lock:
            for token, user in self._sessions.items():
                if user.username == username:
                    self._sessions[token] = CurrentUser(username=username, role=role)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()
