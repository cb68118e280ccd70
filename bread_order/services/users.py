"""Credential store: users.json holding usernames, roles and salted password hashes."""

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from bread_order.core.errors import ConflictError, NotFoundError, ValidationError
from bread_order.core.security import DEFAULT_ITERATIONS, hash_password
from bread_order.core.storage import JsonFile
from bread_order.schemas.users import UserListItem, UserRecord, normalize_role

logger = logging.getLogger(__name__)


class UserDirectory:
    """Admin-managed users; there is no self-service signup."""

    def __init__(self, file: JsonFile, iterations: int = DEFAULT_ITERATIONS) -> None:
        self.file = file
        self.iterations = iterations

    def _load(self) -> dict[str, Any]:
        data = self.file.read()
        if not isinstance(data.get("users"), list):
            data["users"] = []
        return data

    def get(self, username: str) -> UserRecord | None:
        for raw in self._load()["users"]:
            if isinstance(raw, dict) and raw.get("username") == username:
                try:
                    return UserRecord.model_validate(raw)
                except PydanticValidationError:
                    logger.warning("Malformed user record", extra={"username": username})
                    return None
        return None

    def list_users(self) -> list[UserListItem]:
        out: list[UserListItem] = []
        for raw in self._load()["users"]:
            if not isinstance(raw, dict) or not raw.get("username"):
                continue
            out.append(
                UserListItem(username=raw["username"], role=normalize_role(raw.get("role")))
            )
        return out

    def create_user(self, username: str | None, password: str | None, role: str | None = None) -> UserRecord:
        if not username or not password:
            raise ValidationError("username and password required")
        with self.file.lock:
            data = self._load()
            if any(u.get("username") == username for u in data["users"] if isinstance(u, dict)):
                raise ConflictError("User exists")
            record = UserRecord(
                username=username,
                role=normalize_role(role),
                password=hash_password(password, iterations=self.iterations),
            )
            data["users"].append(record.model_dump())
            self.file.write(data)
        logger.info("User created", extra={"username": username, "role": record.role})
        return record

    def update_user(self, username: str, password: str | None = None, role: str | None = None) -> UserRecord:
        """Re-hash the password and/or change the role; empty values are ignored."""
        with self.file.lock:
            data = self._load()
            for i, raw in enumerate(data["users"]):
                if isinstance(raw, dict) and raw.get("username") == username:
                    break
            else:
                raise NotFoundError("Not found")
            updated = dict(raw)
            if password:
                updated["password"] = hash_password(password, iterations=self.iterations).model_dump()
            if role:
                updated["role"] = normalize_role(role)
            try:
                record = UserRecord.model_validate(updated)
            except PydanticValidationError as e:
                # hand-edited record; a new password repairs a missing hash
                logger.warning("Malformed user record", extra={"username": username})
                raise ValidationError("Stored user record is malformed; set a new password") from e
            data["users"][i] = updated
            self.file.write(data)
        logger.info(
            "User updated",
            extra={"username": username, "password_changed": bool(password), "role": record.role},
        )
        return record

    def delete_user(self, username: str) -> None:
        with self.file.lock:
            data = self._load()
            remaining = [
                u for u in data["users"] if not (isinstance(u, dict) and u.get("username") == username)
            ]
            if len(remaining) == len(data["users"]):
                raise NotFoundError("Not found")
            data["users"] = remaining
            self.file.write(data)
        logger.info("User deleted", extra={"username": username})

    def ensure_default_admin(self, username: str, password: str) -> bool:
        """On first boot, create users.json with one admin. Returns True when seeded."""
        with self.file.lock:
            if self.file.exists():
                return False
            record = UserRecord(
                username=username,
                role="admin",
                password=hash_password(password, iterations=self.iterations),
            )
            self.file.write({"users": [record.model_dump()]})
        logger.info("Seeded default admin user", extra={"username": username})
        return True
