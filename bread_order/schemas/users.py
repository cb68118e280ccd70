"""Schemas for stored users and the admin user-management endpoints."""

from typing import Literal

from pydantic import BaseModel, Field

Role = Literal["admin", "user"]


class PasswordHash(BaseModel):
    """Salted PBKDF2 hash as stored in users.json."""

    algo: str
    iter: int = Field(..., ge=1)
    salt: str
    hash: str


class UserRecord(BaseModel):
    """One entry of the `users` array in users.json."""

    username: str
    role: Role = "user"
    password: PasswordHash


class UserListItem(BaseModel):
    """User entry for admin list (no password)."""

    username: str
    role: Role


class UserCreate(BaseModel):
    """Body of POST /users. Missing fields are reported by the service as a 400."""

    username: str | None = None
    password: str | None = None
    role: str | None = None


class UserUpdate(BaseModel):
    """Body of PUT /users/{username}; only the fields present are changed."""

    password: str | None = None
    role: str | None = None


def normalize_role(role: str | None) -> Role:
    """Anything other than 'admin' is stored as a plain user."""
    return "admin" if role == "admin" else "user"
