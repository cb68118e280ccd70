"""Request/response schemas for login, logout and session lookup."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials for login. Missing fields fail like a wrong password."""

    username: str = Field(default="", description="Username")
    password: str = Field(default="", description="Password")


class CurrentUser(BaseModel):
    """Authenticated user (username, role) held in the session table."""

    username: str
    role: str


class LoginResponse(BaseModel):
    ok: bool = True
    user: CurrentUser


class MeResponse(BaseModel):
    """Response for GET /me; `user` is null without a valid session."""

    user: CurrentUser | None = None


class OkResponse(BaseModel):
    ok: bool = True
