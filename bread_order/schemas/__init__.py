"""Pydantic request/response schemas."""

from bread_order.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    MeResponse,
    OkResponse,
)
from bread_order.schemas.health import HealthResponse
from bread_order.schemas.items import ItemIn
from bread_order.schemas.orders import Order, OrderSummary
from bread_order.schemas.users import (
    PasswordHash,
    UserCreate,
    UserListItem,
    UserRecord,
    UserUpdate,
)

__all__ = [
    "CurrentUser",
    "HealthResponse",
    "ItemIn",
    "LoginRequest",
    "LoginResponse",
    "MeResponse",
    "OkResponse",
    "Order",
    "OrderSummary",
    "PasswordHash",
    "UserCreate",
    "UserListItem",
    "UserRecord",
    "UserUpdate",
]
