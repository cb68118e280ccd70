"""JSON API routes."""

from fastapi import APIRouter

from bread_order.api import auth, health, items, orders, users

router = APIRouter()
router.include_router(auth.router, tags=["auth"])
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])
router.include_router(items.router, prefix="/items", tags=["items"])
router.include_router(users.router, prefix="/users", tags=["users"])
