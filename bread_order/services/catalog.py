"""Catalog maintenance: adding items and renaming them with the order cascade."""

import logging
from typing import Any

from bread_order.core.errors import ValidationError
from bread_order.services.records import RecordStore

logger = logging.getLogger(__name__)


def add_item(items: RecordStore, name: str) -> list[Any]:
    """Append a trimmed, non-empty, not-yet-listed name; return the full catalog."""
    trimmed = name.strip()
    with items.file.lock:
        current = items.list()
        if not trimmed or trimmed in current:
            raise ValidationError("Item name invalid or already exists")
        catalog = items.append(trimmed)
    logger.info("Item created", extra={"item": trimmed, "item_count": len(catalog)})
    return catalog


def cascade_rename(orders: RecordStore, old_name: str, new_name: str) -> int:
    """Point every order naming `old_name` at `new_name`. Returns how many changed."""
    with orders.file.lock:
        current = orders.list()
        changed = 0
        updated = []
        for order in current:
            if isinstance(order, dict) and order.get("item") == old_name:
                updated.append({"item": new_name, "qty": order.get("qty")})
                changed += 1
            else:
                updated.append(order)
        orders.replace_all(updated)
    return changed


def rename_item(
    items: RecordStore,
    orders: RecordStore,
    index: int,
    new_name: str,
) -> list[Any]:
    """
    Rename the catalog entry at `index` and carry the rename into orders.

    The catalog is written first, then orders are reloaded and rewritten as a
    separate write. The two writes are not transactional: a crash between them
    leaves the catalog renamed and orders still naming the old item.
    """
    with items.file.lock:
        old_name = items.get(index)
        trimmed = new_name.strip()
        if not trimmed:
            raise ValidationError("Name cannot be empty")
        if trimmed != old_name and trimmed in items.list():
            raise ValidationError("Name already exists")
        catalog = items.replace_at(index, trimmed)

    if trimmed == old_name:
        return catalog

    changed = cascade_rename(orders, old_name, trimmed)
    logger.info(
        "Item renamed",
        extra={"old_name": old_name, "new_name": trimmed, "orders_updated": changed},
    )
    return catalog
