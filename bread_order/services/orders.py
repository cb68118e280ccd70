"""Order mutations and the grouped daily summary."""

from typing import Any

from bread_order.schemas.orders import Order, OrderSummary
from bread_order.services.records import RecordStore


def create_order(orders: RecordStore, order: Order) -> list[dict[str, Any]]:
    return orders.append(order.model_dump())


def replace_order(orders: RecordStore, index: int, order: Order) -> list[dict[str, Any]]:
    return orders.replace_at(index, order.model_dump())


def delete_order(orders: RecordStore, index: int) -> list[dict[str, Any]]:
    return orders.delete_at(index)


def summarize(orders: list[dict[str, Any]]) -> OrderSummary:
    """
    Group orders by item name and total their quantities.

    Items appear in the order they are first seen. Records that are not
    well-formed orders (hand-edited files) are skipped.
    """
    totals: dict[str, int] = {}
    counted = 0
    for raw in orders:
        if not isinstance(raw, dict):
            continue
        item = raw.get("item")
        qty = raw.get("qty")
        if not isinstance(item, str) or isinstance(qty, bool) or not isinstance(qty, int):
            continue
        totals[item] = totals.get(item, 0) + qty
        counted += 1
    lines = [f"{item}: {qty}" for item, qty in totals.items()]
    return OrderSummary(totals=totals, lines=lines, order_count=counted)
