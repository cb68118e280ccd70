"""Schemas for orders and the daily order summary."""

from pydantic import BaseModel, Field, StrictInt, StrictStr

SUMMARY_SUBJECT = "Daily Bread Order Summary"


class Order(BaseModel):
    """
    One unit of demand: an item name and a positive quantity.

    `item` is not checked against the catalog; orders may name items the
    catalog no longer lists.
    """

    item: StrictStr
    qty: StrictInt = Field(..., gt=0)


class OrderSummary(BaseModel):
    """Orders grouped by item, ready to be pasted into an email."""

    subject: str = SUMMARY_SUBJECT
    totals: dict[str, int] = Field(default_factory=dict)
    lines: list[str] = Field(default_factory=list)
    order_count: int = Field(default=0, ge=0)
