"""Orders endpoints: shared, index-addressed list of (item, qty) pairs."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from bread_order.api.auth import require_auth
from bread_order.api.deps import get_datastore, order_index
from bread_order.schemas.auth import CurrentUser, OkResponse
from bread_order.schemas.orders import Order, OrderSummary
from bread_order.services import orders as order_service
from bread_order.services.datastore import DataStore

router = APIRouter()


@router.get("")
def list_orders(
    datastore: Annotated[DataStore, Depends(get_datastore)],
) -> list[Any]:
    """Return every order in storage order. Indexes in this list address PUT/DELETE."""
    return datastore.orders.list()


@router.get("/summary", response_model=OrderSummary)
def get_summary(
    datastore: Annotated[DataStore, Depends(get_datastore)],
) -> OrderSummary:
    """Orders grouped by item with summed quantities, for the daily summary email."""
    return order_service.summarize(datastore.orders.list())


@router.post("", status_code=201)
def create_order(
    body: Order,
    datastore: Annotated[DataStore, Depends(get_datastore)],
    _user: Annotated[CurrentUser, Depends(require_auth)],
) -> list[Any]:
    """
    Append an order and return the full updated list.

    The item name is not checked against the catalog.
    """
    return order_service.create_order(datastore.orders, body)


@router.put("/{index}")
def replace_order(
    _user: Annotated[CurrentUser, Depends(require_auth)],
    index: Annotated[int, Depends(order_index)],
    body: Order,
    datastore: Annotated[DataStore, Depends(get_datastore)],
) -> list[Any]:
    """Replace one order. An unknown index is 404 before the body is checked."""
    return order_service.replace_order(datastore.orders, index, body)


@router.delete("/{index}", response_model=OkResponse)
def delete_order(
    _user: Annotated[CurrentUser, Depends(require_auth)],
    index: Annotated[int, Depends(order_index)],
    datastore: Annotated[DataStore, Depends(get_datastore)],
) -> OkResponse:
    """Delete one order; every later order moves down one index."""
    order_service.delete_order(datastore.orders, index)
    return OkResponse()
