"""Catalog endpoints: list, add and rename bread items."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from bread_order.api.auth import require_admin
from bread_order.api.deps import get_datastore, item_index
from bread_order.schemas.auth import CurrentUser
from bread_order.schemas.items import ItemIn
from bread_order.services import catalog
from bread_order.services.datastore import DataStore

router = APIRouter()


# Responses are list[Any]: items.json is returned as stored, even when hand-edited.
@router.get("")
def list_items(
    datastore: Annotated[DataStore, Depends(get_datastore)],
) -> list[Any]:
    return datastore.items.list()


@router.post("", status_code=201)
def create_item(
    body: ItemIn,
    datastore: Annotated[DataStore, Depends(get_datastore)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> list[Any]:
    """Add a catalog item (admin only). Empty or duplicate names return 400."""
    return catalog.add_item(datastore.items, body.name)


@router.put("/{index}")
def rename_item(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    index: Annotated[int, Depends(item_index)],
    body: ItemIn,
    datastore: Annotated[DataStore, Depends(get_datastore)],
) -> list[Any]:
    """
    Rename the item at `index` (admin only) and return the full catalog.

    Orders naming the old item are rewritten to the new name in a second,
    separate write to orders.json.
    """
    return catalog.rename_item(datastore.items, datastore.orders, index, body.name)
