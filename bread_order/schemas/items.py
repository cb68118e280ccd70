"""Request schema for catalog items."""

from pydantic import BaseModel, StrictStr


class ItemIn(BaseModel):
    """Body of POST /items and PUT /items/{index}. The name is trimmed by the service."""

    name: StrictStr
