"""Health check endpoint with data-file storage status."""

from typing import Annotated

from fastapi import APIRouter, Depends

from bread_order.api.deps import get_app_settings, get_datastore
from bread_order.core.config import Settings
from bread_order.schemas.health import HealthResponse
from bread_order.services.datastore import DataStore

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(
    settings: Annotated[Settings, Depends(get_app_settings)],
    datastore: Annotated[DataStore, Depends(get_datastore)],
) -> HealthResponse:
    """
    Return service health and whether data is reaching disk.
    'memory' means writes are only held in process memory and will be lost on restart.
    """
    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        storage="memory" if datastore.in_memory else "writable",
    )
