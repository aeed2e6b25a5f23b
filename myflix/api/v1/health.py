"""Health check endpoint with database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends

from myflix.api.v1.auth import get_context, get_store
from myflix.core.context import AppContext
from myflix.core.database import StoreSession, check_db_connected
from myflix.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(
    ctx: Annotated[AppContext, Depends(get_context)],
    store: Annotated[StoreSession, Depends(get_store)],
) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring.
    """
    db_status = "connected" if check_db_connected(store.db) else "disconnected"

    return HealthResponse(
        status="ok",
        environment=ctx.settings.APP_ENV,
        database=db_status,
    )
