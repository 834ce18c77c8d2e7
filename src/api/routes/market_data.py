"""Monthly market data routes."""
from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends

from api.deps import get_store
from core.logging_config import get_logger
from core.models import MarketDataCreate, validate_payload
from core.storage import EntityStore
from core.utils import store_operation

router = APIRouter()
LOGGER = get_logger(__name__)


@router.get("")
async def list_market_data(
    store: EntityStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    """List market data points in insertion (month) order."""
    with store_operation("Failed to fetch market data"):
        return [point.to_dict() for point in store.market_data.get_all()]


@router.post("", status_code=201)
async def create_market_data(
    body: Any = Body(...),
    store: EntityStore = Depends(get_store),
) -> Dict[str, Any]:
    """Append a market data point."""
    payload = validate_payload(MarketDataCreate, body, "Invalid market data")

    with store_operation("Failed to create market data"):
        point = store.market_data.insert(payload)

    LOGGER.info(f"Added market data for {point.month}", extra={"extra_data": {"market_data_id": point.id}})
    return point.to_dict()
