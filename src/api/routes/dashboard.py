"""Dashboard overview route."""
from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from api.deps import get_store
from core.logging_config import get_logger
from core.storage import EntityStore
from core.utils import store_operation
from domain.dashboard import compute_dashboard_stats

router = APIRouter()
LOGGER = get_logger(__name__)


@router.get("")
async def get_dashboard_stats(
    store: EntityStore = Depends(get_store),
) -> Dict[str, Any]:
    """
    Headline statistics for the overview cards.

    activeListings, avgPrice and daysOnMarket are computed from the current
    properties; the *Change and teamPerformance fields are fixed display values.
    """
    with store_operation("Failed to fetch dashboard stats"):
        stats = compute_dashboard_stats(store.properties.get_all())

    return stats.to_dict()
