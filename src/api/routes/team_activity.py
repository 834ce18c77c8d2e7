"""Team activity feed routes."""
from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends

from api.deps import get_store
from core.logging_config import get_logger
from core.models import TeamActivityCreate, validate_payload
from core.storage import EntityStore
from core.utils import store_operation
from domain.relationships import team_activity_with_users

router = APIRouter()
LOGGER = get_logger(__name__)


@router.get("")
async def list_team_activity(
    store: EntityStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    """List activity entries, each with its author under ``user``."""
    with store_operation("Failed to fetch team activity"):
        return team_activity_with_users(store)


@router.post("", status_code=201)
async def create_team_activity(
    body: Any = Body(...),
    store: EntityStore = Depends(get_store),
) -> Dict[str, Any]:
    """Log an activity. The user id is not checked against existing users."""
    payload = validate_payload(TeamActivityCreate, body, "Invalid activity data")

    with store_operation("Failed to create activity"):
        activity = store.team_activity.insert(payload)

    LOGGER.info(
        f"Logged activity {activity.id}: {activity.action}",
        extra={"extra_data": {"activity_id": activity.id, "user_id": activity.user_id}},
    )
    return activity.to_dict()
