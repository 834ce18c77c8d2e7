"""Team member routes."""
from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends

from api.deps import get_store
from core.exceptions import ConflictError
from core.logging_config import get_logger
from core.models import UserCreate, validate_payload
from core.storage import EntityStore
from core.utils import store_operation

router = APIRouter()
LOGGER = get_logger(__name__)


@router.get("")
async def list_users(
    store: EntityStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    """List every user."""
    with store_operation("Failed to fetch users"):
        return [u.to_dict() for u in store.users.get_all()]


@router.post("", status_code=201)
async def create_user(
    body: Any = Body(...),
    store: EntityStore = Depends(get_store),
) -> Dict[str, Any]:
    """Create a user. Usernames must be unique."""
    payload = validate_payload(UserCreate, body, "Invalid user data")

    with store_operation("Failed to create user"):
        if store.users.get_by_username(payload.username):
            raise ConflictError("Username already exists")
        user = store.users.insert(payload)

    LOGGER.info(f"Created user {user.id}", extra={"extra_data": {"user_id": user.id, "username": user.username}})
    return user.to_dict()
