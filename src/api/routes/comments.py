"""Team comment routes."""
from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends

from api.deps import get_store
from core.logging_config import get_logger
from core.models import CommentCreate, validate_payload
from core.storage import EntityStore
from core.utils import store_operation
from domain.relationships import comments_with_users

router = APIRouter()
LOGGER = get_logger(__name__)


@router.get("")
async def list_comments(
    store: EntityStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    with store_operation("Failed to fetch comments"):
        return comments_with_users(store)


@router.post("", status_code=201)
async def create_comment(
    body: Any = Body(...),
    store: EntityStore = Depends(get_store),
) -> Dict[str, Any]:
    payload = validate_payload(CommentCreate, body, "Invalid comment data")

    with store_operation("Failed to create comment"):
        comment = store.comments.insert(payload)

    LOGGER.info(f"Posted comment {comment.id}", extra={"extra_data": {"user_id": comment.user_id}})
    return comment.to_dict()
