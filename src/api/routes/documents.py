"""Shared document routes."""
from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends

from api.deps import get_store
from core.logging_config import get_logger
from core.models import DocumentCreate, validate_payload
from core.storage import EntityStore
from core.utils import store_operation
from domain.relationships import documents_with_users

router = APIRouter()
LOGGER = get_logger(__name__)


@router.get("")
async def list_documents(
    store: EntityStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    """List documents, each with the sharing user under ``sharedByUser``."""
    with store_operation("Failed to fetch documents"):
        return documents_with_users(store)


@router.post("", status_code=201)
async def create_document(
    body: Any = Body(...),
    store: EntityStore = Depends(get_store),
) -> Dict[str, Any]:
    """Share a document."""
    payload = validate_payload(DocumentCreate, body, "Invalid document data")

    with store_operation("Failed to create document"):
        document = store.documents.insert(payload)

    LOGGER.info(
        f"Shared document {document.id}",
        extra={"extra_data": {"document_id": document.id, "type": document.type, "shared_by": document.shared_by}},
    )
    return document.to_dict()
