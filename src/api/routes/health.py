"""Health check routes."""
from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from api.deps import get_store
from core.storage import EntityStore
from core.utils import utcnow

router = APIRouter()


@router.get("")
async def health_check(request: Request) -> Dict[str, Any]:
    """Basic health check - always returns OK."""
    return {
        "status": "ok",
        "service": "realty-analytics",
        "timestamp": utcnow().isoformat(),
        "environment": request.app.state.settings.environment,
    }


@router.get("/detailed")
async def detailed_health_check(
    store: EntityStore = Depends(get_store),
) -> Dict[str, Any]:
    """Health check including record counts per collection."""
    return {
        "status": "ok",
        "timestamp": utcnow().isoformat(),
        "collections": store.counts(),
    }
