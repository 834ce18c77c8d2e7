"""Entity store dependency for FastAPI routes."""
from __future__ import annotations

from fastapi import Request

from core.storage import EntityStore


def get_store(request: Request) -> EntityStore:
    """
    FastAPI dependency that provides the application's entity store.

    The store is created once in ``create_app`` and kept on ``app.state``.

    Returns:
        The EntityStore shared by every request to this application.
    """
    return request.app.state.store


__all__ = ["get_store"]
