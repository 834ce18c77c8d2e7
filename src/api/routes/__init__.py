"""API route modules."""
from __future__ import annotations

from . import (
    comments,
    dashboard,
    documents,
    health,
    market_data,
    properties,
    team_activity,
    users,
)

__all__ = [
    "comments",
    "dashboard",
    "documents",
    "health",
    "market_data",
    "properties",
    "team_activity",
    "users",
]
