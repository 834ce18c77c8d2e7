"""Domain layer: read-time joins and dashboard aggregation over the entity store."""
from __future__ import annotations

from .dashboard import DashboardStats, compute_dashboard_stats
from .relationships import (
    with_user,
    team_activity_with_users,
    documents_with_users,
    comments_with_users,
)

__all__ = [
    # Dashboard
    "DashboardStats",
    "compute_dashboard_stats",
    # Relationships
    "with_user",
    "team_activity_with_users",
    "documents_with_users",
    "comments_with_users",
]
