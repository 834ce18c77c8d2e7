"""Core module exports."""
from __future__ import annotations

from core.config import Settings, get_settings, reload_settings
from core.exceptions import (
    RealtyAnalyticsError,
    ValidationError,
    NotFoundError,
    ConflictError,
    StoreError,
)
from core.logging_config import (
    setup_logging,
    get_logger,
    log_request,
    JSONFormatter,
)
from core.models import (
    User,
    Property,
    MarketDataPoint,
    TeamActivity,
    Document,
    Comment,
)
from core.storage import EntityStore

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "reload_settings",
    # Store
    "EntityStore",
    # Models
    "User",
    "Property",
    "MarketDataPoint",
    "TeamActivity",
    "Document",
    "Comment",
    # Exceptions
    "RealtyAnalyticsError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "StoreError",
    # Logging
    "setup_logging",
    "get_logger",
    "log_request",
    "JSONFormatter",
]
