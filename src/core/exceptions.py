"""Custom exceptions for the RealtyAnalytics API."""
from __future__ import annotations

from typing import Any, Dict, List, Optional


class RealtyAnalyticsError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# =============================================================================
# Request Errors
# =============================================================================


class ValidationError(RealtyAnalyticsError):
    """Raised when a request body or path parameter fails validation."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class NotFoundError(RealtyAnalyticsError):
    """Raised when a record with the requested id does not exist."""

    pass


class ConflictError(RealtyAnalyticsError):
    """Raised when a write would violate an application-level uniqueness rule."""

    pass


# =============================================================================
# Store Errors
# =============================================================================


class StoreError(RealtyAnalyticsError):
    """Raised when an unexpected failure occurs while accessing the entity store."""

    pass


__all__ = [
    "RealtyAnalyticsError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "StoreError",
]
