"""Demonstration data loaded into a fresh store.

Nothing persists across restarts, so every process starts from exactly these
rows.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List

from core.logging_config import get_logger
from core.models import MarketDataCreate, UserCreate

if TYPE_CHECKING:
    from core.storage import EntityStore

LOGGER = get_logger(__name__)


DEMO_USERS: List[Dict[str, Any]] = [
    {"username": "john_doe", "password": "password", "name": "John Doe", "role": "Senior Agent", "initials": "JD"},
    {"username": "sarah_johnson", "password": "password", "name": "Sarah Johnson", "role": "Market Analyst", "initials": "SJ"},
    {"username": "mike_torres", "password": "password", "name": "Mike Torres", "role": "Real Estate Agent", "initials": "MT"},
    {"username": "emma_rodriguez", "password": "password", "name": "Emma Rodriguez", "role": "Team Lead", "initials": "ER"},
]

DEMO_MARKET_DATA: List[Dict[str, Any]] = [
    {"month": "Jan", "avg_price": 420000, "competitor_avg_price": 415000, "active_listings": 240, "days_on_market": 25},
    {"month": "Feb", "avg_price": 435000, "competitor_avg_price": 428000, "active_listings": 235, "days_on_market": 23},
    {"month": "Mar", "avg_price": 445000, "competitor_avg_price": 440000, "active_listings": 245, "days_on_market": 22},
    {"month": "Apr", "avg_price": 458000, "competitor_avg_price": 452000, "active_listings": 250, "days_on_market": 20},
    {"month": "May", "avg_price": 470000, "competitor_avg_price": 465000, "active_listings": 248, "days_on_market": 19},
    {"month": "Jun", "avg_price": 485000, "competitor_avg_price": 478000, "active_listings": 247, "days_on_market": 18},
]


def seed_store(store: "EntityStore") -> None:
    """Insert the demonstration users and market data into an empty store."""
    for user in DEMO_USERS:
        store.users.insert(UserCreate(**user))

    for point in DEMO_MARKET_DATA:
        store.market_data.insert(MarketDataCreate(**point))

    LOGGER.info(
        "Seeded demonstration data",
        extra={"extra_data": {"users": len(DEMO_USERS), "market_data": len(DEMO_MARKET_DATA)}},
    )


__all__ = ["DEMO_USERS", "DEMO_MARKET_DATA", "seed_store"]
