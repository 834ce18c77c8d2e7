"""Headline numbers for the dashboard overview cards."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Sequence

from core.models import Property
from core.utils import divide_half_up

# The overview cards show trend deltas, but no history is kept to derive them
# from. These are fixed display values, not computed trends.
ACTIVE_LISTINGS_CHANGE = "+12.5%"
AVG_PRICE_CHANGE = "-2.1%"
DAYS_ON_MARKET_CHANGE = "-5 days"
TEAM_PERFORMANCE = "94%"
TEAM_PERFORMANCE_CHANGE = "+7.2%"


@dataclass
class DashboardStats:
    """Aggregated dashboard statistics."""

    active_listings: int
    avg_price: int
    days_on_market: int

    @property
    def avg_price_display(self) -> str:
        """Average price in thousands, e.g. 450000 -> "$450K"."""
        return f"${divide_half_up(self.avg_price, 1000)}K"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "activeListings": self.active_listings,
            "activeListingsChange": ACTIVE_LISTINGS_CHANGE,
            "avgPrice": self.avg_price_display,
            "avgPriceChange": AVG_PRICE_CHANGE,
            "daysOnMarket": self.days_on_market,
            "daysOnMarketChange": DAYS_ON_MARKET_CHANGE,
            "teamPerformance": TEAM_PERFORMANCE,
            "teamPerformanceChange": TEAM_PERFORMANCE_CHANGE,
        }


def compute_dashboard_stats(properties: Sequence[Property]) -> DashboardStats:
    """
    Aggregate the property collection into dashboard statistics.

    Args:
        properties: Every property in the store.

    Returns:
        DashboardStats; averages are 0 when there are no properties.
    """
    active_listings = sum(1 for p in properties if p.status == "active")

    if not properties:
        return DashboardStats(active_listings=0, avg_price=0, days_on_market=0)

    count = len(properties)
    avg_price = divide_half_up(sum(p.price for p in properties), count)
    avg_days = divide_half_up(sum(p.days_on_market or 0 for p in properties), count)

    return DashboardStats(
        active_listings=active_listings,
        avg_price=avg_price,
        days_on_market=avg_days,
    )


__all__ = ["DashboardStats", "compute_dashboard_stats"]
