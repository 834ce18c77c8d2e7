"""Core utility functions."""
from __future__ import annotations

import re
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional

from core.exceptions import RealtyAnalyticsError, StoreError
from core.logging_config import get_logger

LOGGER = get_logger(__name__)

LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def utcnow() -> datetime:
    """Get current UTC datetime with timezone info. Always use this instead of datetime.now()."""
    return datetime.now(timezone.utc)


def divide_half_up(numerator: int, denominator: int) -> int:
    """
    Integer division rounded to the nearest integer, with halves going up.

    The dashboard client rounds this way (5/2 -> 3, -5/2 -> -2), so derived
    values must not use Python's banker's rounding. Stays in integers, so
    arbitrarily large prices cannot overflow a float.

    Args:
        numerator: Dividend.
        denominator: Divisor, must be positive.
    """
    return (2 * numerator + denominator) // (2 * denominator)


def parse_leading_int(value: str) -> Optional[int]:
    """
    Parse an id the way the dashboard client's server always has: leading
    whitespace and sign, then as many digits as are present ("12abc" -> 12).

    Returns:
        The parsed integer, or None when the string has no leading digits.
    """
    match = LEADING_INT_RE.match(value)
    if not match:
        return None
    return int(match.group(1))


@contextmanager
def store_operation(failure_message: str) -> Iterator[None]:
    """
    Wrap entity store access so unexpected failures surface as StoreError.

    Application errors (not found, conflicts, validation) pass through
    untouched. Anything else is logged with its traceback and replaced by a
    StoreError carrying only the generic failure message.

    Args:
        failure_message: Message returned to the client, e.g. "Failed to fetch properties".
    """
    try:
        yield
    except RealtyAnalyticsError:
        raise
    except Exception as e:
        LOGGER.error(f"{failure_message}: {e}", exc_info=True)
        raise StoreError(failure_message) from e
