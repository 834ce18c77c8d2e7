"""In-memory entity store.

Every entity type lives in its own ``Collection``: a dict keyed by integer id
plus a counter that only ever moves forward, so ids are never reused after a
delete. The store is a plain object built once per application and handed to
the routes; nothing here is module-level state.

Store calls never await, so under the single event loop no request can see
another request's write half-applied.
"""
from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from core.logging_config import get_logger
from core.models import (
    Comment,
    Document,
    MarketDataPoint,
    Property,
    Record,
    TeamActivity,
    User,
)
from core.seed import seed_store
from core.utils import divide_half_up, utcnow

LOGGER = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


class Collection(Generic[RecordT]):
    """Records of one entity type keyed by auto-incrementing id."""

    def __init__(self, name: str, record_type: Type[RecordT], timestamped: bool = True) -> None:
        """
        Initialize an empty collection.

        Args:
            name: Collection name used in log messages.
            record_type: Record model stored in this collection.
            timestamped: Whether inserted records get a created_at timestamp.
        """
        self.name = name
        self.record_type = record_type
        self.timestamped = timestamped
        self._records: Dict[int, RecordT] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._records)

    def _derive(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Hook for computing derived fields at insert time."""
        return data

    def insert(self, payload: BaseModel) -> RecordT:
        """
        Store a new record built from an insert payload.

        Assigns the next id, attaches created_at for timestamped types and
        computes derived fields.

        Returns:
            The stored record including generated fields.
        """
        record_id = self._next_id
        self._next_id += 1

        data = payload.model_dump()
        data["id"] = record_id
        if self.timestamped:
            data["created_at"] = utcnow()

        record = self.record_type.model_validate(self._derive(data))
        self._records[record_id] = record
        LOGGER.debug(f"Inserted {self.name} #{record_id}")
        return record

    def get_all(self) -> List[RecordT]:
        """All records in insertion order."""
        return list(self._records.values())

    def get_by_id(self, record_id: int) -> Optional[RecordT]:
        return self._records.get(record_id)


class UserCollection(Collection[User]):
    """Users, with lookup by username."""

    def __init__(self) -> None:
        super().__init__("users", User, timestamped=False)

    def get_by_username(self, username: str) -> Optional[User]:
        for user in self._records.values():
            if user.username == username:
                return user
        return None


class PropertyCollection(Collection[Property]):
    """Property listings. The only collection that supports update and delete."""

    def __init__(self) -> None:
        super().__init__("properties", Property)

    def _derive(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data["price_per_sqft"] = divide_half_up(data["price"], data["sqft"])
        return data

    def update(self, record_id: int, fields: Dict[str, Any]) -> Optional[Property]:
        """
        Merge supplied fields onto an existing property.

        Derived fields are left as they were at creation, even when price or
        sqft change.

        Args:
            record_id: Property id.
            fields: Already-validated field values keyed by attribute name.

        Returns:
            The updated property, or None if no property has this id.
        """
        existing = self._records.get(record_id)
        if existing is None:
            return None

        updated = existing.model_copy(update=fields)
        self._records[record_id] = updated
        return updated

    def delete(self, record_id: int) -> bool:
        """Remove a property. Returns whether anything was removed."""
        return self._records.pop(record_id, None) is not None


class EntityStore:
    """
    All collections backing the API.

    Usage:
        store = EntityStore()          # seeded with demonstration data
        store = EntityStore(seed=False)  # empty, for tests
    """

    def __init__(self, seed: bool = True) -> None:
        self.users = UserCollection()
        self.properties = PropertyCollection()
        self.market_data: Collection[MarketDataPoint] = Collection("market_data", MarketDataPoint)
        self.team_activity: Collection[TeamActivity] = Collection("team_activity", TeamActivity)
        self.documents: Collection[Document] = Collection("documents", Document)
        self.comments: Collection[Comment] = Collection("comments", Comment)

        if seed:
            seed_store(self)

    def counts(self) -> Dict[str, int]:
        """Number of records per collection."""
        return {
            "users": len(self.users),
            "properties": len(self.properties),
            "market_data": len(self.market_data),
            "team_activity": len(self.team_activity),
            "documents": len(self.documents),
            "comments": len(self.comments),
        }


__all__ = [
    "Collection",
    "UserCollection",
    "PropertyCollection",
    "EntityStore",
]
