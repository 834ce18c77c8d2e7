"""Read-time joins between records and the users they reference.

Joins are resolved on every read and never cached. A record whose user id
does not resolve is left out of the result entirely: the dashboard client
renders ``record.user.name`` unconditionally, so a null-filled row would
break it.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List

from core.logging_config import get_logger
from core.models import Record
from core.storage import EntityStore, UserCollection

LOGGER = get_logger(__name__)


def with_user(
    records: Iterable[Record],
    users: UserCollection,
    foreign_key: str,
    attach_as: str,
) -> List[Dict[str, Any]]:
    """
    Attach each record's referenced user under ``attach_as``.

    Args:
        records: Records holding a user id.
        users: Collection the ids are resolved against.
        foreign_key: Attribute on the record holding the user id (e.g. "user_id").
        attach_as: Response key for the joined user (e.g. "user").

    Returns:
        JSON-ready dicts, one per record whose user exists, in input order.
    """
    joined: List[Dict[str, Any]] = []
    dropped = 0

    for record in records:
        user = users.get_by_id(getattr(record, foreign_key))
        if user is None:
            dropped += 1
            continue

        item = record.to_dict()
        item[attach_as] = user.to_dict()
        joined.append(item)

    if dropped:
        LOGGER.debug(f"Dropped {dropped} record(s) referencing unknown users via {foreign_key}")

    return joined


def team_activity_with_users(store: EntityStore) -> List[Dict[str, Any]]:
    return with_user(store.team_activity.get_all(), store.users, "user_id", "user")


def documents_with_users(store: EntityStore) -> List[Dict[str, Any]]:
    return with_user(store.documents.get_all(), store.users, "shared_by", "sharedByUser")


def comments_with_users(store: EntityStore) -> List[Dict[str, Any]]:
    return with_user(store.comments.get_all(), store.users, "user_id", "user")


__all__ = [
    "with_user",
    "team_activity_with_users",
    "documents_with_users",
    "comments_with_users",
]
