"""Property listing routes."""
from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response

from api.deps import get_store
from core.exceptions import NotFoundError
from core.logging_config import get_logger
from core.models import PropertyCreate, PropertyUpdate, validate_payload
from core.storage import EntityStore
from core.utils import parse_leading_int, store_operation

router = APIRouter()
LOGGER = get_logger(__name__)


def _property_id(raw: str) -> int:
    """Parse a path id; ids without leading digits can never match a property."""
    property_id = parse_leading_int(raw)
    if property_id is None:
        raise NotFoundError("Property not found")
    return property_id


@router.get("")
async def list_properties(
    store: EntityStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    """List every property."""
    with store_operation("Failed to fetch properties"):
        return [p.to_dict() for p in store.properties.get_all()]


@router.post("", status_code=201)
async def create_property(
    body: Any = Body(...),
    store: EntityStore = Depends(get_store),
) -> Dict[str, Any]:
    """Create a property. pricePerSqft is computed from price and sqft."""
    payload = validate_payload(PropertyCreate, body, "Invalid property data")

    with store_operation("Failed to create property"):
        prop = store.properties.insert(payload)

    LOGGER.info(
        f"Created property {prop.id}",
        extra={"extra_data": {"property_id": prop.id, "address": prop.address}},
    )
    return prop.to_dict()


@router.get("/{property_id}")
async def get_property(
    property_id: str,
    store: EntityStore = Depends(get_store),
) -> Dict[str, Any]:
    """Get a property by ID."""
    record_id = _property_id(property_id)
    with store_operation("Failed to fetch property"):
        prop = store.properties.get_by_id(record_id)

    if not prop:
        raise NotFoundError("Property not found")

    return prop.to_dict()


@router.put("/{property_id}")
async def update_property(
    property_id: str,
    body: Any = Body(...),
    store: EntityStore = Depends(get_store),
) -> Dict[str, Any]:
    """
    Apply a partial update to a property.

    Only fields present in the body change. pricePerSqft keeps the value it
    was given at creation. An unknown id is a 404 whatever the body holds.
    """
    record_id = _property_id(property_id)
    with store_operation("Failed to update property"):
        existing = store.properties.get_by_id(record_id)
    if not existing:
        raise NotFoundError("Property not found")

    payload = validate_payload(PropertyUpdate, body, "Invalid property data")

    with store_operation("Failed to update property"):
        prop = store.properties.update(record_id, payload.changes())

    if not prop:
        raise NotFoundError("Property not found")

    LOGGER.info(
        f"Updated property {record_id}",
        extra={"extra_data": {"property_id": record_id, "fields": sorted(payload.changes())}},
    )
    return prop.to_dict()


@router.delete("/{property_id}", status_code=204, response_class=Response)
async def delete_property(
    property_id: str,
    store: EntityStore = Depends(get_store),
) -> Response:
    """Delete a property."""
    record_id = _property_id(property_id)
    with store_operation("Failed to delete property"):
        deleted = store.properties.delete(record_id)

    if not deleted:
        raise NotFoundError("Property not found")

    LOGGER.info(f"Deleted property {record_id}")
    return Response(status_code=204)
