"""Record and payload models for every entity held by the store.

Records are what the store keeps and what the API returns. ``*Create``
payloads are the insert schemas: they omit the server-generated fields
(id, createdAt, derived values) and reject unknown keys. JSON field names
are camelCase because that is what the dashboard client reads and sends.
"""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar, Dict, FrozenSet, List, Literal, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from core.exceptions import ValidationError

MarketPosition = Literal["Above Average", "Market Average", "Below Average"]
PropertyStatus = Literal["active", "pending", "sold"]
DocumentType = Literal["pdf", "excel", "word", "other"]

BATHROOMS_QUANTUM = Decimal("0.1")

PayloadT = TypeVar("PayloadT", bound=BaseModel)


# =============================================================================
# Base Models
# =============================================================================


class Record(BaseModel):
    """Base for stored records."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return self.model_dump(mode="json", by_alias=True)


class Payload(BaseModel):
    """Base for insert/update request bodies."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


# =============================================================================
# Users
# =============================================================================


class UserCreate(Payload):
    """Insert schema for a user."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    role: str
    initials: str = Field(..., min_length=1, max_length=4)


class User(Record):
    """A team member. Passwords are stored as given."""

    username: str
    password: str
    name: str
    role: str
    initials: str


# =============================================================================
# Properties
# =============================================================================


class PropertyCreate(Payload):
    """Insert schema for a property listing."""

    address: str = Field(..., min_length=1)
    price: int = Field(..., ge=0)
    bedrooms: int = Field(..., ge=0)
    bathrooms: Decimal = Field(..., ge=0, max_digits=3, decimal_places=1)
    sqft: int = Field(..., gt=0)
    market_position: MarketPosition
    image_url: Optional[str] = None
    status: PropertyStatus = "active"
    days_on_market: Optional[int] = Field(0, ge=0)

    @field_validator("bathrooms")
    @classmethod
    def quantize_bathrooms(cls, v: Decimal) -> Decimal:
        """Store bathrooms with exactly one fractional digit ("2" -> "2.0")."""
        return v.quantize(BATHROOMS_QUANTUM)


class PropertyUpdate(Payload):
    """Partial update for a property. Only supplied fields are applied."""

    # Fields the client may send as null; everything else must carry a value.
    NULLABLE_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"image_url", "days_on_market"})

    address: Optional[str] = Field(None, min_length=1)
    price: Optional[int] = Field(None, ge=0)
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[Decimal] = Field(None, ge=0, max_digits=3, decimal_places=1)
    sqft: Optional[int] = Field(None, gt=0)
    market_position: Optional[MarketPosition] = None
    image_url: Optional[str] = None
    status: Optional[PropertyStatus] = None
    days_on_market: Optional[int] = Field(None, ge=0)

    @field_validator("bathrooms")
    @classmethod
    def quantize_bathrooms(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        if v is None:
            return None
        return v.quantize(BATHROOMS_QUANTUM)

    @model_validator(mode="after")
    def reject_null_required_fields(self) -> "PropertyUpdate":
        """A field that is required on insert cannot be cleared by an update."""
        for name in self.model_fields_set - self.NULLABLE_FIELDS:
            if getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> Dict[str, Any]:
        """Fields explicitly present in the request body."""
        return self.model_dump(exclude_unset=True)


class Property(Record):
    """A property listing. price_per_sqft is fixed at creation."""

    address: str
    price: int
    bedrooms: int
    bathrooms: Decimal
    sqft: int
    price_per_sqft: int
    market_position: MarketPosition
    image_url: Optional[str] = None
    status: PropertyStatus = "active"
    days_on_market: Optional[int] = 0
    created_at: datetime


# =============================================================================
# Market Data
# =============================================================================


class MarketDataCreate(Payload):
    """Insert schema for a monthly market data point."""

    month: str = Field(..., min_length=1)
    avg_price: int = Field(..., ge=0)
    competitor_avg_price: int = Field(..., ge=0)
    active_listings: int = Field(..., ge=0)
    days_on_market: int = Field(..., ge=0)


class MarketDataPoint(Record):
    month: str
    avg_price: int
    competitor_avg_price: int
    active_listings: int
    days_on_market: int
    created_at: datetime


# =============================================================================
# Team Activity, Documents, Comments
# =============================================================================


class TeamActivityCreate(Payload):
    """Insert schema for a team activity entry."""

    user_id: int
    action: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    related_property: Optional[str] = None


class TeamActivity(Record):
    user_id: int
    action: str
    description: str
    related_property: Optional[str] = None
    created_at: datetime


class DocumentCreate(Payload):
    """Insert schema for a shared document."""

    name: str = Field(..., min_length=1)
    type: DocumentType
    shared_by: int
    file_url: Optional[str] = None


class Document(Record):
    name: str
    type: DocumentType
    shared_by: int
    file_url: Optional[str] = None
    created_at: datetime


class CommentCreate(Payload):
    """Insert schema for a team comment."""

    user_id: int
    content: str = Field(..., min_length=1)


class Comment(Record):
    user_id: int
    content: str
    created_at: datetime


# =============================================================================
# Validation Helpers
# =============================================================================


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Flatten pydantic error dicts into the itemized shape the client expects.

    Each item carries the offending field path, a readable message and the
    pydantic error code.
    """
    return [
        {
            "path": list(error.get("loc", ())),
            "message": error.get("msg", ""),
            "code": error.get("type", "invalid"),
        }
        for error in errors
    ]


def validate_payload(model: Type[PayloadT], data: Any, message: str) -> PayloadT:
    """
    Validate a decoded JSON body against an insert/update schema.

    Args:
        model: Payload class to validate against.
        data: Decoded request body.
        message: Top-level message for the 400 response, e.g. "Invalid property data".

    Returns:
        The validated payload.

    Raises:
        ValidationError: With one itemized entry per failing field.
    """
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(message, format_validation_errors(e.errors())) from e


__all__ = [
    "Record",
    "Payload",
    "User",
    "UserCreate",
    "Property",
    "PropertyCreate",
    "PropertyUpdate",
    "MarketDataPoint",
    "MarketDataCreate",
    "TeamActivity",
    "TeamActivityCreate",
    "Document",
    "DocumentCreate",
    "Comment",
    "CommentCreate",
    "format_validation_errors",
    "validate_payload",
]
