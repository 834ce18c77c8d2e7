"""Pytest configuration and fixtures."""
from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

# Set test environment
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from core.models import (
    CommentCreate,
    DocumentCreate,
    Property,
    PropertyCreate,
    TeamActivityCreate,
)
from core.storage import EntityStore
from api.app import create_app


@pytest.fixture
def store() -> EntityStore:
    """A freshly seeded store: 4 users, 6 market data points, nothing else."""
    return EntityStore()


@pytest.fixture
def empty_store() -> EntityStore:
    """A store with no seed data."""
    return EntityStore(seed=False)


@pytest.fixture
def client(store):
    """TestClient bound to a new application serving ``store``."""
    application = create_app(store=store)
    with TestClient(application) as c:
        yield c


@pytest.fixture
def property_payload() -> dict:
    """A valid property body as the dashboard client sends it."""
    return {
        "address": "123 Maple Ave, Austin, TX",
        "price": 450000,
        "bedrooms": 3,
        "bathrooms": "2.5",
        "sqft": 1800,
        "marketPosition": "Market Average",
        "imageUrl": "https://example.com/maple.jpg",
        "status": "active",
        "daysOnMarket": 12,
    }


@pytest.fixture
def sample_property(store) -> Property:
    """A property inserted directly into the store."""
    return store.properties.insert(PropertyCreate(
        address="456 Oak St, Austin, TX",
        price=400000,
        bedrooms=2,
        bathrooms="2",
        sqft=1600,
        market_position="Below Average",
        days_on_market=30,
    ))


@pytest.fixture
def sample_activity(store):
    """Team activity by the first seeded user."""
    return store.team_activity.insert(TeamActivityCreate(
        user_id=1,
        action="listed",
        description="Listed a new property on Oak St",
        related_property="456 Oak St",
    ))


@pytest.fixture
def sample_document(store):
    """A document shared by the second seeded user."""
    return store.documents.insert(DocumentCreate(
        name="Q2 Market Report.pdf",
        type="pdf",
        shared_by=2,
    ))


@pytest.fixture
def sample_comment(store):
    return store.comments.insert(CommentCreate(user_id=3, content="Great comps on this one"))
