"""Fixtures backed by an in-memory SQLite database."""

from __future__ import annotations

from decimal import Decimal

import pytest
from sqlalchemy.pool import StaticPool

from orderdesk.infrastructure.persistence.database import (
    create_schema,
    create_store_engine,
    make_session_factory,
)
from orderdesk.infrastructure.persistence.orm import (
    CustomerRecord,
    ItemRecord,
    OrderItemRecord,
)


@pytest.fixture
def store():
    engine = create_store_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(store):
    with make_session_factory(store)() as session:
        yield session


@pytest.fixture
def seeded(session):
    """Two customers, two items, two line items (ids 1 and 2 throughout)."""
    session.add_all(
        [
            CustomerRecord(name="Alice"),
            CustomerRecord(name="Bob"),
            ItemRecord(name="Widget", price=Decimal("15.00")),
            ItemRecord(name="Gadget", price=Decimal("25.00")),
        ]
    )
    session.flush()
    session.add_all(
        [
            OrderItemRecord(item_id=1, quantity=3),
            OrderItemRecord(item_id=2, quantity=1),
        ]
    )
    session.commit()
    return session
