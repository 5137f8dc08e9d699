"""Composition root. Wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Settings are read from ``ORDERDESK_*`` environment variables.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from sqlalchemy import Engine
from sqlalchemy.orm import Session

from orderdesk.application.order_data_access import OrderDataAccess
from orderdesk.infrastructure.persistence.database import (
    create_store_engine,
    make_session_factory,
)
from orderdesk.infrastructure.persistence.sql_customer_repository import (
    SqlCustomerRepository,
)
from orderdesk.infrastructure.persistence.sql_item_repository import SqlItemRepository
from orderdesk.infrastructure.persistence.sql_order_item_repository import (
    SqlOrderItemRepository,
)
from orderdesk.infrastructure.persistence.sql_order_repository import (
    SqlOrderRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str
    echo_sql: bool = False
    log_level: str = "INFO"
    log_dir: Path | None = None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    log_dir = env.get("ORDERDESK_LOG_DIR")
    return Settings(
        database_url=env.get(
            "ORDERDESK_DATABASE_URL", f"sqlite:///{_DATA_DIR / 'orderdesk.db'}"
        ),
        echo_sql=env.get("ORDERDESK_ECHO_SQL", "").strip().lower() in _TRUTHY,
        log_level=env.get("ORDERDESK_LOG_LEVEL", "INFO"),
        log_dir=Path(log_dir) if log_dir else None,
    )


def engine(settings: Settings) -> Engine:
    if settings.database_url.startswith("sqlite:///"):
        db_path = Path(settings.database_url.removeprefix("sqlite:///"))
        db_path.parent.mkdir(parents=True, exist_ok=True)
    return create_store_engine(settings.database_url, echo=settings.echo_sql)


@contextmanager
def unit_of_work(store: Engine) -> Iterator[Session]:
    """One session per unit of work, closed on exit."""
    with make_session_factory(store)() as session:
        yield session


def order_data_access(session: Session) -> OrderDataAccess:
    return OrderDataAccess(
        order_repo=SqlOrderRepository(session),
        customer_repo=SqlCustomerRepository(session),
        order_item_repo=SqlOrderItemRepository(session),
    )


def customer_repository(session: Session) -> SqlCustomerRepository:
    return SqlCustomerRepository(session)


def item_repository(session: Session) -> SqlItemRepository:
    return SqlItemRepository(session)


def order_item_repository(session: Session) -> SqlOrderItemRepository:
    return SqlOrderItemRepository(session)
