"""Engine and session plumbing shared by the SQLAlchemy repositories."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.exc import (
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)
from sqlalchemy.orm import Session, sessionmaker

from orderdesk.domain.exceptions import (
    PersistenceError,
    SchemaMissingError,
    StoreUnavailableError,
)
from orderdesk.infrastructure.persistence.orm import Base

logger = logging.getLogger(__name__)

# Widest primary key any supported backend can hold (signed 64-bit).
MAX_ROW_ID = 2**63 - 1


def create_store_engine(database_url: str, echo: bool = False, **kwargs) -> Engine:
    """Build an engine; SQLite connections get foreign keys switched on."""
    engine = create_engine(database_url, echo=echo, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_schema(engine: Engine) -> None:
    """Create any of the four tables that do not exist yet."""
    Base.metadata.create_all(engine)
    logger.info("Schema ready on %s", engine.url.render_as_string(hide_password=True))


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine)


@contextmanager
def store_errors(session: Session) -> Iterator[None]:
    """Translate driver errors into domain exceptions, rolling back first."""
    try:
        yield
    except (OperationalError, InterfaceError) as exc:
        session.rollback()
        if "no such table" in str(exc.orig):
            raise SchemaMissingError(
                "Database tables are missing; run 'orderdesk db init'"
            ) from exc
        raise StoreUnavailableError(str(exc.orig or exc)) from exc
    except IntegrityError as exc:
        session.rollback()
        raise PersistenceError(f"Constraint violated: {exc.orig}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise PersistenceError(str(exc)) from exc


def is_storable_id(value: int) -> bool:
    """Whether *value* fits the primary-key range; anything else matches no row."""
    return 0 < value <= MAX_ROW_ID
