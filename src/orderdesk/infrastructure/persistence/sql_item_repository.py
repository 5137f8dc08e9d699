"""SQLAlchemy-backed implementation of ItemRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from orderdesk.domain.model.item import Item
from orderdesk.domain.repository.item_repository import ItemRepository
from orderdesk.infrastructure.persistence.database import is_storable_id, store_errors
from orderdesk.infrastructure.persistence.mappers import item_to_domain
from orderdesk.infrastructure.persistence.orm import ItemRecord


class SqlItemRepository(ItemRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Item]:
        with store_errors(self._session):
            records = self._session.scalars(
                select(ItemRecord).order_by(ItemRecord.id)
            ).all()
            return [item_to_domain(r) for r in records]

    def get_by_id(self, item_id: int) -> Item | None:
        if not is_storable_id(item_id):
            return None
        with store_errors(self._session):
            record = self._session.get(ItemRecord, item_id)
            return item_to_domain(record) if record is not None else None

    def add(self, item: Item) -> None:
        record = ItemRecord(name=item.name, price=item.price.amount)
        with store_errors(self._session):
            self._session.add(record)
            self._session.commit()
            item.id = record.id
