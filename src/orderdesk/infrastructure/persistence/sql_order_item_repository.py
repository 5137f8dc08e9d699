"""SQLAlchemy-backed implementation of OrderItemRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from orderdesk.domain.model.order import OrderItem
from orderdesk.domain.repository.order_item_repository import OrderItemRepository
from orderdesk.infrastructure.persistence.database import is_storable_id, store_errors
from orderdesk.infrastructure.persistence.mappers import order_item_to_domain
from orderdesk.infrastructure.persistence.orm import OrderItemRecord


class SqlOrderItemRepository(OrderItemRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[OrderItem]:
        stmt = (
            select(OrderItemRecord)
            .options(joinedload(OrderItemRecord.item))
            .order_by(OrderItemRecord.id)
        )
        with store_errors(self._session):
            records = self._session.scalars(stmt).all()
            return [order_item_to_domain(r, with_item=True) for r in records]

    def get_by_id(self, order_item_id: int) -> OrderItem | None:
        if not is_storable_id(order_item_id):
            return None
        with store_errors(self._session):
            record = self._session.get(
                OrderItemRecord, order_item_id, options=[joinedload(OrderItemRecord.item)]
            )
            return order_item_to_domain(record, with_item=True) if record is not None else None

    def add(self, order_item: OrderItem) -> None:
        record = OrderItemRecord(
            item_id=order_item.item_id,
            quantity=order_item.quantity.value,
        )
        with store_errors(self._session):
            self._session.add(record)
            self._session.commit()
            order_item.id = record.id
