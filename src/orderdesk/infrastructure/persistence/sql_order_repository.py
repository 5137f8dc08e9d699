"""SQLAlchemy-backed implementation of OrderRepository."""

from __future__ import annotations

from sqlalchemy import Select, delete, insert, select, update
from sqlalchemy.orm import Session, joinedload

from orderdesk.domain.model.order import Order, to_naive_utc
from orderdesk.domain.model.value_objects import Money
from orderdesk.domain.model.view import CustomerOrderView
from orderdesk.domain.repository.order_repository import OrderRepository
from orderdesk.infrastructure.persistence.database import is_storable_id, store_errors
from orderdesk.infrastructure.persistence.mappers import order_to_domain
from orderdesk.infrastructure.persistence.orm import (
    CustomerRecord,
    ItemRecord,
    OrderItemRecord,
    OrderRecord,
)


class SqlOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def list_all(self) -> list[Order]:
        with store_errors(self._session):
            records = self._session.scalars(
                self._with_associations().order_by(OrderRecord.id)
            ).all()
            return [order_to_domain(r) for r in records]

    def list_view(self) -> list[CustomerOrderView]:
        stmt = (
            select(
                CustomerRecord.id.label("customer_id"),
                CustomerRecord.name.label("customer_name"),
                ItemRecord.name.label("item_name"),
                ItemRecord.price,
                OrderItemRecord.quantity,
                OrderRecord.order_date,
            )
            .select_from(OrderRecord)
            .join(CustomerRecord, OrderRecord.customer_id == CustomerRecord.id)
            .join(OrderItemRecord, OrderRecord.order_item_id == OrderItemRecord.id)
            .join(ItemRecord, OrderItemRecord.item_id == ItemRecord.id)
            .order_by(OrderRecord.id)
        )
        with store_errors(self._session):
            rows = self._session.execute(stmt).all()
        return [
            CustomerOrderView(
                customer_id=row.customer_id,
                customer_name=row.customer_name,
                item_name=row.item_name,
                price=Money.of(row.price),
                quantity=row.quantity,
                order_date=row.order_date,
            )
            for row in rows
        ]

    def get_by_id(self, order_id: int) -> Order | None:
        if not is_storable_id(order_id):
            return None
        with store_errors(self._session):
            record = self._session.scalars(
                self._with_associations().where(OrderRecord.id == order_id)
            ).one_or_none()
            return order_to_domain(record) if record is not None else None

    def add(self, order: Order) -> int:
        stmt = insert(OrderRecord.__table__).values(
            order_date=to_naive_utc(order.order_date),
            customer_id=order.customer_id,
            order_item_id=order.order_item_id,
        )
        with store_errors(self._session):
            result = self._session.execute(stmt)
            self._session.commit()
        if result.rowcount:
            order.id = result.inserted_primary_key[0]
        return result.rowcount

    def update(self, order: Order) -> int:
        if order.id is None or not is_storable_id(order.id):
            return 0
        stmt = (
            update(OrderRecord)
            .where(OrderRecord.id == order.id)
            .values(
                order_date=to_naive_utc(order.order_date),
                customer_id=order.customer_id,
                order_item_id=order.order_item_id,
            )
        )
        with store_errors(self._session):
            result = self._session.execute(stmt)
            self._session.commit()
        return result.rowcount

    def delete(self, order_id: int) -> int:
        if not is_storable_id(order_id):
            return 0
        with store_errors(self._session):
            result = self._session.execute(
                delete(OrderRecord).where(OrderRecord.id == order_id)
            )
            self._session.commit()
        return result.rowcount

    # --- Query helpers --------------------------------------------------------

    @staticmethod
    def _with_associations() -> Select:
        return select(OrderRecord).options(
            joinedload(OrderRecord.customer),
            joinedload(OrderRecord.order_item).joinedload(OrderItemRecord.item),
        ).execution_options(populate_existing=True)
