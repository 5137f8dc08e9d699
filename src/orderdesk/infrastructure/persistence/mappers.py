"""Record <-> domain translation for the SQLAlchemy repositories."""

from __future__ import annotations

from orderdesk.domain.model.customer import Customer
from orderdesk.domain.model.item import Item
from orderdesk.domain.model.order import Order, OrderItem
from orderdesk.domain.model.value_objects import Money, Quantity
from orderdesk.infrastructure.persistence.orm import (
    CustomerRecord,
    ItemRecord,
    OrderItemRecord,
    OrderRecord,
)


def customer_to_domain(record: CustomerRecord) -> Customer:
    return Customer(id=record.id, name=record.name)


def item_to_domain(record: ItemRecord) -> Item:
    return Item(id=record.id, name=record.name, price=Money.of(record.price))


def order_item_to_domain(record: OrderItemRecord, with_item: bool = False) -> OrderItem:
    return OrderItem(
        id=record.id,
        item_id=record.item_id,
        quantity=Quantity(record.quantity),
        item=item_to_domain(record.item) if with_item else None,
    )


def order_to_domain(record: OrderRecord) -> Order:
    """Map an order whose customer and line item were eagerly loaded."""
    return Order(
        id=record.id,
        order_date=record.order_date,
        customer_id=record.customer_id,
        order_item_id=record.order_item_id,
        customer=customer_to_domain(record.customer),
        order_item=order_item_to_domain(record.order_item, with_item=True),
    )
