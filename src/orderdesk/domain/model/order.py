"""Order and line-item records.

An Order links one Customer to one OrderItem (line item). Both links are
plain foreign-key ids; the ``customer`` and ``order_item`` attributes are
only populated when the repository loads the associations.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.customer import Customer
from orderdesk.domain.model.item import Item
from orderdesk.domain.model.value_objects import Money, Quantity


def to_naive_utc(value: datetime) -> datetime:
    """Order dates are stored as naive UTC timestamps."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


@dataclass
class OrderItem:
    """A quantity of one catalog item."""

    id: int | None
    item_id: int
    quantity: Quantity
    item: Item | None = None

    @staticmethod
    def create(item_id: int, quantity: int) -> OrderItem:
        if item_id is None or item_id <= 0:
            raise ValidationError("Line item must reference an item")
        return OrderItem(id=None, item_id=item_id, quantity=Quantity(quantity))

    @property
    def line_total(self) -> Money | None:
        if self.item is None:
            return None
        return self.item.price * self.quantity.value


@dataclass
class Order:
    """A purchase record.

    Use ``Order.create()`` for new orders.  ``__init__`` stays permissive so
    repositories can reconstitute rows without re-validating them.
    """

    id: int | None
    order_date: datetime
    customer_id: int
    order_item_id: int
    customer: Customer | None = None
    order_item: OrderItem | None = None

    @staticmethod
    def create(
        customer_id: int,
        order_item_id: int,
        order_date: datetime | None = None,
    ) -> Order:
        if customer_id is None or customer_id <= 0:
            raise ValidationError("Order must reference a customer")
        if order_item_id is None or order_item_id <= 0:
            raise ValidationError("Order must reference a line item")
        if order_date is None:
            order_date = datetime.now(timezone.utc)
        return Order(
            id=None,
            order_date=to_naive_utc(order_date),
            customer_id=customer_id,
            order_item_id=order_item_id,
        )

    def apply_changes(self, changes: Order) -> None:
        """Overwrite the mutable fields: date, customer and line item.

        The id is never taken from *changes*.  Loaded associations are
        dropped because they may no longer match the new references.
        """
        self.order_date = to_naive_utc(changes.order_date)
        self.customer_id = changes.customer_id
        self.order_item_id = changes.order_item_id
        self.customer = None
        self.order_item = None
