"""Read-only projections built by joins across the order tables."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from orderdesk.domain.model.value_objects import Money


@dataclass(frozen=True)
class CustomerOrderView:
    """One row per (order, line item): who ordered what, and when."""

    customer_id: int
    customer_name: str
    item_name: str
    price: Money
    quantity: int
    order_date: datetime

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity
