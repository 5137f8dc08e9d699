"""Abstract repository for order line items."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderdesk.domain.model.order import OrderItem


class OrderItemRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[OrderItem]:
        """Return every line item."""

    @abstractmethod
    def get_by_id(self, order_item_id: int) -> OrderItem | None:
        """Return a line item by its ID, or None if not found."""

    @abstractmethod
    def add(self, order_item: OrderItem) -> None:
        """Insert a new line item and assign its id."""
